#!/usr/bin/env python3
# webmerc/types.py
"""
Value types shared by the projection and tile modules.

Points and tiles are NamedTuples so they unpack like plain tuples:
    lng, lat = tile_upper_left(486, 332, 10)
    bounds = tile_geographic_bounds(*Tile(486, 332, 10))
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import NamedTuple, Sequence, Tuple

__all__ = [
    "GeoPoint",
    "MercatorPoint",
    "Tile",
    "BoundingBox",
    "format_bbox",
]


class GeoPoint(NamedTuple):
    """Longitude/latitude in degrees."""

    longitude: float
    latitude: float


class MercatorPoint(NamedTuple):
    """Web Mercator x/y in meters."""

    x: float
    y: float


class Tile(NamedTuple):
    """
    XYZ tile address. Column 0 is westernmost, row 0 northernmost.
    Indices are not checked on construction; see is_valid().
    """

    x: int
    y: int
    z: int

    def is_valid(self) -> bool:
        if self.z < 0:
            return False
        n = 2 ** self.z
        return 0 <= self.x < n and 0 <= self.y < n


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box. Degrees when produced by tile_geographic_bounds,
    meters when produced by tile_mercator_bounds.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "BoundingBox":
        if len(values) != 4:
            raise ValueError(f"bounding box needs 4 values, got {len(values)}")
        min_x, min_y, max_x, max_y = values
        return cls(float(min_x), float(min_y), float(max_x), float(max_y))

    # --- Geographic aliases
    @property
    def west(self) -> float:
        return self.min_x

    @property
    def south(self) -> float:
        return self.min_y

    @property
    def east(self) -> float:
        return self.max_x

    @property
    def north(self) -> float:
        return self.max_y

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return astuple(self)

    def as_strings(self) -> Tuple[str, str, str, str]:
        return format_bbox(self)


def format_bbox(box: BoundingBox) -> Tuple[str, str, str, str]:
    """Render min_x, min_y, max_x, max_y as "%f" strings (6 decimals, rounded)."""
    return (
        "%f" % box.min_x,
        "%f" % box.min_y,
        "%f" % box.max_x,
        "%f" % box.max_y,
    )
