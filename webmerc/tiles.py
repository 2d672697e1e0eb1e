#!/usr/bin/env python3
# webmerc/tiles.py
"""
XYZ tile math: tile corners and bounds in degrees and in Web Mercator meters,
plus grid helpers.

Indices are never validated here. Off-grid tiles and negative zooms produce
whatever the formulas yield.
"""

import math
from typing import List, Tuple

from webmerc.geodesy import CE, exp2
from webmerc.types import BoundingBox, GeoPoint, Tile

__all__ = [
    "tile_upper_left",
    "tile_geographic_bounds",
    "tile_mercator_bounds",
    "tile_index_range",
    "tile_neighbors",
]


def _sinh(v: float) -> float:
    try:
        return math.sinh(v)
    except OverflowError:
        return math.copysign(math.inf, v)


def tile_upper_left(x: int, y: int, z: int) -> GeoPoint:
    """Northwest corner of tile x/y/z as (lon, lat) degrees."""
    # 2**-z, so extreme zooms give 0.0/inf instead of raising
    inv_n = exp2(-z)
    lon = x * inv_n * 360.0 - 180.0
    lat_rad = math.atan(_sinh(math.pi * (1 - 2 * y * inv_n)))
    return GeoPoint(lon, math.degrees(lat_rad))


def tile_geographic_bounds(x: int, y: int, z: int) -> BoundingBox:
    """
    Return bounding box of a tile in degrees.
    The southeast corner is the northwest corner of tile (x+1, y+1), so
    neighbouring tiles share edges exactly.
    """
    west, north = tile_upper_left(x, y, z)
    east, south = tile_upper_left(x + 1, y + 1, z)
    return BoundingBox(west, south, east, north)


def tile_mercator_bounds(x: int, y: int, z: int) -> BoundingBox:
    """Return bounding box of a tile in Web Mercator meters."""
    tile_size = CE * exp2(-z)
    min_x = x * tile_size - CE / 2
    max_x = min_x + tile_size
    max_y = CE / 2 - y * tile_size
    min_y = max_y - tile_size
    return BoundingBox(min_x, min_y, max_x, max_y)


def tile_index_range(z: int) -> Tuple[int, int]:
    """Lowest and highest valid column/row index at zoom z."""
    return 0, 2 ** z - 1


def tile_neighbors(x: int, y: int, z: int) -> List[Tile]:
    """
    Tiles surrounding x/y/z at the same zoom, column-major order.
    Tiles off the grid are dropped; no wrap across the antimeridian.
    """
    lo, hi = tile_index_range(z)
    out: List[Tile] = []
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if not (lo <= nx <= hi and lo <= ny <= hi):
                continue
            out.append(Tile(nx, ny, z))
    return out
