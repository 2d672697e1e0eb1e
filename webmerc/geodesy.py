#!/usr/bin/env python3
# webmerc/geodesy.py
"""
Geodesy utilities for webmerc.
Handles conversions between longitude/latitude and Web Mercator meters,
and lookup of the XYZ tile containing a point.
"""

import logging
import math
from typing import Tuple

from webmerc.types import GeoPoint, MercatorPoint, Tile

__all__ = [
    "RE",
    "R2D",
    "CE",
    "MAX_LAT",
    "to_mercator",
    "to_geographic",
    "clamp_lat",
    "point_to_tile_fraction",
    "point_to_tile",
    "exp2",
]

log = logging.getLogger(__name__)

# Web Mercator sphere radius (WGS84 semi-major axis, meters)
RE = 6378137.0
R2D = 180 / math.pi
# Equatorial circumference of the projection sphere
CE = 2 * math.pi * RE

# North edge of tile 0/0/0
MAX_LAT = 85.0511287798066


def to_mercator(longitude: float, latitude: float) -> MercatorPoint:
    """
    Project lon/lat degrees to Web Mercator meters.
    Latitudes at or beyond the poles give y = -inf / +inf.
    """
    x = RE * math.radians(longitude)

    if latitude <= -90:
        log.debug("latitude %s at or below south pole, y=-inf", latitude)
        y = -math.inf
    elif latitude >= 90:
        log.debug("latitude %s at or above north pole, y=+inf", latitude)
        y = math.inf
    else:
        y = RE * math.log(math.tan((math.pi * 0.25) + (0.5 * math.radians(latitude))))

    return MercatorPoint(x, y)


def exp2(z: int) -> float:
    """2**z as a float, 0.0 or inf once past the float range."""
    try:
        return math.ldexp(1.0, z)
    except OverflowError:
        return math.inf


def to_geographic(x: float, y: float) -> GeoPoint:
    """Inverse of to_mercator."""
    lng = x * R2D / RE
    try:
        e = math.exp(-y / RE)
    except OverflowError:
        # atan saturates at pi/2, latitude at -90
        e = math.inf
    lat = ((math.pi * 0.5) - 2.0 * math.atan(e)) * R2D
    return GeoPoint(lng, lat)


def clamp_lat(lat: float, limit: float = MAX_LAT) -> float:
    """Clamp latitude to Web Mercator valid range."""
    return max(min(lat, limit), -limit)


def point_to_tile_fraction(longitude: float, latitude: float, zoom: int) -> Tuple[float, float]:
    """
    Convert lon/lat to fractional tile coordinates at a given zoom.
    Returns (x, y) tile coordinate floats.
    """
    lat = clamp_lat(latitude)
    n = exp2(zoom)
    x = (longitude + 180.0) / 360.0 * n
    lat_rad = math.radians(lat)
    y = (1.0 - math.log(math.tan(lat_rad) + 1 / math.cos(lat_rad)) / math.pi) / 2.0 * n
    return x, y


def _clip_index(v: float, hi: int) -> int:
    if not v > 0:  # also nan
        return 0
    if v >= hi:
        return hi
    return int(math.floor(v))


def point_to_tile(longitude: float, latitude: float, zoom: int) -> Tile:
    """Tile containing the point, clipped onto the grid."""
    xf, yf = point_to_tile_fraction(longitude, latitude, zoom)
    hi = 2 ** zoom - 1 if zoom >= 0 else 0
    return Tile(_clip_index(xf, hi), _clip_index(yf, hi), zoom)
