#!/usr/bin/env python3
# webmerc/arrays.py
"""
numpy versions of the point conversions in webmerc.geodesy.

Inputs may be scalars, sequences or arrays; they are broadcast together and
returned as float64 arrays. Pole handling matches the scalar functions.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from webmerc.geodesy import R2D, RE

__all__ = ["to_mercator_array", "to_geographic_array"]


def to_mercator_array(lng, lat) -> Tuple[np.ndarray, np.ndarray]:
    lng, lat = np.broadcast_arrays(
        np.asarray(lng, dtype="float64"), np.asarray(lat, dtype="float64")
    )
    x = RE * np.radians(lng)

    # Values at the poles are replaced below; silence the tan/log noise there.
    with np.errstate(divide="ignore", invalid="ignore"):
        merc_y = RE * np.log(np.tan((np.pi * 0.25) + (0.5 * np.radians(lat))))
    y = np.where(lat <= -90, -np.inf, np.where(lat >= 90, np.inf, merc_y))
    return x, y


def to_geographic_array(x, y) -> Tuple[np.ndarray, np.ndarray]:
    x, y = np.broadcast_arrays(
        np.asarray(x, dtype="float64"), np.asarray(y, dtype="float64")
    )
    lng = x * R2D / RE
    # exp(-y/RE) overflows to inf for large negative y; atan(inf) is still pi/2
    with np.errstate(over="ignore"):
        lat = ((np.pi * 0.5) - 2.0 * np.arctan(np.exp(-y / RE))) * R2D
    return lng, lat
