"""Web Mercator projection and XYZ tile math."""

from webmerc.geodesy import (
    CE,
    MAX_LAT,
    R2D,
    RE,
    clamp_lat,
    point_to_tile,
    point_to_tile_fraction,
    to_geographic,
    to_mercator,
)
from webmerc.tiles import (
    tile_geographic_bounds,
    tile_index_range,
    tile_mercator_bounds,
    tile_neighbors,
    tile_upper_left,
)
from webmerc.types import BoundingBox, GeoPoint, MercatorPoint, Tile, format_bbox
from webmerc.logging_conf import trace_conversions
from webmerc.version import __version__

__all__ = [
    "BoundingBox",
    "CE",
    "GeoPoint",
    "MAX_LAT",
    "MercatorPoint",
    "R2D",
    "RE",
    "Tile",
    "clamp_lat",
    "format_bbox",
    "point_to_tile",
    "point_to_tile_fraction",
    "tile_geographic_bounds",
    "tile_index_range",
    "tile_mercator_bounds",
    "tile_neighbors",
    "tile_upper_left",
    "to_geographic",
    "to_mercator",
    "trace_conversions",
    "__version__",
]
