"""Tests for the package-level API."""

import webmerc


def test_public_names_are_exported():
    for name in webmerc.__all__:
        assert hasattr(webmerc, name), name


def test_version():
    assert webmerc.__version__ == "1.0.0"


def test_tile_splats_into_tile_functions():
    tile = webmerc.Tile(486, 332, 10)
    box = webmerc.tile_geographic_bounds(*tile)
    assert webmerc.format_bbox(box) == ("-9.140625", "53.120405", "-8.789062", "53.330873")
