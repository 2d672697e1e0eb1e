"""Tests for value types and bounding box formatting."""

import dataclasses

import pytest

from webmerc.types import BoundingBox, GeoPoint, MercatorPoint, Tile, format_bbox


class TestFormatBbox:
    """Fixed six-decimal rendering."""

    def test_known_bounds(self, dublin_bounds):
        assert format_bbox(dublin_bounds) == ("-9.140625", "53.120405", "-8.789062", "53.330873")

    def test_method_matches_function(self, dublin_bounds):
        assert dublin_bounds.as_strings() == format_bbox(dublin_bounds)

    def test_rounds_rather_than_truncates(self):
        box = BoundingBox(0.1234567, 1.9999996, -0.0000004, 7044436.526761843)
        assert format_bbox(box) == ("0.123457", "2.000000", "-0.000000", "7044436.526762")

    def test_whole_numbers_are_padded(self):
        assert format_bbox(BoundingBox(-180, -85, 180, 85)) == (
            "-180.000000",
            "-85.000000",
            "180.000000",
            "85.000000",
        )


class TestBoundingBox:
    """Bounding box value type."""

    def test_geographic_aliases(self, dublin_bounds):
        assert dublin_bounds.west == dublin_bounds.min_x
        assert dublin_bounds.south == dublin_bounds.min_y
        assert dublin_bounds.east == dublin_bounds.max_x
        assert dublin_bounds.north == dublin_bounds.max_y

    def test_is_immutable(self, dublin_bounds):
        with pytest.raises(dataclasses.FrozenInstanceError):
            dublin_bounds.min_x = 0.0

    def test_from_sequence(self, dublin_bounds):
        box = BoundingBox.from_sequence([-9.140625, 53.12040528310657, -8.7890625, 53.330872983017045])
        assert box == dublin_bounds

    def test_from_sequence_wrong_length(self):
        with pytest.raises(ValueError, match="4 values"):
            BoundingBox.from_sequence([1.0, 2.0, 3.0])

    def test_as_tuple(self):
        assert BoundingBox(1.0, 2.0, 3.0, 4.0).as_tuple() == (1.0, 2.0, 3.0, 4.0)


class TestPointsAndTiles:
    """NamedTuple value types."""

    def test_points_unpack(self):
        lng, lat = GeoPoint(-9.140625, 53.33)
        x, y = MercatorPoint(1.0, 2.0)
        assert (lng, lat, x, y) == (-9.140625, 53.33, 1.0, 2.0)

    def test_tile_fields(self, dublin_tile):
        assert (dublin_tile.x, dublin_tile.y, dublin_tile.z) == (486, 332, 10)

    def test_tile_construction_does_not_validate(self):
        tile = Tile(5, -1, 1)
        assert tile.z == 1

    @pytest.mark.parametrize(
        "tile, expected",
        [
            (Tile(0, 0, 0), True),
            (Tile(486, 332, 10), True),
            (Tile(1023, 1023, 10), True),
            (Tile(1024, 0, 10), False),
            (Tile(0, -1, 10), False),
            (Tile(0, 0, -1), False),
        ],
    )
    def test_is_valid(self, tile, expected):
        assert tile.is_valid() is expected
