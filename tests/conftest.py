"""Pytest configuration and fixtures for webmerc tests."""

import logging

import pytest

from webmerc.types import BoundingBox, Tile


@pytest.fixture
def dublin_tile():
    """Zoom 10 tile covering Dublin."""
    return Tile(486, 332, 10)


@pytest.fixture
def dublin_bounds():
    """Geographic bounds of the Dublin tile."""
    return BoundingBox(-9.140625, 53.12040528310657, -8.7890625, 53.330872983017045)


@pytest.fixture
def restore_logging():
    """Undo handler and level changes made to the webmerc logger."""
    lib = logging.getLogger("webmerc")
    handlers = list(lib.handlers)
    level = lib.level
    yield
    for h in list(lib.handlers):
        if h not in handlers:
            lib.removeHandler(h)
            h.close()
    lib.setLevel(level)
