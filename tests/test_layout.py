"""Tests for the physical layout tables."""

from keyfx.config import GRID_HEIGHT, GRID_WIDTH
from keyfx.keys import ALL_KEYS, StandardKey
from keyfx.layout import FIELD, PREVIEW_KEYS, field_key


class TestField:
    def test_matches_grid(self):
        assert len(FIELD) == GRID_HEIGHT
        assert {len(row) for row in FIELD} == {GRID_WIDTH}

    def test_corners(self):
        assert field_key((0, 0)) is StandardKey.CIRCUMFLEX
        assert field_key((GRID_WIDTH - 1, GRID_HEIGHT - 1)) is StandardKey.RIGHT_SHIFT

    def test_keys_unique(self):
        cells = [key for row in FIELD for key in row]
        assert len(cells) == len(set(cells))


class TestPreviewLayout:
    def test_every_key_placed_once(self):
        placed = [key for _, _, _, key in PREVIEW_KEYS]
        assert len(placed) == len(set(placed))
        assert set(placed) == set(ALL_KEYS)

    def test_positive_widths(self):
        assert all(width > 0 for _, _, width, _ in PREVIEW_KEYS)
