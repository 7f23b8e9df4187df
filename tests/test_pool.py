"""Tests for pool.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from machi.core.exceptions import PoolError
from machi.core.notation import parse_tiles
from machi.core.pool import TilePool
from machi.core.tile import Tile, TileSuit


class TestTilePool:
    def test_reveal(self):
        pool = TilePool(parse_tiles("東東5m"))
        east, five = parse_tiles("東5m")
        assert pool.visible_count(east) == 2
        assert pool.unseen_count(east) == 2
        assert pool.visible_count(five) == 1
        assert pool.total_visible == 3

    def test_fifth_copy_rejected(self):
        pool = TilePool(parse_tiles("1111m"))
        with pytest.raises(PoolError):
            pool.reveal(parse_tiles("1m")[0])

    def test_conceal(self):
        pool = TilePool(parse_tiles("9s"))
        nine = parse_tiles("9s")[0]
        pool.conceal(nine)
        assert pool.visible_count(nine) == 0
        with pytest.raises(PoolError):
            pool.conceal(nine)

    def test_as_dict(self):
        pool = TilePool(parse_tiles("白白中"))
        assert {t.name: n for t, n in pool.as_dict().items()} == {"白": 2, "中": 1}

    def test_reset(self):
        pool = TilePool(parse_tiles("123m"))
        pool.reset()
        assert pool.total_visible == 0
        assert pool.as_dict() == {}

    def test_out_of_range_honor_rejected(self):
        with pytest.raises(PoolError):
            TilePool(parse_tiles("8z"))

    def test_out_of_range_number_not_counted_as_other_kind(self):
        pool = TilePool()
        with pytest.raises(PoolError):
            pool.reveal(Tile(TileSuit.MAN, 10))
        assert pool.visible_count(parse_tiles("1p")[0]) == 0
        assert pool.total_visible == 0

    def test_out_of_range_lookup_rejected(self):
        pool = TilePool()
        with pytest.raises(PoolError):
            pool.visible_count(Tile(TileSuit.HONOR, 9))
        with pytest.raises(PoolError):
            pool.conceal(Tile(TileSuit.SOU, 0))
