"""Tests for meld.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from machi.core.meld import MeldType, Pair, Taatsu, classify_meld
from machi.core.notation import parse_tiles


def tile(text):
    return parse_tiles(text)[0]


class TestClassifyMeld:
    def test_run(self):
        meld = classify_meld(parse_tiles("312m"))
        assert meld.meld_type == MeldType.SHUNTSU
        assert [t.name for t in meld.tiles] == ["1m", "2m", "3m"]

    def test_triplet(self):
        assert classify_meld(parse_tiles("東東東")).meld_type == MeldType.KOUTSU

    def test_quad(self):
        meld = classify_meld(parse_tiles("5555p"))
        assert meld.meld_type == MeldType.KANTSU
        assert meld.is_kan

    def test_rejects(self):
        assert classify_meld(parse_tiles("124m")) is None
        assert classify_meld(parse_tiles("12m3p")) is None
        assert classify_meld(parse_tiles("東南西")) is None
        assert classify_meld(parse_tiles("11m")) is None
        assert classify_meld(parse_tiles("5556p")) is None


class TestTaatsu:
    def test_ryanmen(self):
        shape = Taatsu(tile("4m"), tile("5m"))
        assert not shape.is_kanchan
        assert shape.completing_tiles() == (tile("3m"), tile("6m"))

    def test_penchan(self):
        low = Taatsu(tile("1p"), tile("2p"))
        high = Taatsu(tile("8s"), tile("9s"))
        assert low.completing_tiles() == (tile("3p"),)
        assert high.completing_tiles() == (tile("7s"),)

    def test_kanchan(self):
        shape = Taatsu(tile("1s"), tile("3s"))
        assert shape.is_kanchan
        assert shape.completing_tiles() == (tile("2s"),)

    def test_str(self):
        assert str(Taatsu(tile("4m"), tile("6m"))) == "4m6m"
        assert str(Pair(tile("白"))) == "白白"
