"""Tests for shanten.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from machi.core.exceptions import InvalidHandError
from machi.core.hand import Hand
from machi.core.meld import Pair
from machi.core.notation import parse_hand, parse_tiles
from machi.core.tile import TILE_COPIES, tiles_to_34_array
from machi.rules.agari import get_waiting_tiles, is_agari
from machi.rules.decompose import ChiitoiDecomposition, HandPattern, StandardDecomposition
from machi.rules.shanten import (
    NOT_APPLICABLE, REJECTED_SHANTEN, calculate_shanten, group_limit, shanten,
    shanten_chiitoi, shanten_kokushi, shanten_standard, standard_shanten,
)


def one_exchange_wins(text):
    """Brute force: can one discard and one draw complete the hand?"""
    arr = tiles_to_34_array(parse_tiles(text))
    for i in range(34):
        if arr[i] == 0:
            continue
        arr[i] -= 1
        waits = get_waiting_tiles(arr)
        arr[i] += 1
        if waits:
            return True
    return False


ORACLE_HANDS = [
    "12345m",
    "11123m",
    "13579m",
    "東南西北白",
    "11m22p東",
    "19m19p東",
    "12345678m",
    "11122233m",
    "1358m2468p",
    "123m456p789s東東東白白",
    "123m456p789s東東東白中",
    "1199m1199p1199s東東",
    "1199m1199p1199s東南",
    "19m19p19s東南西北白發中中",
    "19m19p19s東南西北白發中5m",
    "147m258p369s東南西北白",
]


class TestShanten:
    def test_agari(self):
        """Complete hand should have shanten -1."""
        assert shanten(parse_hand("123m456p789s東東東南南")) == -1

    def test_tenpai(self):
        assert shanten(parse_hand("123m456p789s東東東南白")) == 0

    def test_iishanten(self):
        assert shanten(parse_hand("123m456p78s東東東南白中")) == 1

    def test_chiitoi_complete(self):
        assert shanten(parse_hand("1199m1199p1199s東東")) == -1

    def test_chiitoi_tenpai(self):
        result = calculate_shanten(parse_hand("1199m1199p1199s東南"))
        assert result.shanten == 0
        assert result.patterns == [HandPattern.CHIITOI]

    def test_kokushi_complete(self):
        result = calculate_shanten(parse_hand("19m19p19s東南西北白發中中"))
        assert result.shanten == -1
        assert HandPattern.KOKUSHI in result.patterns

    def test_kokushi_tenpai(self):
        assert shanten(parse_hand("19m19p19s東南西北白發中5m")) == 0

    def test_small_hands(self):
        assert shanten(parse_hand("11m")) == -1
        assert shanten(parse_hand("1m東")) == 0
        assert shanten(parse_hand("12345m")) == 0

    def test_with_melds(self):
        hand = parse_hand("123m東東[456p][789s][222z]")
        assert shanten(hand) == -1

    def test_invalid_hand_rejected_before_search(self):
        with pytest.raises(InvalidHandError):
            calculate_shanten(Hand(parse_tiles("123m")))

    def test_hand_not_modified(self):
        hand = Hand(parse_tiles("東9m1m"))
        hand.closed_tiles += parse_tiles("11p")
        before = list(hand.closed_tiles)
        calculate_shanten(hand)
        assert hand.closed_tiles == before


class TestAgainstAgariOracle:
    @pytest.mark.parametrize("text", ORACLE_HANDS)
    def test_minus_one_iff_agari(self, text):
        result = shanten(parse_hand(text))
        assert (result == -1) == is_agari(tiles_to_34_array(parse_tiles(text)))

    @pytest.mark.parametrize("text", ORACLE_HANDS)
    def test_zero_iff_one_exchange(self, text):
        result = shanten(parse_hand(text))
        if result == -1:
            return
        assert (result == 0) == one_exchange_wins(text)


class TestDecompositions:
    @pytest.mark.parametrize("text", ORACLE_HANDS)
    def test_every_decomposition_accounts_for_all_tiles(self, text):
        result = calculate_shanten(parse_hand(text))
        for d in result.decompositions:
            assert d.tile_count == result.hand_size

    def test_special_patterns_need_fourteen_concealed(self):
        result = calculate_shanten(parse_hand("1199m1199p東東南[123s]"))
        assert all(isinstance(d, StandardDecomposition) for d in result.decompositions)

    def test_special_patterns_need_no_melds(self):
        result = calculate_shanten(parse_hand("19m19p19s東南西北白[111s]"))
        assert all(isinstance(d, StandardDecomposition) for d in result.decompositions)

    def test_deduplicated(self):
        result = calculate_shanten(parse_hand("東東東南南"))
        assert len(result.decompositions) == len(set(result.decompositions))

    def test_sorted_by_pattern(self):
        result = calculate_shanten(parse_hand("1199m1199p1199s東東"))
        ordered = result.sorted_decompositions()
        assert isinstance(ordered[0], (StandardDecomposition, ChiitoiDecomposition))
        assert result.by_pattern(HandPattern.KOKUSHI) == []


class TestFormulas:
    def test_group_limit(self):
        assert group_limit(14) == 5
        assert group_limit(11) == 4
        assert group_limit(2) == 1

    def test_duplicate_pair_rejected(self):
        d = StandardDecomposition(pairs=(Pair(parse_tiles("1m")[0]),) * 2)
        assert standard_shanten(d, 5) == REJECTED_SHANTEN

    def test_four_copies_still_scored(self):
        """Two pairs of one kind are rejected, but other splits are not."""
        assert shanten(parse_hand("11112m")) == 0

    def test_standard_only(self):
        assert shanten_standard(parse_tiles("1199m1199p1199s東東")) > 0

    def test_special_only_for_fourteen(self):
        assert shanten_chiitoi(parse_tiles("11m22p")) == NOT_APPLICABLE
        assert shanten_kokushi(parse_tiles("19m東南西")) == NOT_APPLICABLE

    def test_chiitoi_counts_kinds(self):
        """Four of a kind is one pair, not two."""
        assert shanten_chiitoi(parse_tiles("1111m2299p1199s東東")) == 1

    def test_kokushi_distance(self):
        assert shanten_kokushi(parse_tiles("19m19p19s東南西北白發中中")) == -1
        assert shanten_kokushi(parse_tiles("123456789m12345p")) == 10

    def test_remaining_copies_constant(self):
        assert TILE_COPIES == 4
