"""Tests for machi.py - wait analysis"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from machi.core.exceptions import InvalidHandError, InvariantViolationError
from machi.core.hand import Hand
from machi.core.meld import Taatsu
from machi.core.notation import parse_hand, parse_tiles
from machi.core.pool import TilePool
from machi.rules.decompose import (
    ChiitoiDecomposition, KokushiDecomposition, StandardDecomposition,
    decompose_chiitoi, decompose_kokushi,
)
from machi.rules.machi import (
    analyze, chiitoi_waits, collect_waits, count_remaining, discard_candidates,
    kokushi_waits, standard_waits,
)
from machi.rules.shanten import ShantenResult, calculate_shanten


def tile(text):
    return parse_tiles(text)[0]


def named(waits):
    return {t.name: n for t, n in waits.items()}


SCENARIO = "1112223334445m東"


class TestScenario:
    def test_shanten(self):
        assert analyze(parse_hand(SCENARIO)).shanten == 0

    def test_discard_east(self):
        first = analyze(parse_hand(SCENARIO)).conditions[0]
        assert first.discard == tile("東")
        assert named(first.waits) == {"2m": 1, "3m": 1, "4m": 1, "5m": 3, "6m": 4}
        assert first.remaining == 10
        assert not first.furiten

    def test_discard_two_and_five(self):
        conditions = analyze(parse_hand(SCENARIO)).conditions
        assert [c.discard.name for c in conditions] == ["東", "2m", "5m"]
        for c in conditions[1:]:
            assert named(c.waits) == {"東": 3}

    def test_waits_in_tile_order(self):
        first = analyze(parse_hand(SCENARIO)).conditions[0]
        assert first.wait_tiles == sorted(first.wait_tiles)

    def test_idempotent(self):
        assert analyze(parse_hand(SCENARIO)) == analyze(parse_hand(SCENARIO))

    def test_hand_not_modified(self):
        hand = parse_hand(SCENARIO)
        before = list(hand.closed_tiles)
        analyze(hand)
        assert hand.closed_tiles == before
        assert hand.discard_pool == []


class TestCompleteHands:
    def test_standard(self):
        analysis = analyze(parse_hand("123m456p789s東東東白白"))
        assert analysis.shanten == -1
        assert analysis.is_agari
        assert analysis.conditions == []

    def test_seven_pairs(self):
        analysis = analyze(parse_hand("1199m1199p1199s東東"))
        assert analysis.shanten == -1
        assert any(isinstance(d, ChiitoiDecomposition) for d in analysis.decompositions)

    def test_thirteen_orphans(self):
        analysis = analyze(parse_hand("19m19p19s東南西北白發中中"))
        assert analysis.shanten == -1
        assert any(isinstance(d, KokushiDecomposition) for d in analysis.decompositions)


class TestStandardWaits:
    def test_neighbours_of_floating_tiles(self):
        """Two groups short: a floating number tile reaches two ranks either way."""
        analysis = analyze(parse_hand("123m4p東南西北"))
        assert analysis.shanten == 2
        waits = analysis.condition_for(tile("東")).waits
        assert named(waits) == {
            "2p": 4, "3p": 4, "4p": 3, "5p": 4, "6p": 4, "南": 3, "西": 3, "北": 3,
        }

    def test_no_neighbours_when_one_group_short(self):
        analysis = analyze(parse_hand("123m45p東南西"))
        assert analysis.shanten == 1
        waits = analysis.condition_for(tile("東")).waits
        assert named(waits) == {"3p": 4, "6p": 4, "南": 3, "西": 3}

    def test_extra_pairs_wait_for_triplets(self):
        analysis = analyze(parse_hand("11m55p99s東南"))
        assert analysis.shanten == 1
        for discard in ("東", "南"):
            waits = analysis.condition_for(tile(discard)).waits
            assert named(waits) == {"1m": 2, "5p": 2, "9s": 2}

    def test_shape_without_completing_tile(self):
        broken = StandardDecomposition(
            taatsu=(Taatsu(tile("東"), tile("南")),), floating=(tile("白"),))
        with pytest.raises(InvariantViolationError):
            standard_waits(broken, tile("白"), 5)

    def test_shanten_below_complete(self):
        with pytest.raises(InvariantViolationError):
            collect_waits(tile("東"), ShantenResult(-2, frozenset(), 2))


class TestSpecialWaits:
    def test_seven_pairs_tenpai(self):
        conditions = analyze(parse_hand("1199m1199p1199s東南")).conditions
        assert [c.discard.name for c in conditions] == ["東", "南"]
        assert named(conditions[0].waits) == {"南": 3}
        assert named(conditions[1].waits) == {"東": 3}

    def test_thirteen_orphans_tenpai(self):
        conditions = analyze(parse_hand("19m19p19s東南西北白發中5m")).conditions
        assert len(conditions) == 1
        assert conditions[0].discard == tile("5m")
        assert len(conditions[0].waits) == 13
        assert conditions[0].remaining == 39

    def test_chiitoi_waits_short_of_kinds(self):
        """With fewer than seven kinds any unpaired kind helps."""
        d = decompose_chiitoi(parse_tiles("1111m2222p33s"))
        waits = chiitoi_waits(d, tile("1m"))
        assert tile("1m") not in waits
        assert tile("東") in waits
        assert len(waits) == 31

    def test_kokushi_waits_with_pair(self):
        d = decompose_kokushi(parse_tiles("119m19p19s東南西北白發5m"))
        assert kokushi_waits(d) == {tile("中")}


class TestRemaining:
    def test_pool_subtracts(self):
        pool = TilePool(parse_tiles("66m"))
        first = analyze(parse_hand(SCENARIO), pool).conditions[0]
        assert named(first.waits)["6m"] == 2
        assert first.remaining == 8

    def test_exhausted_waits_dropped(self):
        pool = TilePool(parse_tiles("東東東"))
        conditions = analyze(parse_hand(SCENARIO), pool).conditions
        assert [c.discard.name for c in conditions] == ["東"]

    def test_counts_within_copies(self):
        for text in [SCENARIO, "1199m1199p1199s東南", "12345678m", "13579m"]:
            for c in analyze(parse_hand(text)).conditions:
                assert all(1 <= n <= 4 for n in c.waits.values())

    def test_count_remaining_includes_melds(self):
        hand = parse_hand("44m東東南[456m]")
        remaining = count_remaining(parse_tiles("4m5m"), hand)
        assert named(remaining) == {"4m": 1, "5m": 3}


class TestFuriten:
    def test_own_discard(self):
        hand = parse_hand(SCENARIO)
        hand.discard_pool.append(tile("6m"))
        conditions = analyze(hand).conditions
        assert conditions[0].furiten
        assert not conditions[1].furiten

    def test_missed_tile(self):
        conditions = analyze(parse_hand(SCENARIO), missed=[tile("東")]).conditions
        assert not conditions[0].furiten
        assert conditions[1].furiten and conditions[2].furiten


class TestCandidates:
    def test_floating_only(self):
        result = calculate_shanten(parse_hand(SCENARIO))
        assert discard_candidates(result) == {tile("東"), tile("2m"), tile("5m")}

    def test_condition_for(self):
        analysis = analyze(parse_hand(SCENARIO))
        assert analysis.condition_for(tile("2m")).remaining == 3
        assert analysis.condition_for(tile("1m")) is None

    def test_invalid_hand(self):
        with pytest.raises(InvalidHandError):
            analyze(Hand(parse_tiles("1112223334445m")))
