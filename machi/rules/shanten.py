"""Shanten (向聴数) calculation.

Shanten = number of tile exchanges still needed before the hand is tenpai.
-1 means already a complete hand (agari).
0 means tenpai (one tile away).

Each decomposition of the concealed tiles gets a shanten number from its
pattern's formula; the hand's shanten is the minimum over all of them.
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Sequence, Union

import structlog

from machi.core.exceptions import InvariantViolationError
from machi.core.hand import Hand
from machi.core.tile import Tile
from machi.rules.decompose import (
    ChiitoiDecomposition, HandPattern, KokushiDecomposition,
    StandardDecomposition, decompose_chiitoi, decompose_kokushi,
    split_standard,
)

logger = structlog.get_logger()

Decomposition = Union[StandardDecomposition, ChiitoiDecomposition, KokushiDecomposition]

AGARI_STATE = -1

# Worst possible shanten; given to decompositions that count one kind as two pairs
REJECTED_SHANTEN = 13

# Returned by the seven pairs / thirteen orphans evaluators for other hand sizes
NOT_APPLICABLE = 99

# Seven pairs and thirteen orphans need a fully concealed 14-tile hand
SPECIAL_PATTERN_SIZE = 14

PATTERN_ORDER = list(HandPattern)


def group_limit(hand_size: int) -> int:
    """Groups (melds, partial runs, pair) the concealed tiles can still supply."""
    return (hand_size + 1) // 3


def standard_shanten(decomposition: StandardDecomposition, hand_size: int) -> int:
    """Shanten of one standard decomposition.

    Partial runs are only useful up to one short of the group limit (the
    last slot belongs to the pair); pairs fill whatever slots remain.
    """
    pair_tiles = [p.tile for p in decomposition.pairs]
    if len(set(pair_tiles)) != len(pair_tiles):
        # TODO: split_standard emits this for four copies of a kind (two
        # pairs of one tile); prune it in the search instead of here.
        return REJECTED_SHANTEN

    limit = group_limit(hand_size)
    melds = len(decomposition.melds)
    taatsu_used = min(limit - 1 - melds, len(decomposition.taatsu))
    pairs_used = min(limit - melds - taatsu_used, len(decomposition.pairs))
    return (hand_size // 3) * 2 - 2 * melds - taatsu_used - pairs_used


def chiitoi_shanten(decomposition: ChiitoiDecomposition) -> int:
    pairs = len(decomposition.pairs)
    return 13 - 2 * pairs - min(len(decomposition.singles), 7 - pairs)


def kokushi_shanten(decomposition: KokushiDecomposition) -> int:
    return 13 - len(decomposition.valid)


def decomposition_shanten(decomposition: Decomposition, hand_size: int) -> int:
    """Dispatch to the formula of the decomposition's pattern."""
    if isinstance(decomposition, StandardDecomposition):
        return standard_shanten(decomposition, hand_size)
    if isinstance(decomposition, ChiitoiDecomposition):
        return chiitoi_shanten(decomposition)
    return kokushi_shanten(decomposition)


def decomposition_sort_key(decomposition: Decomposition):
    """Stable display order: by pattern, then by content."""
    return (PATTERN_ORDER.index(decomposition.pattern), repr(decomposition))


def shanten_standard(tiles: Sequence[Tile]) -> int:
    """Shanten for the standard form (4 mentsu + 1 jantai) of concealed tiles."""
    hand_size = len(tiles)
    return min(standard_shanten(d, hand_size) for d in split_standard(tiles))


def shanten_chiitoi(tiles: Sequence[Tile]) -> int:
    """Shanten for seven pairs (七対子). Only defined for 14 tiles."""
    if len(tiles) != SPECIAL_PATTERN_SIZE:
        return NOT_APPLICABLE
    return chiitoi_shanten(decompose_chiitoi(tiles))


def shanten_kokushi(tiles: Sequence[Tile]) -> int:
    """Shanten for thirteen orphans (国士無双). Only defined for 14 tiles."""
    if len(tiles) != SPECIAL_PATTERN_SIZE:
        return NOT_APPLICABLE
    return kokushi_shanten(decompose_kokushi(tiles))


def special_patterns_apply(hand: Hand) -> bool:
    """Seven pairs and thirteen orphans are only possible fully concealed."""
    return len(hand.closed_tiles) == SPECIAL_PATTERN_SIZE and not hand.melds


@dataclass(frozen=True)
class ShantenResult:
    """Minimum shanten of a hand and every decomposition reaching it.

    Attributes:
        shanten: Minimum over all patterns
        decompositions: Deduplicated minimal decompositions
        hand_size: Concealed tile count the decompositions were built from
    """
    shanten: int
    decompositions: FrozenSet[Decomposition]
    hand_size: int

    @property
    def is_agari(self) -> bool:
        return self.shanten == AGARI_STATE

    @property
    def is_tenpai(self) -> bool:
        return self.shanten == 0

    @property
    def patterns(self) -> List[HandPattern]:
        """Patterns that reach the minimum, in canonical order."""
        found = {d.pattern for d in self.decompositions}
        return [p for p in PATTERN_ORDER if p in found]

    def by_pattern(self, pattern: HandPattern) -> List[Decomposition]:
        return sorted((d for d in self.decompositions if d.pattern == pattern),
                      key=decomposition_sort_key)

    def sorted_decompositions(self) -> List[Decomposition]:
        return sorted(self.decompositions, key=decomposition_sort_key)


def calculate_shanten(hand: Hand) -> ShantenResult:
    """Calculate minimum shanten across all hand forms.

    Raises:
        InvalidHandError: the hand fails validation (before any search).
        InvariantViolationError: the evaluators produced no usable minimum.
    """
    hand.validate()
    tiles = hand.snapshot()
    hand_size = len(tiles)

    best = (hand_size // 3) * 2
    minimal = set()

    def consider(decomposition):
        nonlocal best
        s = decomposition_shanten(decomposition, hand_size)
        if s < best:
            best = s
            minimal.clear()
            minimal.add(decomposition)
        elif s == best:
            minimal.add(decomposition)

    standard = split_standard(tiles)
    for decomposition in standard:
        consider(decomposition)

    if special_patterns_apply(hand):
        consider(decompose_chiitoi(tiles))
        consider(decompose_kokushi(tiles))

    if not minimal:
        logger.error("no decomposition reached the minimum", hand=repr(hand))
        raise InvariantViolationError(f"no decomposition found for {hand!r}")
    if best < AGARI_STATE:
        logger.error("shanten below agari", hand=repr(hand), shanten=best)
        raise InvariantViolationError(f"shanten {best} is below {AGARI_STATE} for {hand!r}")

    logger.debug(
        "shanten calculated",
        hand_size=hand_size,
        searched=len(standard),
        shanten=best,
        minimal=len(minimal),
    )
    return ShantenResult(best, frozenset(minimal), hand_size)


def shanten(hand: Hand) -> int:
    """Minimum shanten number of a hand."""
    return calculate_shanten(hand).shanten
