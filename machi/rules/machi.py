"""Wait (待ち) analysis: what each discard leaves the hand waiting for.

For every tile the minimal decompositions leave floating, treat it as the
discard (捨て牌) and collect the tiles (待ち牌) that would complete or
improve the hand afterwards, with how many copies are still available.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Set

import structlog

from machi.core.exceptions import InvariantViolationError
from machi.core.hand import Hand
from machi.core.pool import TilePool
from machi.core.tile import (
    ALL_TILES_34, TILE_COPIES, YAOCHU_TILES, Tile, next_tile, prev_tile,
)
from machi.rules.decompose import (
    ChiitoiDecomposition, KokushiDecomposition, StandardDecomposition,
)
from machi.rules.furiten import is_discard_furiten, is_temporary_furiten
from machi.rules.shanten import (
    AGARI_STATE, Decomposition, ShantenResult, calculate_shanten, group_limit,
)

logger = structlog.get_logger()


@dataclass
class WaitCondition:
    """Waits left after discarding one tile.

    Attributes:
        discard: The tile to discard
        waits: Wait tile -> copies still available, in tile order
        furiten: Whether a wait tile was already discarded or passed
    """
    discard: Tile
    waits: Dict[Tile, int] = field(default_factory=dict)
    furiten: bool = False

    @property
    def remaining(self) -> int:
        """Total copies available across all wait tiles."""
        return sum(self.waits.values())

    @property
    def wait_tiles(self) -> List[Tile]:
        return list(self.waits)


@dataclass(frozen=True)
class HandAnalysis:
    """Shanten, minimal decompositions and per-discard waits of a hand."""
    shanten: int
    decompositions: FrozenSet[Decomposition]
    conditions: List[WaitCondition]

    @property
    def is_agari(self) -> bool:
        return self.shanten == AGARI_STATE

    def condition_for(self, discard: Tile) -> Optional[WaitCondition]:
        for condition in self.conditions:
            if condition.discard == discard:
                return condition
        return None


def discard_candidates(result: ShantenResult) -> Set[Tile]:
    """Floating tiles of every minimal decomposition.

    A seven pairs decomposition with nothing floating offers its lone tiles
    instead, since discarding one of them is how that hand moves on.
    """
    candidates: Set[Tile] = set()
    for decomposition in result.decompositions:
        candidates.update(decomposition.floating)
        if isinstance(decomposition, ChiitoiDecomposition) and not decomposition.floating:
            candidates.update(decomposition.singles)
    return candidates


def _offers_discard(decomposition: Decomposition, discard: Tile) -> bool:
    if discard in decomposition.floating:
        return True
    return isinstance(decomposition, ChiitoiDecomposition) and discard in decomposition.singles


def standard_waits(decomposition: StandardDecomposition, discard: Tile,
                   hand_size: int) -> Set[Tile]:
    """Waits of one standard decomposition once ``discard`` is gone."""
    limit = group_limit(hand_size)
    melds = len(decomposition.melds)
    taatsu = len(decomposition.taatsu)
    pairs = len(decomposition.pairs)

    # Too many partial shapes: some of them cannot be used, skip
    if melds + taatsu > limit - 1:
        return set()
    if melds + taatsu + pairs > limit:
        return set()

    waits: Set[Tile] = set()
    for shape in decomposition.taatsu:
        completing = shape.completing_tiles()
        if not completing:
            raise InvariantViolationError(f"partial run {shape} has no completing tile")
        waits.update(completing)

    # Any pair beyond the head can become a triplet
    if pairs > 1:
        waits.update(p.tile for p in decomposition.pairs)

    # Free slots: floating tiles can grow into pairs, or into partial runs
    if melds + taatsu + pairs < limit:
        waits.update(p.tile for p in decomposition.pairs)
        for tile in decomposition.floating:
            if tile == discard:
                continue
            waits.add(tile)
            if melds + taatsu < limit - 1 and tile.is_number_tile:
                for step in (prev_tile, next_tile):
                    near = step(tile)
                    if near is None:
                        continue
                    waits.add(near)
                    further = step(near)
                    if further is not None:
                        waits.add(further)
    return waits


def chiitoi_waits(decomposition: ChiitoiDecomposition, discard: Tile) -> Set[Tile]:
    """Waits of a seven pairs decomposition once ``discard`` is gone."""
    if len(decomposition.pairs) + len(decomposition.singles) >= 7:
        return {t for t in decomposition.singles if t != discard}
    # Not enough distinct kinds yet: any kind not already paired helps
    paired = {p.tile for p in decomposition.pairs}
    return {t for t in ALL_TILES_34 if t not in paired}


def kokushi_waits(decomposition: KokushiDecomposition) -> Set[Tile]:
    """Without a duplicate every orphan helps; with one, only the missing kinds."""
    if not decomposition.has_pair:
        return set(YAOCHU_TILES)
    held = set(decomposition.valid)
    return {t for t in YAOCHU_TILES if t not in held}


def collect_waits(discard: Tile, result: ShantenResult) -> Set[Tile]:
    """Union of the waits every minimal decomposition offers for a discard."""
    if result.shanten < AGARI_STATE:
        raise InvariantViolationError(
            f"shanten {result.shanten} is below {AGARI_STATE} for discard {discard.name}")

    waits: Set[Tile] = set()
    for decomposition in result.decompositions:
        if not _offers_discard(decomposition, discard):
            continue
        if isinstance(decomposition, StandardDecomposition):
            waits |= standard_waits(decomposition, discard, result.hand_size)
        elif isinstance(decomposition, ChiitoiDecomposition):
            waits |= chiitoi_waits(decomposition, discard)
        else:
            waits |= kokushi_waits(decomposition)
    return waits


def count_remaining(waits: Iterable[Tile], hand: Hand,
                    pool: Optional[TilePool] = None) -> Dict[Tile, int]:
    """Copies of each wait tile not visible in the hand, its melds or the pool.

    Waits with nothing left are dropped. The result is in tile order.
    """
    visible = hand.visible_34_array()
    remaining: Dict[Tile, int] = {}
    for tile in sorted(waits):
        count = TILE_COPIES - visible[tile.index34]
        if pool is not None:
            count -= pool.visible_count(tile)
        if count > 0:
            remaining[tile] = count
    return remaining


def analyze(hand: Hand, pool: Optional[TilePool] = None,
            missed: Iterable[Tile] = ()) -> HandAnalysis:
    """Shanten of a hand and the waits left by each useful discard.

    Args:
        hand: Hand to analyse; validated first, never modified
        pool: Optional tracker of tiles visible outside this hand
        missed: Tiles passed this turn without calling (temporary furiten)

    Conditions are ordered by total remaining copies, most first, then by
    discard tile. Discards whose waits are all used up are left out.
    """
    result = calculate_shanten(hand)
    if result.is_agari:
        return HandAnalysis(result.shanten, result.decompositions, [])

    missed = set(missed)
    conditions: List[WaitCondition] = []
    candidates = discard_candidates(result)
    for discard in candidates:
        waits = count_remaining(collect_waits(discard, result), hand, pool)
        if not waits:
            continue
        wait_tiles = list(waits)
        furiten = (is_discard_furiten(wait_tiles, hand.discard_pool)
                   or is_temporary_furiten(wait_tiles, missed))
        conditions.append(WaitCondition(discard, waits, furiten))

    conditions.sort(key=lambda c: (-c.remaining, c.discard.index34))
    logger.debug(
        "waits analysed",
        shanten=result.shanten,
        candidates=len(candidates),
        conditions=len(conditions),
    )
    return HandAnalysis(result.shanten, result.decompositions, conditions)
