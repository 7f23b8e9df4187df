"""Hand decompositions (手牌分解) for the three winning patterns.

A decomposition partitions the concealed tiles of a hand. Each pattern has
its own frozen dataclass carrying only the fields that pattern uses:

- StandardDecomposition: melds, pairs, partial runs, floating tiles
- ChiitoiDecomposition: pairs, lone tiles of distinct kinds, excess copies
- KokushiDecomposition: terminal/honor tiles counted, everything else

Values are immutable and hashable so a set can deduplicate them.
"""

from dataclasses import dataclass, replace
from enum import Enum
from itertools import groupby
from typing import ClassVar, List, Sequence, Tuple

from machi.core.meld import Meld, MeldType, Pair, Taatsu
from machi.core.tile import YAOCHU_TILES, Tile, next_tile


class HandPattern(Enum):
    STANDARD = "mentsute"      # 面子手: four groups + one pair
    CHIITOI = "chiitoitsu"     # 七対子: seven distinct pairs
    KOKUSHI = "kokushimusou"   # 国士無双: thirteen orphans


@dataclass(frozen=True)
class StandardDecomposition:
    melds: Tuple[Meld, ...] = ()
    pairs: Tuple[Pair, ...] = ()
    taatsu: Tuple[Taatsu, ...] = ()
    floating: Tuple[Tile, ...] = ()

    pattern: ClassVar[HandPattern] = HandPattern.STANDARD

    @property
    def tile_count(self) -> int:
        return (sum(len(m.tiles) for m in self.melds) + 2 * len(self.pairs)
                + 2 * len(self.taatsu) + len(self.floating))


@dataclass(frozen=True)
class ChiitoiDecomposition:
    """Seven pairs view of a hand.

    Attributes:
        pairs: One pair per kind held at least twice
        singles: Kinds held exactly once (each can still become a pair)
        floating: Third and fourth copies of a kind, useless for this pattern
    """
    pairs: Tuple[Pair, ...] = ()
    singles: Tuple[Tile, ...] = ()
    floating: Tuple[Tile, ...] = ()

    pattern: ClassVar[HandPattern] = HandPattern.CHIITOI

    @property
    def tile_count(self) -> int:
        return 2 * len(self.pairs) + len(self.singles) + len(self.floating)


@dataclass(frozen=True)
class KokushiDecomposition:
    """Thirteen orphans view of a hand.

    ``valid`` holds the first copy of each terminal/honor kind plus at most
    one duplicate; every other tile is floating.
    """
    valid: Tuple[Tile, ...] = ()
    floating: Tuple[Tile, ...] = ()

    pattern: ClassVar[HandPattern] = HandPattern.KOKUSHI

    @property
    def tile_count(self) -> int:
        return len(self.valid) + len(self.floating)

    @property
    def has_pair(self) -> bool:
        return len(set(self.valid)) != len(self.valid)


def _remove(tiles: Tuple[Tile, ...], *targets: Tile) -> Tuple[Tile, ...]:
    """Remove one occurrence of each target, keeping order."""
    rest = list(tiles)
    for t in targets:
        rest.remove(t)
    return tuple(rest)


def split_standard(tiles: Sequence[Tile]) -> List[StandardDecomposition]:
    """Enumerate every standard decomposition of the given tiles.

    The search always works on the smallest remaining tile and branches on
    every shape it can start: pair, triplet, partial run, run, and leaving
    it floating. Nothing is pruned, so the result is complete. Quads are
    never formed here; they only exist as declared melds.
    """
    found: List[StandardDecomposition] = []
    _split(tuple(sorted(tiles)), StandardDecomposition(), found)
    return found


def _split(tiles: Tuple[Tile, ...], acc: StandardDecomposition,
           found: List[StandardDecomposition]):
    if len(tiles) <= 1:
        if tiles:
            acc = replace(acc, floating=acc.floating + tiles)
        found.append(acc)
        return

    current, nxt = tiles[0], tiles[1]

    if current == nxt:
        _split(tiles[2:], replace(acc, pairs=acc.pairs + (Pair(current),)), found)
        if len(tiles) > 2 and tiles[2] == current:
            triplet = Meld(MeldType.KOUTSU, (current, current, current))
            _split(tiles[3:], replace(acc, melds=acc.melds + (triplet,)), found)

    if current.is_number_tile:
        plus_one = next_tile(current)
        plus_two = next_tile(plus_one) if plus_one is not None else None
        if plus_one is not None and plus_one in tiles:
            _split(_remove(tiles, current, plus_one),
                   replace(acc, taatsu=acc.taatsu + (Taatsu(current, plus_one),)),
                   found)
            if plus_two is not None and plus_two in tiles:
                run = Meld(MeldType.SHUNTSU, (current, plus_one, plus_two))
                _split(_remove(tiles, current, plus_one, plus_two),
                       replace(acc, melds=acc.melds + (run,)), found)
        elif plus_two is not None and plus_two in tiles:
            _split(_remove(tiles, current, plus_two),
                   replace(acc, taatsu=acc.taatsu + (Taatsu(current, plus_two),)),
                   found)

    _split(tiles[1:], replace(acc, floating=acc.floating + (current,)), found)


def decompose_chiitoi(tiles: Sequence[Tile]) -> ChiitoiDecomposition:
    """Single scan over the sorted tiles for the seven pairs pattern."""
    pairs, singles, floating = [], [], []
    for tile, group in groupby(sorted(tiles)):
        count = len(list(group))
        if count == 1:
            singles.append(tile)
        else:
            pairs.append(Pair(tile))
            floating.extend([tile] * (count - 2))
    return ChiitoiDecomposition(tuple(pairs), tuple(singles), tuple(floating))


def decompose_kokushi(tiles: Sequence[Tile]) -> KokushiDecomposition:
    """Merge walk of the sorted tiles against the 13 terminal/honor kinds."""
    valid, floating = [], []
    yaochu_pos = 0
    new_kind = True
    pair_taken = False
    for tile in sorted(tiles):
        while yaochu_pos < len(YAOCHU_TILES) and YAOCHU_TILES[yaochu_pos] < tile:
            yaochu_pos += 1
            new_kind = True
        if yaochu_pos < len(YAOCHU_TILES) and YAOCHU_TILES[yaochu_pos] == tile:
            if new_kind:
                valid.append(tile)
            elif not pair_taken:
                pair_taken = True
                valid.append(tile)
            else:
                floating.append(tile)
            new_kind = False
        else:
            floating.append(tile)
    return KokushiDecomposition(tuple(valid), tuple(floating))
