"""Tile groups: completed melds (面子), pairs (対子) and partial runs (搭子)."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .tile import Tile, next_tile, prev_tile


class MeldType(Enum):
    SHUNTSU = "shuntsu"  # 順子 run
    KOUTSU = "koutsu"    # 刻子 triplet
    KANTSU = "kantsu"    # 槓子 quad


@dataclass(frozen=True)
class Meld:
    """A completed group of three or four tiles.

    Attributes:
        meld_type: Run, triplet or quad
        tiles: Tiles of the group (runs are stored in ascending order)
    """
    meld_type: MeldType
    tiles: Tuple[Tile, ...]

    @property
    def is_kan(self) -> bool:
        return self.meld_type == MeldType.KANTSU

    @property
    def first(self) -> Tile:
        return self.tiles[0]

    def __str__(self):
        return "".join(t.name for t in self.tiles)


@dataclass(frozen=True)
class Pair:
    """Two identical tiles (toitsu)."""
    tile: Tile

    @property
    def tiles(self) -> Tuple[Tile, Tile]:
        return (self.tile, self.tile)

    def __str__(self):
        return self.tile.name * 2


@dataclass(frozen=True)
class Taatsu:
    """Two tiles of one numbered suit that need one more to form a run.

    ``low`` and ``high`` are either adjacent (ryanmen/penchan) or one rank
    apart (kanchan).
    """
    low: Tile
    high: Tile

    @property
    def tiles(self) -> Tuple[Tile, Tile]:
        return (self.low, self.high)

    @property
    def is_kanchan(self) -> bool:
        return self.high.number - self.low.number == 2

    def completing_tiles(self) -> Tuple[Tile, ...]:
        """Tiles that turn this partial run into a run.

        Returns an empty tuple only for a kanchan whose middle tile does
        not exist, which a well-formed taatsu never is.
        """
        if self.is_kanchan:
            middle = next_tile(self.low)
            return (middle,) if middle is not None else ()
        waits = []
        below = prev_tile(self.low)
        if below is not None:
            waits.append(below)
        above = next_tile(self.high)
        if above is not None:
            waits.append(above)
        return tuple(waits)

    def __str__(self):
        return f"{self.low.name}{self.high.name}"


def classify_meld(tiles: Sequence[Tile]) -> Optional[Meld]:
    """Recognize a run, triplet or quad from three or four tiles.

    Returns None for out-of-range tiles, mixed suits, honors in a run, or
    ranks that are neither identical nor consecutive.
    """
    if not all(t.is_valid for t in tiles):
        return None

    if len(tiles) == 4:
        if all(t == tiles[0] for t in tiles):
            return Meld(MeldType.KANTSU, tuple(tiles))
        return None

    if len(tiles) != 3:
        return None

    if tiles[0] == tiles[1] == tiles[2]:
        return Meld(MeldType.KOUTSU, tuple(tiles))

    suit = tiles[0].suit
    if tiles[0].is_honor or any(t.suit != suit for t in tiles):
        return None
    ordered = sorted(tiles)
    a, b, c = (t.number for t in ordered)
    if a + 1 == b and b + 1 == c:
        return Meld(MeldType.SHUNTSU, tuple(ordered))
    return None
