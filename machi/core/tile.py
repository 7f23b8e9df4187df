"""Tile definition with 34-kind encoding and same-suit adjacency."""

from enum import IntEnum
from typing import List, Optional


class TileSuit(IntEnum):
    MAN = 0    # 万子
    PIN = 1    # 筒子
    SOU = 2    # 索子
    HONOR = 3  # 字牌 (東南西北白發中)


# Physical copies of each tile kind in a full set
TILE_COPIES = 4

SUIT_SIZES = {
    TileSuit.MAN: 9,
    TileSuit.PIN: 9,
    TileSuit.SOU: 9,
    TileSuit.HONOR: 7,
}

SUIT_CHARS = {
    TileSuit.MAN: 'm',
    TileSuit.PIN: 'p',
    TileSuit.SOU: 's',
    TileSuit.HONOR: 'z',
}

# Yaochu (terminal + honor) tile indices in 34 encoding
YAOCHU_INDICES = [0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33]

# Tile names for 34 encoding
TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "東", "南", "西", "北", "白", "發", "中",
]


class Tile:
    """Immutable tile value identified by suit and number.

    Out-of-range numbers are representable so that hand validation can
    report them; ``is_valid`` tells whether this is one of the 34 kinds.
    """
    __slots__ = ('_suit', '_number')

    def __init__(self, suit: TileSuit, number: int):
        self._suit = TileSuit(suit)
        self._number = number

    @property
    def suit(self) -> TileSuit:
        return self._suit

    @property
    def number(self) -> int:
        return self._number

    @property
    def is_valid(self) -> bool:
        return 1 <= self._number <= SUIT_SIZES[self._suit]

    @property
    def index34(self) -> int:
        return self._suit * 9 + self._number - 1

    @property
    def is_honor(self) -> bool:
        return self._suit == TileSuit.HONOR

    @property
    def is_number_tile(self) -> bool:
        return not self.is_honor

    @property
    def is_terminal(self) -> bool:
        return not self.is_honor and self._number in (1, 9)

    @property
    def is_yaochu(self) -> bool:
        return self.is_honor or self.is_terminal

    @property
    def name(self) -> str:
        if not self.is_valid:
            return f"{self._number}{SUIT_CHARS[self._suit]}?"
        return TILE_NAMES_34[self.index34]

    def __repr__(self):
        return f"Tile({self.name})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._suit == other._suit and self._number == other._number
        return NotImplemented

    def __hash__(self):
        return hash((self._suit, self._number))

    def __lt__(self, other):
        if isinstance(other, Tile):
            return (self._suit, self._number) < (other._suit, other._number)
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Tile):
            return (self._suit, self._number) > (other._suit, other._number)
        return NotImplemented


def tile_from_index34(index34: int) -> Tile:
    """Build the tile for a 34 encoding index."""
    if not (0 <= index34 < 34):
        raise ValueError(f"index34 must be 0..33, got {index34}")
    return ALL_TILES_34[index34]


def tile_34_to_name(index34: int) -> str:
    """Get tile name from 34 encoding."""
    return TILE_NAMES_34[index34]


def tiles_to_34_array(tiles) -> List[int]:
    """Convert an iterable of tiles to a 34-length count array."""
    arr = [0] * 34
    for t in tiles:
        arr[t.index34] += 1
    return arr


def next_tile(tile: Tile) -> Optional[Tile]:
    """The tile one rank above in the same numbered suit, if any.

    Honors have no neighbours and 9 has nothing above it.
    """
    if tile.is_honor or tile.number >= 9:
        return None
    return Tile(tile.suit, tile.number + 1)


def prev_tile(tile: Tile) -> Optional[Tile]:
    """The tile one rank below in the same numbered suit, if any."""
    if tile.is_honor or tile.number <= 1:
        return None
    return Tile(tile.suit, tile.number - 1)


# Pre-create all 34 kinds in canonical order
ALL_TILES_34 = [
    Tile(suit, number)
    for suit in TileSuit
    for number in range(1, SUIT_SIZES[suit] + 1)
]

YAOCHU_TILES = [ALL_TILES_34[i] for i in YAOCHU_INDICES]
