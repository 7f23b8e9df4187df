"""Hand state - closed tiles, declared melds, discard pool."""

from typing import List, Tuple

from .exceptions import InvalidHandError
from .meld import Meld
from .tile import TILE_COPIES, Tile, tile_34_to_name, tiles_to_34_array

# Largest hand a player can hold: four groups and a pair
MAX_HAND_TILES = 14


class Hand:
    """A player's hand.

    Attributes:
        closed_tiles: Concealed tiles (not melded)
        melds: Declared groups, taken out of concealed play
        discard_pool: Tiles this player discarded earlier (in order)
    """

    def __init__(self, closed_tiles=None, melds=None, discard_pool=None):
        self.closed_tiles: List[Tile] = list(closed_tiles or [])
        self.melds: List[Meld] = list(melds or [])
        self.discard_pool: List[Tile] = list(discard_pool or [])

    def snapshot(self) -> Tuple[Tile, ...]:
        """Sorted, immutable copy of the concealed tiles."""
        return tuple(sorted(self.closed_tiles))

    def to_34_array(self) -> List[int]:
        """Convert closed tiles to 34-length count array."""
        return tiles_to_34_array(self.closed_tiles)

    def visible_34_array(self) -> List[int]:
        """Counts of every tile this hand shows: concealed plus melded."""
        arr = self.to_34_array()
        for meld in self.melds:
            for t in meld.tiles:
                arr[t.index34] += 1
        return arr

    @property
    def num_melds(self) -> int:
        return len(self.melds)

    @property
    def total_tiles(self) -> int:
        """Concealed tiles plus three per meld (a quad counts as three)."""
        return len(self.closed_tiles) + 3 * len(self.melds)

    def validate(self):
        """Check the hand can be analysed; raise InvalidHandError if not."""
        for t in self.closed_tiles:
            if not t.is_valid:
                raise InvalidHandError(f"tile {t.name} is out of range")
        for meld in self.melds:
            for t in meld.tiles:
                if not t.is_valid:
                    raise InvalidHandError(f"meld {meld} holds out-of-range tile {t.name}")

        closed = len(self.closed_tiles)
        if closed % 3 != 2:
            raise InvalidHandError(
                f"concealed tile count must be 3k+2 (2, 5, 8, 11 or 14), got {closed}")
        if self.total_tiles > MAX_HAND_TILES:
            raise InvalidHandError(
                f"hand holds {self.total_tiles} tiles counting melds, "
                f"at most {MAX_HAND_TILES} allowed")

        for index34, count in enumerate(self.visible_34_array()):
            if count > TILE_COPIES:
                raise InvalidHandError(
                    f"{count} copies of {tile_34_to_name(index34)}, "
                    f"at most {TILE_COPIES} exist")

    def __repr__(self):
        closed = "".join(t.name for t in sorted(self.closed_tiles))
        melds = "".join(f"[{m}]" for m in self.melds)
        return f"Hand({closed}{melds})"
