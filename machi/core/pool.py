"""Tile pool (牌山) bookkeeping - copies of each kind seen outside the hand."""

from typing import Dict, Iterable, List

from .exceptions import PoolError
from .tile import ALL_TILES_34, TILE_COPIES, Tile


class TilePool:
    """Tracks how many copies of each tile kind are visible elsewhere.

    "Elsewhere" means outside the hand being analysed: other players'
    discards, their open melds, dora indicators. Wait analysis subtracts
    these from the remaining count of each wait tile.
    """

    def __init__(self, visible: Iterable[Tile] = ()):
        self._visible: List[int] = [0] * 34
        for tile in visible:
            self.reveal(tile)

    @staticmethod
    def _slot(tile: Tile) -> int:
        if not tile.is_valid:
            raise PoolError(f"tile {tile.name} is out of range")
        return tile.index34

    def reveal(self, tile: Tile):
        """Record one more visible copy of a tile."""
        slot = self._slot(tile)
        count = self._visible[slot]
        if count >= TILE_COPIES:
            raise PoolError(
                f"already {TILE_COPIES} {tile.name} visible, cannot reveal another")
        self._visible[slot] = count + 1

    def conceal(self, tile: Tile):
        """Undo one reveal of a tile."""
        slot = self._slot(tile)
        count = self._visible[slot]
        if count <= 0:
            raise PoolError(f"no visible {tile.name} to take back")
        self._visible[slot] = count - 1

    def visible_count(self, tile: Tile) -> int:
        return self._visible[self._slot(tile)]

    def unseen_count(self, tile: Tile) -> int:
        """Copies of a tile not yet seen anywhere in the pool."""
        return TILE_COPIES - self._visible[self._slot(tile)]

    @property
    def total_visible(self) -> int:
        return sum(self._visible)

    def as_dict(self) -> Dict[Tile, int]:
        """Visible counts for every kind with at least one copy seen."""
        return {t: self._visible[t.index34] for t in ALL_TILES_34 if self._visible[t.index34]}

    def reset(self):
        """Forget everything (new round)."""
        self._visible = [0] * 34
