"""Furiten (振聴) detection.

Two kinds matter for a single hand snapshot:
1. Discard furiten: a waiting tile is in your own discard pile
2. Temporary furiten: a waiting tile was discarded by someone else this
   turn and you did not ron
"""

from typing import Iterable, Set

from machi.core.tile import Tile


def is_discard_furiten(waiting_tiles: Iterable[Tile],
                       discard_pool: Iterable[Tile]) -> bool:
    """Check if any waiting tile appears in the player's discard pile.

    A furiten hand cannot ron (but can still tsumo).
    """
    discarded = set(discard_pool)
    return any(w in discarded for w in waiting_tiles)


def is_temporary_furiten(waiting_tiles: Iterable[Tile],
                         missed_tiles: Set[Tile]) -> bool:
    """Check temporary (same-turn) furiten.

    If a winning tile was discarded by another player this turn and you
    didn't claim it, you're in temporary furiten until your next draw.
    """
    return any(w in missed_tiles for w in waiting_tiles)
