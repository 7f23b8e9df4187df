"""Win (和了) detection - standard form, seven pairs, thirteen orphans.

Works on 34-length count arrays of concealed tiles, independently of the
decomposition search, so it doubles as an oracle for it.
"""

from typing import List, Sequence

from machi.core.tile import TILE_COPIES, YAOCHU_INDICES, Tile, tile_from_index34, tiles_to_34_array


def is_agari(tiles_34: List[int]) -> bool:
    """Check if the 34-array represents a winning hand (any form)."""
    return (is_standard_agari(tiles_34) or
            is_chiitoi_agari(tiles_34) or
            is_kokushi_agari(tiles_34))


def is_standard_agari(tiles_34: List[int]) -> bool:
    """Check standard form (n mentsu + 1 jantai).

    The array should have exactly 14, 11, 8, 5, or 2 tiles total
    depending on number of melds already declared.
    """
    total = sum(tiles_34)
    if total % 3 != 2:
        return False

    for head in range(34):
        if tiles_34[head] < 2:
            continue
        remaining = list(tiles_34)
        remaining[head] -= 2
        if _all_mentsu(remaining, 0):
            return True
    return False


def _all_mentsu(tiles: List[int], start: int) -> bool:
    """Whether the remaining counts split exactly into triplets and runs."""
    idx = start
    while idx < 34 and tiles[idx] == 0:
        idx += 1

    if idx >= 34:
        return True

    # Try koutsu (triplet)
    if tiles[idx] >= 3:
        tiles[idx] -= 3
        ok = _all_mentsu(tiles, idx)
        tiles[idx] += 3
        if ok:
            return True

    # Try shuntsu (sequence) - only for number tiles (0-26)
    if idx < 27 and idx % 9 <= 6:
        if tiles[idx + 1] >= 1 and tiles[idx + 2] >= 1:
            tiles[idx] -= 1
            tiles[idx + 1] -= 1
            tiles[idx + 2] -= 1
            ok = _all_mentsu(tiles, idx)
            tiles[idx] += 1
            tiles[idx + 1] += 1
            tiles[idx + 2] += 1
            if ok:
                return True

    return False


def is_chiitoi_agari(tiles_34: List[int]) -> bool:
    """Check seven pairs (七対子) form."""
    if sum(tiles_34) != 14:
        return False
    pairs = sum(1 for c in tiles_34 if c == 2)
    return pairs == 7


def is_kokushi_agari(tiles_34: List[int]) -> bool:
    """Check thirteen orphans (国士無双) form."""
    if sum(tiles_34) != 14:
        return False
    has_pair = False
    for idx in YAOCHU_INDICES:
        if tiles_34[idx] == 0:
            return False
        if tiles_34[idx] == 2:
            has_pair = True
    # Must have exactly 14 tiles all yaochu with one pair
    non_yaochu = sum(tiles_34[i] for i in range(34) if i not in YAOCHU_INDICES)
    return has_pair and non_yaochu == 0


def get_waiting_tiles(tiles_34: List[int]) -> List[int]:
    """Find all tiles (34 indices) that would complete this hand.

    The hand should have 3k+1 tiles (13 for a fully concealed hand).
    Kinds already held four times cannot be drawn and are skipped.
    """
    total = sum(tiles_34)
    if total % 3 != 1:
        return []

    waits = []
    for i in range(34):
        if tiles_34[i] >= TILE_COPIES:
            continue
        test = list(tiles_34)
        test[i] += 1
        if is_agari(test):
            waits.append(i)
    return waits


def winning_tiles(tiles: Sequence[Tile]) -> List[Tile]:
    """Tiles completing a 3k+1 concealed tile list, in tile order."""
    return [tile_from_index34(i) for i in get_waiting_tiles(tiles_to_34_array(tiles))]
