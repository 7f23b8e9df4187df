"""Shorthand hand notation.

Numbers followed by a suit letter, e.g. ``123m456p789s11z``. Honors can be
written as ``1z``..``7z`` or as kanji (東南西北白發中). ``0`` is a red five
and counts as a plain five. Spaces are ignored and the input may be out
of order. A declared meld goes inside brackets::

    123445m 4445p 8s [111z]
    45p 8s14 4m[11 1z]2 5m44p 3m
"""

from typing import List, Tuple

from .exceptions import NotationError
from .hand import Hand
from .meld import Meld, classify_meld
from .tile import Tile, TileSuit

SUIT_LETTERS = {
    'm': TileSuit.MAN,
    'p': TileSuit.PIN,
    's': TileSuit.SOU,
    'z': TileSuit.HONOR,
}

HONOR_KANJI = {
    '東': 1, '南': 2, '西': 3, '北': 4,
    '白': 5, '發': 6, '中': 7,
}


def _flush(digits: List[int], suit_char: str, index: int, out: List[Tile]):
    if not digits:
        raise NotationError(
            f"unused suit letter '{suit_char}' at index {index}", index)
    suit = SUIT_LETTERS[suit_char]
    for n in digits:
        if n == 0:
            if suit == TileSuit.HONOR:
                raise NotationError(f"'0z' is not a tile (index {index})", index)
            n = 5
        out.append(Tile(suit, n))
    digits.clear()


def _scan(text: str) -> Tuple[List[Tile], List[Meld]]:
    closed: List[Tile] = []
    melds: List[Meld] = []
    meld_stash: List[Tile] = []
    digits: List[int] = []
    in_meld = False

    for i, ch in enumerate(text):
        target = meld_stash if in_meld else closed
        if ch.isdigit():
            digits.append(int(ch))
        elif ch in SUIT_LETTERS:
            _flush(digits, ch, i, target)
        elif ch in HONOR_KANJI:
            if digits:
                raise NotationError(
                    f"need 'm' 'p' 's' 'z' but found '{ch}' at index {i}", i)
            target.append(Tile(TileSuit.HONOR, HONOR_KANJI[ch]))
        elif ch == '[':
            if in_meld:
                raise NotationError(f"second '[' found at index {i}", i)
            if digits:
                raise NotationError(
                    f"need 'm' 'p' 's' 'z' but found '[' at index {i}", i)
            in_meld = True
        elif ch == ']':
            if not in_meld:
                raise NotationError(f"unmatched ']' found at index {i}", i)
            if digits:
                raise NotationError(
                    f"need 'm' 'p' 's' 'z' but found ']' at index {i}", i)
            meld = classify_meld(meld_stash)
            if meld is None:
                raise NotationError(f"not a valid meld in '[]' before index {i}", i)
            melds.append(meld)
            meld_stash = []
            in_meld = False
        elif ch.isspace():
            continue
        else:
            raise NotationError(f"unknown character '{ch}' at index {i}", i)

    if in_meld:
        raise NotationError("unclosed '['", len(text))
    if digits:
        raise NotationError("trailing digits without a suit letter", len(text))
    return closed, melds


def parse_tiles(text: str) -> List[Tile]:
    """Parse a plain tile list (no brackets), keeping input order."""
    closed, melds = _scan(text)
    if melds:
        raise NotationError("melds are not allowed in a tile list")
    return closed


def parse_hand(text: str) -> Hand:
    """Parse hand notation into a validated Hand with sorted closed tiles."""
    closed, melds = _scan(text)
    hand = Hand(sorted(closed), melds)
    hand.validate()
    return hand


def format_tiles(tiles) -> str:
    """Compact notation for tiles, e.g. ``123m45p東``.

    Numbered suits are grouped by suit; honors are written as kanji.
    """
    out = []
    run_suit = None
    digits = ""
    for t in sorted(tiles):
        if t.is_honor:
            if digits:
                out.append(digits + run_suit)
                digits = ""
            out.append(t.name)
            run_suit = None
            continue
        suit_char = "mps"[t.suit]
        if suit_char != run_suit and digits:
            out.append(digits + run_suit)
            digits = ""
        run_suit = suit_char
        digits += str(t.number)
    if digits:
        out.append(digits + run_suit)
    return "".join(out)


def format_hand(hand: Hand) -> str:
    """Notation for a whole hand, melds in brackets after the closed tiles."""
    melds = "".join(f"[{format_tiles(m.tiles)}]" for m in hand.melds)
    return format_tiles(hand.closed_tiles) + melds
