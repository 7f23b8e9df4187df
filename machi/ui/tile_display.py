"""Tile display formatting with colors for terminal output."""

from typing import Iterable, Optional, Set

from rich.text import Text

from machi.core.tile import Tile, TileSuit


# Color schemes
SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.HONOR: "yellow",
}

_HONOR_KEYS = ["tile.east", "tile.south", "tile.west", "tile.north",
               "tile.haku", "tile.hatsu", "tile.chun"]


def tile_to_display_str(tile: Tile) -> str:
    """Localized short name of a tile.

    Number tiles (1m-9s) are universal. Honor tiles are translated.
    """
    if tile.is_honor:
        from machi.ui.i18n import t
        return t(_HONOR_KEYS[tile.number - 1])
    return tile.name


def tile_to_rich_text(tile: Tile, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    style = f"bold {SUIT_COLORS[tile.suit]}"
    if highlight:
        style += " on white"
    return Text(f"[{tile_to_display_str(tile)}]", style=style)


def tiles_to_rich_text(tiles: Iterable[Tile], separator: str = " ",
                       highlight: Optional[Set[Tile]] = None) -> Text:
    """Convert a list of tiles to Rich Text, highlighting the given kinds."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile, bool(highlight) and tile in highlight))
    return result
