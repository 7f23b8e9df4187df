"""Analysis report rendering using Rich."""

from typing import List, Set

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from machi.core.hand import Hand
from machi.core.tile import Tile
from machi.rules.agari import winning_tiles
from machi.rules.decompose import (
    ChiitoiDecomposition, KokushiDecomposition, StandardDecomposition,
)
from machi.rules.machi import HandAnalysis, WaitCondition
from machi.rules.shanten import AGARI_STATE, decomposition_sort_key
from machi.ui.i18n import t, translate_pattern
from machi.ui.tile_display import tile_to_display_str, tiles_to_rich_text


def shanten_label(shanten: int) -> str:
    if shanten == AGARI_STATE:
        return t("label.agari")
    if shanten == 0:
        return t("label.tenpai")
    return t("label.shanten", n=shanten)


def format_condition(condition: WaitCondition) -> str:
    """One-line plain text summary, e.g. ``打 東 摸 2m(1) 5m(3) 残り4枚``."""
    waits = " ".join(f"{tile_to_display_str(tile)}({count})"
                     for tile, count in condition.waits.items())
    line = t("label.condition", discard=tile_to_display_str(condition.discard),
             waits=waits, n=condition.remaining)
    if condition.furiten:
        line += f" [{t('label.furiten')}]"
    return line


def tenpai_winners(hand: Hand, condition: WaitCondition) -> Set[Tile]:
    """Wait tiles that actually complete the hand after the discard."""
    rest = list(hand.closed_tiles)
    rest.remove(condition.discard)
    return set(winning_tiles(rest)) & set(condition.waits)


def _decomposition_parts(decomposition) -> List[tuple]:
    if isinstance(decomposition, StandardDecomposition):
        return [
            ("part.melds", " ".join(str(m) for m in decomposition.melds)),
            ("part.pairs", " ".join(str(p) for p in decomposition.pairs)),
            ("part.taatsu", " ".join(str(s) for s in decomposition.taatsu)),
            ("part.floating", " ".join(tile.name for tile in decomposition.floating)),
        ]
    if isinstance(decomposition, ChiitoiDecomposition):
        return [
            ("part.pairs", " ".join(str(p) for p in decomposition.pairs)),
            ("part.singles", " ".join(tile.name for tile in decomposition.singles)),
            ("part.floating", " ".join(tile.name for tile in decomposition.floating)),
        ]
    if isinstance(decomposition, KokushiDecomposition):
        return [
            ("part.valid", " ".join(tile.name for tile in decomposition.valid)),
            ("part.floating", " ".join(tile.name for tile in decomposition.floating)),
        ]
    raise TypeError(f"unknown decomposition {decomposition!r}")


def render_decompositions(console: Console, analysis: HandAnalysis):
    """Table of every minimal decomposition, one row each."""
    table = Table(title=t("label.decompositions"), show_lines=False, box=None)
    table.add_column("", style="cyan")
    for key in ("part.melds", "part.pairs", "part.taatsu", "part.floating"):
        table.add_column(t(key))

    for decomposition in sorted(analysis.decompositions, key=decomposition_sort_key):
        parts = _decomposition_parts(decomposition)
        row = [translate_pattern(decomposition.pattern.value)]
        if isinstance(decomposition, StandardDecomposition):
            row.extend(text for _, text in parts)
        else:
            # Special patterns: label each part inline
            row.append("  ".join(f"{t(key)}: {text}" for key, text in parts if text))
            row.extend([""] * 3)
        table.add_row(*row)
    console.print(table)


def render_analysis(console: Console, hand: Hand, analysis: HandAnalysis,
                    show_decompositions: bool = False):
    """Render the shanten, optional decompositions and every wait condition."""
    header = Text()
    header.append(f"{t('label.hand')}: ")
    header.append_text(tiles_to_rich_text(hand.closed_tiles))
    for meld in hand.melds:
        header.append("  ")
        header.append_text(tiles_to_rich_text(meld.tiles, separator=""))
    if hand.discard_pool:
        header.append(f"\n{t('label.discards')}: ")
        header.append_text(tiles_to_rich_text(hand.discard_pool))

    console.print(Panel(header, title=f"[bold]{shanten_label(analysis.shanten)}[/bold]",
                        border_style="cyan"))

    if show_decompositions:
        render_decompositions(console, analysis)

    if analysis.is_agari:
        return
    if not analysis.conditions:
        console.print(f"  [dim]{t('label.no_conditions')}[/dim]")
        return

    for condition in analysis.conditions:
        winners = tenpai_winners(hand, condition) if analysis.shanten == 0 else set()
        line = Text("  ")
        line.append_text(tiles_to_rich_text([condition.discard]))
        line.append(" → ")
        line.append_text(tiles_to_rich_text(condition.wait_tiles, highlight=winners))
        line.append(f"  {condition.remaining}", style="bold")
        if condition.furiten:
            line.append(f"  {t('label.furiten')}", style="bold red")
        console.print(line)
