#!/usr/bin/env python3
"""Mahjong Wait Analyzer - Terminal CLI"""

import argparse
import sys
from typing import Optional

import structlog
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from machi.config import SUPPORTED_LANGUAGES, AnalyzerConfig
from machi.core.exceptions import AnalysisError, InvalidHandError, PoolError
from machi.core.notation import parse_hand, parse_tiles
from machi.core.pool import TilePool
from machi.engine.analysis_log import AnalysisLogger
from machi.log import configure_logging
from machi.rules.machi import analyze
from machi.ui.i18n import set_language, t
from machi.ui.report import format_condition, render_analysis, shanten_label

console = Console()
logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Shanten, decompositions and waits of a mahjong hand.")
    parser.add_argument("hands", nargs="*",
                        help="hands in shorthand notation, e.g. 1112223334445m東")
    parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default=None)
    parser.add_argument("--discards", default="",
                        help="the hand's own discards (for furiten)")
    parser.add_argument("--pool", default="",
                        help="tiles visible elsewhere on the table")
    parser.add_argument("--missed", default="",
                        help="tiles passed this turn without calling")
    parser.add_argument("-d", "--show-decompositions", action="store_true", default=None)
    parser.add_argument("--plain", action="store_true",
                        help="one line per discard, no panels or colors")
    parser.add_argument("--record", action="store_true",
                        help="save the analyses to a JSON log")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-format", default=None)
    return parser


def analyze_one(text: str, args, config: AnalyzerConfig,
                recorder: Optional[AnalysisLogger] = None) -> bool:
    """Parse, analyse and print one hand. Returns False if it was rejected."""
    try:
        hand = parse_hand(text)
        hand.discard_pool.extend(parse_tiles(args.discards))
        pool = TilePool(parse_tiles(args.pool))
        analysis = analyze(hand, pool, parse_tiles(args.missed))
    except InvalidHandError as e:
        console.print(f"  [red]{escape(t('error.invalid_hand', error=e))}[/red]")
        return False
    except PoolError as e:
        console.print(f"  [red]{escape(t('error.invalid_pool', error=e))}[/red]")
        return False
    except AnalysisError as e:
        logger.error("analysis failed", hand=text, error=str(e))
        console.print(f"  [red]{escape(t('error.analysis', error=e))}[/red]")
        return False

    if args.plain:
        console.print(shanten_label(analysis.shanten), markup=False, highlight=False)
        for condition in analysis.conditions:
            console.print(format_condition(condition), markup=False, highlight=False)
    else:
        render_analysis(console, hand, analysis, config.show_decompositions)

    if recorder is not None:
        recorder.record(hand, analysis)
    return True


def interactive(args, config: AnalyzerConfig, recorder: Optional[AnalysisLogger] = None):
    """Prompt for hands until a blank line or EOF."""
    console.print()
    console.print(Panel(
        f"[bold cyan]{t('label.title')}[/bold cyan]\n"
        f"[dim]{t('label.subtitle')}[/dim]",
        border_style="cyan",
        padding=(1, 4),
    ))
    while True:
        try:
            text = console.input(f"\n  {t('prompt.hand')}\n  > ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not text:
            break
        analyze_one(text, args, config, recorder)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = AnalyzerConfig.from_env(
            language=args.lang,
            log_level=args.log_level,
            log_format=args.log_format,
            show_decompositions=args.show_decompositions,
        )
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 2

    configure_logging(config.log_level, config.log_format)
    set_language(config.language)

    recorder = None
    if args.record:
        recorder = AnalysisLogger({"language": config.language}, config.log_dir)
        console.print(f"  [dim]{t('msg.session_id', id=recorder.session_id)}[/dim]")

    ok = True
    if args.hands:
        for text in args.hands:
            ok = analyze_one(text, args, config, recorder) and ok
    else:
        interactive(args, config, recorder)

    if recorder is not None and recorder.entries:
        path = recorder.save()
        console.print(f"  [dim]{t('msg.log_saved', path=path)}[/dim]")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
