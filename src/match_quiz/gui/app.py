"""
Entry point for the PySide6 GUI.

Runs the Qt event loop through ``QtAsyncio`` so the engine's delayed
match/mismatch handling can be scheduled as asyncio tasks from Qt slots.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="match-quiz",
        description="Two-column question/answer matching game.",
    )
    parser.add_argument("--deck", type=Path, help="Deck JSON file (default: built-in deck)")
    parser.add_argument("--rows", type=int, default=5, help="Visible rows (default: 5)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_source(deck: Optional[Path]):
    from match_quiz.core.models import ItemSource
    from match_quiz.core.utils import load_deck

    if deck is None:
        return ItemSource.default()
    return load_deck(deck)


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the GUI application.
    """
    from PySide6 import QtAsyncio
    from PySide6.QtWidgets import QApplication

    from match_quiz.engine import EngineConfig, RoundEngine
    from match_quiz.exceptions import MatchQuizError
    from match_quiz.gui.main_window import MainWindow
    from match_quiz.gui.styles.theme import GLOBAL_STYLESHEET

    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        source = load_source(args.deck)
        config = EngineConfig(visible_rows=args.rows, seed=args.seed)
        engine = RoundEngine(source, config)
    except (MatchQuizError, ValueError) as e:
        logger.error(f"Cannot start: {e}")
        return 2

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Match Quiz")
    app.setStyleSheet(GLOBAL_STYLESHEET)

    engine.initialize_round()
    window = MainWindow(engine)
    window.show()

    QtAsyncio.run(handle_sigint=True)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
