"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from emotionmap.config import DEFAULT_DATA_PATH
from emotionmap.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emotionmap",
        description="Valence/arousal scatter viewer for emotion words",
    )
    parser.add_argument("--data", default=DEFAULT_DATA_PATH, help="Dataset JSON file path or http(s) URL")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument(
        "--export",
        metavar="PATH",
        default=None,
        help="Render all points to an image (PNG/SVG/PDF) without opening a window",
    )
    return parser


def export_snapshot(source: str, path: str) -> int:
    from emotionmap.model.loader import load_dataset
    from emotionmap.model.state import AppState
    from emotionmap.scene.snapshot import render_snapshot

    state = AppState()
    state.begin_load()
    outcome = load_dataset(source)
    for message in outcome.messages():
        logger.warning(message)
    state.finish_load(outcome)
    render_snapshot(state.visible, path)
    return 1 if outcome.used_fallback else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    if args.export:
        return export_snapshot(args.data, args.export)

    from emotionmap.app.main import run
    return run(args.data)


if __name__ == "__main__":
    sys.exit(main())
