"""
Replay runner for score update events.

Reads one ScoreUpdateEvent JSON message per line and hands each to the
listener, the same way a bus subscription would.

Usage:
    python -m tournament_matches.consumer events.jsonl
    cat events.jsonl | python -m tournament_matches.consumer
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from .. import config
from ..delegate import get_delegate
from ..exceptions import MatchServiceError
from .listener import MatchScoreUpdateListener

logger = logging.getLogger(__name__)


def replay(
    listener: MatchScoreUpdateListener,
    lines: Iterable[str],
    stop_on_error: bool = False,
) -> tuple[int, int]:
    """
    Feed messages to the listener.

    Returns:
        Tuple of (applied, failed) message counts
    """
    applied = 0
    failed = 0

    for line_number, line in enumerate(lines, start=1):
        message = line.strip()
        if not message:
            continue
        try:
            listener.process_message(message)
            applied += 1
        except MatchServiceError as e:
            failed += 1
            logger.warning(f"Line {line_number}: {e}")
            if stop_on_error:
                break

    return applied, failed


def _open_source(source: str) -> TextIO:
    if source == '-':
        return sys.stdin
    return open(source, 'r', encoding='utf-8')


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the replay runner."""
    parser = argparse.ArgumentParser(description='Apply score update events to tournament matches')
    parser.add_argument('source', nargs='?', default='-',
                        help='JSON lines file with one event per line (default: stdin)')
    parser.add_argument('--stop-on-error', action='store_true',
                        help='Stop at the first rejected message')
    parser.add_argument('--allow-negative', action='store_true',
                        help='Do not reject negative scores')

    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL.upper())

    enforce_range = False if args.allow_negative else None
    listener = MatchScoreUpdateListener(get_delegate(), enforce_range=enforce_range)

    try:
        stream = _open_source(args.source)
    except OSError as e:
        logger.error(f"Cannot read events from {args.source}: {e}")
        return 1

    try:
        applied, failed = replay(listener, stream, stop_on_error=args.stop_on_error)
    finally:
        if stream is not sys.stdin:
            stream.close()

    logger.info(f"Applied {applied} score updates, {failed} rejected")
    return 1 if failed else 0
