#!/usr/bin/env python3
"""Interactive terminal scorer: one line of roll notation per game."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from . import notation
from .exceptions import BowlingError
from .logging_config import configure_logging
from .utils.sentry import init_sentry

logger = logging.getLogger(__name__)

SPLASH = "\n".join(
    [
        "*" * 56,
        "",
        "  Tenpin: ten-pin bowling score calculator.",
        "",
        "*" * 56,
    ]
)

INSTRUCTIONS = "\n".join(
    [
        "Enter a line of rolls covering one game of American ten-pin bowling",
        "to get its total score.",
        "",
        "'X' is a strike, '/' a spare, '-' a miss, and a digit 1-9 the number",
        "of pins knocked down by the roll. Type 'quit' or 'exit' to leave.",
    ]
)

PROMPT = "Enter input: "
RETRY_PROMPT = "Invalid format, please enter input again: "
ILLEGAL_OPERATION = "Error: You attempted to perform an illegal operation..."
FAREWELL = "The quit/exit command has been invoked. Exiting application..."
LINE_SEP = "-" * 57
QUIT_COMMANDS = ("quit", "exit")


class QuitRequested(Exception):
    """The user typed a quit command or input ran out."""


def _read_line(stdin: TextIO, stdout: TextIO, prompt: str) -> str:
    stdout.write(prompt)
    stdout.flush()
    raw = stdin.readline()
    if not raw:
        raise QuitRequested()
    line = raw.strip()
    if line in QUIT_COMMANDS:
        raise QuitRequested()
    return line


def read_rolls(stdin: TextIO, stdout: TextIO) -> str:
    """Prompt until a line made only of roll symbols is entered."""
    line = _read_line(stdin, stdout, PROMPT)
    while not notation.is_valid(line):
        logger.debug("Rejected input %r", line)
        line = _read_line(stdin, stdout, RETRY_PROMPT)
    return line


def score_line(line: str) -> int:
    return notation.play(line).total_score()


def run(stdin: TextIO, stdout: TextIO, *, splash: bool = True) -> int:
    if splash:
        print(SPLASH, file=stdout)
        print(INSTRUCTIONS, file=stdout)
        print(file=stdout)

    games = 0
    while True:
        try:
            line = read_rolls(stdin, stdout)
        except QuitRequested:
            print(file=stdout)
            print(FAREWELL, file=stdout)
            logger.info("Scored %d game(s)", games)
            return 0

        try:
            total = score_line(line)
        except BowlingError as exc:
            logger.info("Discarding game %r: %s", line, exc)
            print(ILLEGAL_OPERATION, file=stdout)
            continue

        games += 1
        print(f"Total score: {total}", file=stdout)
        print(LINE_SEP, file=stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tenpin",
        description="Score games of ten-pin bowling from roll notation.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: TENPIN_LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--no-splash",
        action="store_true",
        help="Skip the banner and instructions.",
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    init_sentry()
    return run(stdin or sys.stdin, stdout or sys.stdout, splash=not args.no_splash)


if __name__ == "__main__":
    raise SystemExit(main())
