"""Точка входа командной строки: `fraction-calc` / `python -m src.calculator`."""

import argparse
import dataclasses
import sys
from typing import Optional, Sequence

from loguru import logger

from src.calculator.config import LOG_LEVELS, CalculatorConfig
from src.calculator.session import CalculatorSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fraction-calc",
        description="Interactive calculator for fractions (+ - * /).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=None,
        help="Print one JSON calculation record per evaluation instead of the dialog",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        default=None,
        help="Log level for stderr diagnostics (default: WARNING)",
    )
    return parser


def configure_logging(level: str) -> None:
    """Один sink loguru в stderr, stdout остаётся только для диалога."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = CalculatorConfig.from_env()
    except ValueError as e:
        parser.error(str(e))
    if args.json is not None:
        config = dataclasses.replace(config, json_output=args.json)
    if args.log_level is not None:
        config = dataclasses.replace(config, log_level=args.log_level)

    configure_logging(config.log_level)

    session = CalculatorSession(sys.stdin, sys.stdout, config)
    return session.run()
