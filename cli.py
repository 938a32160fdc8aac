"""Command-line interface for the linear inequality checker."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from config import Config, default_config, load_config
from runner.session import run_session


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Linear inequality system checker")
    parser.add_argument(
        "--config",
        default=None,
        help="Optional path to YAML configuration file.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured logging level (e.g. DEBUG).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    cfg = load_config(args.config) if args.config else default_config()
    if args.log_level:
        cfg.logging.level = args.log_level.upper()
    _configure_output(cfg)
    try:
        run_session(cfg)
    except EOFError:
        print("\nInput closed, exiting.")


def _configure_output(cfg: Config) -> None:
    level = cfg.logging.level_number
    if not isinstance(level, int):
        raise ValueError(f"unknown logging level: {cfg.logging.level}")
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8")
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="[%(levelname)s %(name)s] %(message)s",
    )


if __name__ == "__main__":
    main()
