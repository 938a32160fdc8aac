"""Console prompts that keep asking until the answer parses."""

from __future__ import annotations

import math
import re
from typing import Callable

Ask = Callable[[str], str]
Say = Callable[[str], None]

# Invariant decimal point only: no group separators, no underscores, no inf/nan.
_REAL_PATTERN = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII)
_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)


def parse_real(text: str | None) -> float | None:
    """Return the finite float spelled by ``text`` or ``None``."""
    if text is None or not _REAL_PATTERN.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def parse_int(text: str | None) -> int | None:
    if text is None or not _INT_PATTERN.match(text):
        return None
    return int(text)


def read_real(prompt: str, *, ask: Ask = input, say: Say = print) -> float:
    while True:
        value = parse_real(ask(prompt))
        if value is not None:
            return value
        say("Invalid number. Use a dot for fractional values (e.g. 1.5).")


def read_int_in_range(
    prompt: str,
    low: int,
    high: int,
    *,
    ask: Ask = input,
    say: Say = print,
) -> int:
    if low > high:
        raise ValueError("lower bound must not exceed upper bound")
    while True:
        value = parse_int(ask(prompt))
        if value is not None and low <= value <= high:
            return value
        say(f"Enter a number from {low} to {high}.")
