"""Inequality system variants and the factory that picks one."""

from __future__ import annotations

from prompts import Ask, Say

from .base import CheckableSystem
from .special import SpecialInequalitySystem
from .system import DimensionMismatchError, InequalitySystem, format_number, format_row

VARIANTS: tuple[str, ...] = ("ordinary", "special")


def make_system(
    variant: str,
    inequality_count: int,
    variable_count: int,
    *,
    ask: Ask = input,
    say: Say = print,
) -> CheckableSystem:
    if variant not in VARIANTS:
        raise ValueError(f"unknown system variant: {variant}")
    system = InequalitySystem(inequality_count, variable_count, ask=ask, say=say)
    if variant == "special":
        return SpecialInequalitySystem(system, say=say)
    return system


__all__ = [
    "CheckableSystem",
    "DimensionMismatchError",
    "InequalitySystem",
    "SpecialInequalitySystem",
    "VARIANTS",
    "format_number",
    "format_row",
    "make_system",
]
