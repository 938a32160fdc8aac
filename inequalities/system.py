"""Ordinary system of linear inequalities ``A x <= b``."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from prompts import Ask, Say, read_real

logger = logging.getLogger(__name__)


class DimensionMismatchError(ValueError):
    """Raised when an array does not match the declared system dimensions."""


def format_number(value: float) -> str:
    """Shortest round-trip text with a dot as decimal point and no trailing ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_row(coefficients: Sequence[float], bound: float) -> str:
    parts = []
    for j, coeff in enumerate(coefficients):
        if j == 0:
            sign = "-" if coeff < 0 else ""
        else:
            sign = " + " if coeff >= 0 else " - "
        parts.append(f"{sign}{format_number(abs(coeff))}*x{j + 1}")
    parts.append(f" ≤ {format_number(bound)}")
    return "".join(parts)


class InequalitySystem:
    """Fixed-size grid of coefficients with one bound per row."""

    def __init__(
        self,
        inequality_count: int,
        variable_count: int,
        *,
        coefficients: Optional[np.ndarray] = None,
        constants: Optional[np.ndarray] = None,
        ask: Ask = input,
        say: Say = print,
    ) -> None:
        if inequality_count <= 0:
            raise ValueError("inequality_count must be positive")
        if variable_count <= 0:
            raise ValueError("variable_count must be positive")

        self._m = int(inequality_count)
        self._n = int(variable_count)
        self._coefficients = np.zeros((self._m, self._n), dtype=float)
        self._constants = np.zeros(self._m, dtype=float)
        self._ask = ask
        self._say = say
        self._closed = False

        if coefficients is not None:
            A = np.asarray(coefficients, dtype=float)
            if A.shape != (self._m, self._n):
                raise DimensionMismatchError(
                    f"coefficient grid must be ({self._m},{self._n}), got {A.shape}"
                )
            self._coefficients[:] = A
        if constants is not None:
            b = np.asarray(constants, dtype=float)
            if b.shape != (self._m,):
                raise DimensionMismatchError(
                    f"constants must have length {self._m}, got shape {b.shape}"
                )
            self._constants[:] = b

        logger.info("Created %s (%d x %d)", type(self).__name__, self._m, self._n)

    @property
    def inequality_count(self) -> int:
        return self._m

    @property
    def variable_count(self) -> int:
        return self._n

    @property
    def coefficients(self) -> np.ndarray:
        return self._coefficients.copy()

    @property
    def constants(self) -> np.ndarray:
        return self._constants.copy()

    @property
    def closed(self) -> bool:
        return self._closed

    def input_coefficients(self) -> None:
        self._say(
            f"\nEnter coefficients for a system of {self._m} inequalities "
            f"in {self._n} variables:"
        )
        for i in range(self._m):
            self._say(f"\nInequality {i + 1}:")
            for j in range(self._n):
                self._coefficients[i, j] = read_real(
                    f"  Enter a{i + 1}{j + 1}: ", ask=self._ask, say=self._say
                )
            self._constants[i] = read_real(
                f"  Enter b{i + 1}: ", ask=self._ask, say=self._say
            )

    def render(self) -> str:
        return "\n".join(
            format_row(row, bound)
            for row, bound in zip(self._coefficients.tolist(), self._constants.tolist())
        )

    def print_system(self) -> None:
        self._say("\nSystem of linear inequalities:")
        self._say(self.render())

    def check_vector(self, variables: Sequence[float]) -> bool:
        x = np.asarray(variables, dtype=float)
        if x.ndim != 1 or x.size != self._n:
            raise DimensionMismatchError(
                f"expected {self._n} variables, got {x.size}"
            )
        for i, row in enumerate(self._coefficients.tolist()):
            total = 0.0
            for coeff, value in zip(row, x.tolist()):
                total += coeff * value
            if total > self._constants[i]:
                logger.debug("Row %d violated: %s > %s", i + 1, total, self._constants[i])
                return False
        return True

    def close(self, *, owner: Optional[str] = None) -> None:
        """Release once; ``owner`` names a wrapping variant in the log line."""
        if self._closed:
            return
        self._closed = True
        logger.info("Released resources of %s", owner or type(self).__name__)

    def __enter__(self) -> InequalitySystem:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
