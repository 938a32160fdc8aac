"""Special variant: the ordinary system with extra announcements."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from prompts import Say

from .system import InequalitySystem

logger = logging.getLogger(__name__)


class SpecialInequalitySystem:
    """Wraps an :class:`InequalitySystem` and announces each step."""

    def __init__(self, inner: InequalitySystem, *, say: Say = print) -> None:
        self._inner = inner
        self._say = say
        self._say("Special inequality system initialised")
        logger.info("Created %s around %s", type(self).__name__, type(inner).__name__)

    @property
    def inequality_count(self) -> int:
        return self._inner.inequality_count

    @property
    def variable_count(self) -> int:
        return self._inner.variable_count

    @property
    def coefficients(self) -> np.ndarray:
        return self._inner.coefficients

    @property
    def constants(self) -> np.ndarray:
        return self._inner.constants

    @property
    def closed(self) -> bool:
        return self._inner.closed

    def input_coefficients(self) -> None:
        self._inner.input_coefficients()

    def render(self) -> str:
        return self._inner.render()

    def print_system(self) -> None:
        self._say("\n--- Special system format ---")
        self._inner.print_system()

    def check_vector(self, variables: Sequence[float]) -> bool:
        self._say("Checking the vector in the special system...")
        return self._inner.check_vector(variables)

    def close(self) -> None:
        self._inner.close(owner=type(self).__name__)

    def __enter__(self) -> SpecialInequalitySystem:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
