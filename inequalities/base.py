"""Shared operation set for inequality system variants."""

from __future__ import annotations

from typing import Protocol, Sequence


class CheckableSystem(Protocol):
    """A system of ``A x <= b`` rows that can be filled, shown and checked."""

    inequality_count: int
    variable_count: int

    def input_coefficients(self) -> None:
        """Read every coefficient and bound from the console."""

    def render(self) -> str:
        """Return one text line per inequality."""

    def print_system(self) -> None:
        """Show the rendered system to the user."""

    def check_vector(self, variables: Sequence[float]) -> bool:
        """Return whether ``variables`` satisfies every row."""

    def close(self) -> None:
        """Release the system; repeated calls are no-ops."""

    def __enter__(self) -> "CheckableSystem":
        ...

    def __exit__(self, *exc_info: object) -> None:
        ...
