"""One interactive evaluation cycle of an inequality system."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from config import Config
from inequalities import VARIANTS, make_system
from prompts import Ask, Say, read_int_in_range, read_real

logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    variant: str
    rendered: str
    vector: list[float]
    satisfied: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "variant": self.variant,
            "rendered": self.rendered,
            "vector": list(self.vector),
            "satisfied": self.satisfied,
        }


def choose_variant(cfg: Config, *, ask: Ask = input, say: Say = print) -> str:
    if cfg.system.variant is not None:
        return cfg.system.variant
    choice = read_int_in_range(
        "Choose mode (1 - ordinary system, 2 - special): ", 1, 2, ask=ask, say=say
    )
    return VARIANTS[choice - 1]


def run_session(cfg: Config, *, ask: Ask = input, say: Say = print) -> SessionResult:
    say("=== Linear inequality system check ===\n")
    variant = choose_variant(cfg, ask=ask, say=say)
    logger.info("Using %s system", variant)

    with make_system(
        variant,
        cfg.system.inequalities,
        cfg.system.variables,
        ask=ask,
        say=say,
    ) as system:
        system.input_coefficients()
        system.print_system()

        n = system.variable_count
        say(f"\nEnter {n} variables to check:")
        vector = [read_real(f"x{j + 1} = ", ask=ask, say=say) for j in range(n)]

        satisfied = system.check_vector(vector)
        logger.debug("Vector %s satisfied=%s", vector, satisfied)
        say(
            "The vector satisfies the system"
            if satisfied
            else "The vector does not satisfy the system"
        )
        rendered = system.render()

    say("\n--- End of run ---")
    return SessionResult(variant=variant, rendered=rendered, vector=vector, satisfied=satisfied)
