"""Configuration loading for the inequality checker."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from inequalities import VARIANTS


@dataclass
class SystemConfig:
    inequalities: int = 2
    variables: int = 2
    variant: Optional[str] = None


@dataclass
class LoggingConfig:
    level: str = "INFO"

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass
class Config:
    system: SystemConfig = field(default_factory=SystemConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _validate(cfg: Config) -> Config:
    if cfg.system.inequalities <= 0:
        raise ValueError("system.inequalities must be positive")
    if cfg.system.variables <= 0:
        raise ValueError("system.variables must be positive")
    if cfg.system.variant is not None and cfg.system.variant not in VARIANTS:
        raise ValueError(f"unknown system variant: {cfg.system.variant}")
    if not isinstance(cfg.logging.level_number, int):
        raise ValueError(f"unknown logging level: {cfg.logging.level}")
    return cfg


def default_config() -> Config:
    return Config()


def load_config(path: str | Path) -> Config:
    cfg_path = Path(path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(cfg_path)
    with cfg_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    system_raw = raw.get("system") or {}
    logging_raw = raw.get("logging") or {}

    variant = system_raw.get("variant")
    system = SystemConfig(
        inequalities=int(system_raw.get("inequalities", 2)),
        variables=int(system_raw.get("variables", 2)),
        variant=None if variant is None else str(variant).lower(),
    )
    log = LoggingConfig(level=str(logging_raw.get("level", "INFO")).upper())

    return _validate(Config(system=system, logging=log))
