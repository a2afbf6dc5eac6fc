"""Configuration: frozen Config controlling how captured faults are reported."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

from resultpattern.errors import ConfigurationError

load_dotenv()

LOG_FAULTS_ENV = "RESULTPATTERN_LOG_FAULTS"
FAULT_LOG_LEVEL_ENV = "RESULTPATTERN_FAULT_LOG_LEVEL"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class Config:
    """Immutable settings for the combinators.

    Faults raised by user-supplied functions are always converted into
    ``Failure`` values; this only controls whether that conversion is logged.

    Example:
        config = Config(fault_log_level=logging.WARNING)
        map_result(outcome, parse, config=config)
    """

    log_faults: bool = True
    fault_log_level: int = logging.DEBUG

    def __post_init__(self) -> None:
        """Validate the log level."""
        if self.fault_log_level not in _LEVELS.values():
            raise ConfigurationError(
                f"Unknown fault_log_level: {self.fault_log_level!r}",
                hint="Use one of logging.DEBUG, INFO, WARNING, ERROR, CRITICAL.",
            )

    def __str__(self) -> str:
        return (
            f"Config(log_faults={self.log_faults}, "
            f"fault_log_level={logging.getLevelName(self.fault_log_level)})"
        )

    __repr__ = __str__


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(
        f"{LOG_FAULTS_ENV} must be a boolean, got {raw!r}",
        hint="Use 1/0, true/false, yes/no or on/off.",
    )


def _parse_level(raw: str) -> int:
    value = raw.strip()
    if value.upper() in _LEVELS:
        return _LEVELS[value.upper()]
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(
            f"{FAULT_LOG_LEVEL_ENV} must be a logging level, got {raw!r}",
            hint="Use a level name such as DEBUG or WARNING.",
        ) from None


def resolve_config(
    *,
    log_faults: bool | None = None,
    fault_log_level: int | None = None,
) -> Config:
    """Build a Config from explicit overrides, then the environment, then defaults."""
    if log_faults is None:
        raw = os.environ.get(LOG_FAULTS_ENV)
        log_faults = _parse_bool(raw) if raw is not None else True

    if fault_log_level is None:
        raw = os.environ.get(FAULT_LOG_LEVEL_ENV)
        fault_log_level = _parse_level(raw) if raw is not None else logging.DEBUG

    return Config(log_faults=log_faults, fault_log_level=fault_log_level)
