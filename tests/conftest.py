"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration, and shared test
doubles. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class RecordingHandler:
    """Callable test double that records its arguments.

    Returns ``result`` when called, or raises ``raises`` when set. Use to
    verify whether (and with what) a combinator invoked a handler.
    """

    result: Any = None
    raises: Exception | None = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        if self.raises is not None:
            raise self.raises
        return self.result

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def recording_handler() -> type[RecordingHandler]:
    """Return the RecordingHandler class for building handler doubles."""
    return RecordingHandler


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_resultpattern_env(request, monkeypatch):
    """Clear RESULTPATTERN_* env vars so tests see default configuration.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("RESULTPATTERN_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("hypothesis").setLevel(logging.WARNING)
