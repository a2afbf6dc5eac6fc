"""Outcome container: a value that is either a success or a failure.

``Result`` is a closed union of two frozen cases. ``Success`` carries the
computed value and nothing else; ``Failure`` carries a human-readable error
description and nothing else. Neither case can represent "both" or "neither".

Both cases expose the same read-only surface (``succeeded``, ``value``,
``error``) so calling code can inspect an outcome without ``isinstance``
checks, and both support ``match`` statements on their fields:

    match outcome:
        case Success(value=v):
            ...
        case Failure(error=msg):
            ...
"""

from __future__ import annotations

import dataclasses
import typing

from ._validation import _require

if typing.TYPE_CHECKING:
    from collections.abc import Callable

    from .config import Config

T = typing.TypeVar("T")
R = typing.TypeVar("R")


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[T]):
    """A successfully computed value."""

    value: T

    @property
    def succeeded(self) -> bool:
        return True

    @property
    def error(self) -> None:
        """Always ``None``; a success never carries an error."""
        return None

    def map(
        self, mapper: Callable[[T], R], *, config: Config | None = None
    ) -> Result[R]:
        """Method form of :func:`resultpattern.combinators.map_result`."""
        from .combinators import map_result

        return map_result(self, mapper, config=config)

    def match(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[str], R],
        *,
        config: Config | None = None,
    ) -> Result[R]:
        """Method form of :func:`resultpattern.combinators.match_result`."""
        from .combinators import match_result

        return match_result(self, on_success, on_failure, config=config)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure:
    """A failed computation, described by an error message.

    The message is not inspected; an empty string is a legal error.
    """

    error: str

    def __post_init__(self) -> None:
        _require(
            condition=isinstance(self.error, str),
            message=f"must be str, got {type(self.error).__name__}",
            field_name="error",
            hint="Wrap exceptions with Failure(str(exc)).",
        )

    @property
    def succeeded(self) -> bool:
        return False

    @property
    def value(self) -> None:
        """Always ``None``; a failure holds no value."""
        return None

    def map(
        self, mapper: Callable[[typing.Any], R], *, config: Config | None = None
    ) -> Result[R]:
        """Method form of :func:`resultpattern.combinators.map_result`."""
        from .combinators import map_result

        return map_result(self, mapper, config=config)

    def match(
        self,
        on_success: Callable[[typing.Any], R],
        on_failure: Callable[[str], R],
        *,
        config: Config | None = None,
    ) -> Result[R]:
        """Method form of :func:`resultpattern.combinators.match_result`."""
        from .combinators import match_result

        return match_result(self, on_success, on_failure, config=config)


Result = Success[T] | Failure


def success(value: T) -> Success[T]:
    """Wrap ``value`` as a successful outcome."""
    return Success(value)


def failure(error: str) -> Failure:
    """Wrap ``error`` as a failed outcome."""
    return Failure(error)


def _validate_result_reason(obj: object) -> str | None:
    """Internal: return None when ``obj`` is a result, else a concise reason."""
    if isinstance(obj, Success | Failure):
        return None
    if obj is None:
        return "expected Success or Failure, got None"
    return f"expected Success or Failure, got {type(obj).__name__}"


def is_result(obj: object) -> typing.TypeGuard[Result[typing.Any]]:
    """Return True if ``obj`` is a ``Success`` or a ``Failure``."""
    return _validate_result_reason(obj) is None


def explain_invalid_result(obj: object) -> str | None:
    """Return a short reason when ``obj`` is not a result, otherwise None."""
    return _validate_result_reason(obj)
