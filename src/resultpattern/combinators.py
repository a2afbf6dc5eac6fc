"""Combinators that compose results with caller-supplied functions.

Both combinators act as a fault boundary: an ``Exception`` raised by the
function they invoke becomes a ``Failure`` carrying the exception's message,
so a chain of combinators never needs its own ``try``/``except``.

Contract violations are different. Passing something that is not a result
raises ``InvalidArgumentError`` before any user code runs. A handler that
is not callable is just another fault once it is invoked.
"""

from __future__ import annotations

import logging
import typing

from ._validation import _require
from .config import Config, resolve_config
from .result import Failure, Success, explain_invalid_result

if typing.TYPE_CHECKING:
    from collections.abc import Callable

    from .result import Result

log = logging.getLogger(__name__)

T = typing.TypeVar("T")
R = typing.TypeVar("R")


def _require_result(result: object) -> None:
    reason = explain_invalid_result(result)
    _require(
        condition=reason is None,
        message=reason or "",
        field_name="result",
        hint="Build results with success(...) or failure(...).",
    )


def _describe(exc: Exception) -> str:
    try:
        return str(exc)
    except Exception:
        return type(exc).__name__


def _capture(
    combinator: str,
    func: Callable[[typing.Any], R],
    arg: typing.Any,
    cfg: Config,
) -> Result[R]:
    """Invoke ``func(arg)``, turning a raised ``Exception`` into a ``Failure``."""
    try:
        return Success(func(arg))
    except Exception as exc:
        message = _describe(exc)
        if cfg.log_faults:
            log.log(
                cfg.fault_log_level,
                "%s: %s raised %s: %s",
                combinator,
                getattr(func, "__qualname__", repr(func)),
                type(exc).__name__,
                message,
                exc_info=exc,
            )
        return Failure(message)


def map_result(
    result: Result[T],
    mapper: Callable[[T], R],
    *,
    config: Config | None = None,
) -> Result[R]:
    """Transform the value of a successful result.

    Args:
        result: The result to transform.
        mapper: Function applied to ``result.value`` when ``result`` succeeded.
        config: Optional fault-logging settings; resolved from the
            environment when omitted.

    Returns:
        ``Success(mapper(value))`` for a success, ``Failure(message)`` if
        ``mapper`` raised, or a ``Failure`` with the original error when
        ``result`` had already failed. ``mapper`` is not called in that case.

    Raises:
        InvalidArgumentError: ``result`` is not a result (e.g. ``None``).
        ConfigurationError: ``config`` is omitted and the environment holds
            an invalid setting.

    Example:
        >>> map_result(Success(5), lambda x: x * 2)
        Success(value=10)
    """
    cfg = config if config is not None else resolve_config()
    _require_result(result)

    if isinstance(result, Failure):
        return Failure(result.error)
    return _capture("map_result", mapper, result.value, cfg)


def match_result(
    result: Result[T],
    on_success: Callable[[T], R],
    on_failure: Callable[[str], R],
    *,
    config: Config | None = None,
) -> Result[R]:
    """Fold either case of ``result`` into a new successful result.

    ``on_success`` receives the value of a success and ``on_failure`` the
    error of a failure. Whichever handler runs, its return value is wrapped
    in ``Success``, so a failed input is recovered when ``on_failure``
    returns normally. A handler that raises yields ``Failure(message)``.

    Raises:
        InvalidArgumentError: ``result`` is not a result.
        ConfigurationError: ``config`` is omitted and the environment holds
            an invalid setting.

    Example:
        >>> match_result(Failure("Error occurred"), lambda x: x * 2, len)
        Success(value=14)
    """
    cfg = config if config is not None else resolve_config()
    _require_result(result)

    if isinstance(result, Success):
        return _capture("match_result", on_success, result.value, cfg)
    return _capture("match_result", on_failure, result.error, cfg)
