"""Exception hierarchy for resultpattern."""

from __future__ import annotations


class ResultPatternError(Exception):
    """Base exception for all resultpattern errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidArgumentError(ResultPatternError, ValueError):
    """A caller passed an argument that breaks a combinator's contract.

    Raised for programming errors such as handing ``None`` to ``map_result``.
    These are never converted into a ``Failure``; they propagate to the caller.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        argument: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.argument = argument


class ConfigurationError(ResultPatternError):
    """Configuration validation or resolution failed."""
