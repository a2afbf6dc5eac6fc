"""Internal validation helpers shared by the container and the combinators.

Centralizes precondition checks so contract violations surface with the same
exception type and message shape everywhere.
"""

from __future__ import annotations

from resultpattern.errors import InvalidArgumentError


def _require(
    *,
    condition: bool,
    message: str,
    field_name: str | None = None,
    hint: str | None = None,
) -> None:
    """Raise ``InvalidArgumentError`` with optional field context."""
    if not condition:
        if field_name:
            raise InvalidArgumentError(
                f"{field_name}: {message}", hint=hint, argument=field_name
            )
        raise InvalidArgumentError(message, hint=hint)

