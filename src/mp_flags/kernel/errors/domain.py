"""Domain errors – malformed flag definitions and invalid arguments."""

from __future__ import annotations

from typing import Any

from mp_flags.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A flag definition does not have the expected shape.

    ``errors`` is a list of field-level failures, each a dict with
    ``field`` (dotted path) and ``message`` keys.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidArgumentError(DomainError):
    """An argument is outside the domain a function accepts."""

    default_code = "invalid_argument"

    def __init__(
        self,
        argument: str,
        value: Any,
        reason: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(f"Invalid argument '{argument}'={value!r}: {reason}", **kwargs)
        self.argument = argument
        self.value = value
        self.reason = reason


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
