"""Infrastructure errors – missing or broken storage substrates."""

from __future__ import annotations

from typing import Any

from mp_flags.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class StoreUnavailableError(InfrastructureError):
    """A flag store's substrate is not present in this environment.

    Raised at store construction only, never while evaluating flags.
    """

    default_code = "store_unavailable"

    def __init__(
        self,
        store: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Flag store '{store}' is unavailable", **kwargs)
        self.store = store


__all__ = [
    "InfrastructureError",
    "StoreUnavailableError",
]
