"""Root error class for the mp-flags error hierarchy.

Every error the library raises (store boundary validation, unavailable store
substrates, bad hash arguments, settings problems) derives from
:class:`BaseError`, so callers can log any of them through ``to_dict()``.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the mp-flags error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug such as ``store_unavailable`` (defaults
            to ``default_code``).
        detail: Extra context for log records, e.g. the offending flag key.
        cause: Underlying exception, such as the ``OSError`` or Redis error
            behind an unavailable store.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
