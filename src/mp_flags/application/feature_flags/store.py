"""Application feature flags – FlagStore port."""
from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any

from mp_flags.application.feature_flags.feature_flag import FlagDefinition


class FlagStore(abc.ABC):
    """Port: key → :class:`FlagDefinition` storage.

    ``upsert_flag`` fully replaces the definition for a key (no merge) and
    accepts either a definition or its JSON-compatible mapping, which is
    validated on the way in.  ``get_all_flags`` returns a copy in insertion
    order.  Implementations decide their own consistency guarantees; the
    evaluator treats each call as atomic.
    """

    @abc.abstractmethod
    def get_flag(self, key: str) -> FlagDefinition | None: ...

    @abc.abstractmethod
    def get_all_flags(self) -> dict[str, FlagDefinition]: ...

    @abc.abstractmethod
    def upsert_flag(self, key: str, definition: FlagDefinition | Mapping[str, Any]) -> None: ...

    @abc.abstractmethod
    def delete_flag(self, key: str) -> None: ...


__all__ = ["FlagStore"]
