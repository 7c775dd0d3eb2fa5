"""Application feature flags – InMemoryFlagStore."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mp_flags.application.feature_flags.feature_flag import FlagDefinition
from mp_flags.application.feature_flags.store import FlagStore


class InMemoryFlagStore(FlagStore):
    """Simple store backed by a ``{key: FlagDefinition}`` dict.

    *initial_flags* is copied, so later mutation of the caller's mapping has
    no effect on the store.
    """

    def __init__(
        self, initial_flags: Mapping[str, FlagDefinition | Mapping[str, Any]] | None = None
    ) -> None:
        self._flags: dict[str, FlagDefinition] = {
            key: FlagDefinition.coerce(value) for key, value in (initial_flags or {}).items()
        }

    def get_flag(self, key: str) -> FlagDefinition | None:
        return self._flags.get(key)

    def get_all_flags(self) -> dict[str, FlagDefinition]:
        return dict(self._flags)

    def upsert_flag(self, key: str, definition: FlagDefinition | Mapping[str, Any]) -> None:
        self._flags[key] = FlagDefinition.coerce(definition)

    def delete_flag(self, key: str) -> None:
        self._flags.pop(key, None)


__all__ = ["InMemoryFlagStore"]
