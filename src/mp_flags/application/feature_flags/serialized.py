"""Application feature flags – SerializedFlagStore.

Base class for stores that keep the whole flag mapping in a single storage
slot (a file, a Redis key, ...).  The slot holds one JSON object mapping flag
key → flag definition.  It is read once at construction and rewritten
wholesale on every mutation.

Unreadable slot contents never fail construction: invalid JSON or a non-object
payload yields an empty store, and individual entries that do not parse as
flag definitions are skipped.  A missing substrate, on the other hand, raises
:class:`~mp_flags.kernel.errors.StoreUnavailableError` immediately.
"""
from __future__ import annotations

import abc
import json
import threading
from collections.abc import Mapping
from typing import Any

from mp_flags.application.feature_flags.feature_flag import FlagDefinition
from mp_flags.application.feature_flags.store import FlagStore
from mp_flags.kernel.errors import ValidationError
from mp_flags.observability.logging import get_logger

logger = get_logger(__name__)


class SerializedFlagStore(FlagStore):
    """Single-slot persisted store; subclasses supply the slot I/O."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ensure_available()
        self._flags: dict[str, FlagDefinition] = self._load()

    # ------------------------------------------------------------------
    # Slot I/O
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def _ensure_available(self) -> None:
        """Raise :class:`StoreUnavailableError` when the substrate is missing."""

    @abc.abstractmethod
    def _read_slot(self) -> str | bytes | None: ...

    @abc.abstractmethod
    def _write_slot(self, payload: str) -> None: ...

    @property
    def slot_name(self) -> str:
        return type(self).__name__

    def _load(self) -> dict[str, FlagDefinition]:
        raw = self._read_slot()
        if not raw:
            return {}
        try:
            parsed = json.loads(raw)
        except (ValueError, UnicodeDecodeError) as exc:
            logger.warning("flag_store_slot_corrupt", slot=self.slot_name, error=str(exc))
            return {}
        if not isinstance(parsed, dict):
            logger.warning(
                "flag_store_slot_corrupt",
                slot=self.slot_name,
                error=f"expected object, got {type(parsed).__name__}",
            )
            return {}

        flags: dict[str, FlagDefinition] = {}
        for key, value in parsed.items():
            try:
                flags[key] = FlagDefinition.from_dict(value)
            except ValidationError as exc:
                logger.warning(
                    "flag_store_entry_skipped", slot=self.slot_name, flag_key=key, errors=exc.errors
                )
        return flags

    def _save(self) -> None:
        payload = json.dumps(
            {key: flag.to_dict() for key, flag in self._flags.items()},
            ensure_ascii=False,
        )
        self._write_slot(payload)

    # ------------------------------------------------------------------
    # FlagStore
    # ------------------------------------------------------------------

    def get_flag(self, key: str) -> FlagDefinition | None:
        return self._flags.get(key)

    def get_all_flags(self) -> dict[str, FlagDefinition]:
        return dict(self._flags)

    def upsert_flag(self, key: str, definition: FlagDefinition | Mapping[str, Any]) -> None:
        flag = FlagDefinition.coerce(definition)
        with self._lock:
            flags = dict(self._flags)
            flags[key] = flag
            self._commit(flags)
        logger.debug("flag_upserted", slot=self.slot_name, flag_key=key)

    def delete_flag(self, key: str) -> None:
        with self._lock:
            if key not in self._flags:
                return
            flags = dict(self._flags)
            del flags[key]
            self._commit(flags)
        logger.debug("flag_deleted", slot=self.slot_name, flag_key=key)

    def _commit(self, flags: dict[str, FlagDefinition]) -> None:
        # Readers only ever see a fully-written mapping.
        previous, self._flags = self._flags, flags
        try:
            self._save()
        except Exception:
            self._flags = previous
            raise


__all__ = ["SerializedFlagStore"]
