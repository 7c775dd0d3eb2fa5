"""Application feature flags – FeatureFlagSettings and store factory.

Environment variables (via :class:`~mp_flags.config.EnvSettingsLoader`)::

    FEATURE_FLAGS_SEED=checkout-service
    FEATURE_FLAGS_DEFAULT_ROLLOUT_ATTRIBUTE=accountId
    FEATURE_FLAGS_STORE_BACKEND=file          # memory | file | redis
    FEATURE_FLAGS_STORE_PATH=/etc/app/flags.json
    FEATURE_FLAGS_REDIS_URL=redis://localhost:6379/0
    FEATURE_FLAGS_STORAGE_KEY=feature-flags
"""
from __future__ import annotations

import dataclasses

from mp_flags.application.feature_flags.client import DEFAULT_SEED
from mp_flags.application.feature_flags.in_memory import InMemoryFlagStore
from mp_flags.application.feature_flags.rollout import DEFAULT_ROLLOUT_ATTRIBUTE
from mp_flags.application.feature_flags.store import FlagStore
from mp_flags.config.settings import Settings
from mp_flags.config.validation import InvalidSettingValueError

STORE_BACKENDS = ("memory", "file", "redis")
DEFAULT_STORAGE_KEY = "feature-flags"


@dataclasses.dataclass
class FeatureFlagSettings(Settings):
    _prefix = "FEATURE_FLAGS"

    seed: str = DEFAULT_SEED
    default_rollout_attribute: str = DEFAULT_ROLLOUT_ATTRIBUTE
    store_backend: str = "memory"
    store_path: str | None = None
    redis_url: str | None = None
    storage_key: str = DEFAULT_STORAGE_KEY

    def _validate(self) -> None:
        if not self.seed:
            raise InvalidSettingValueError("seed", self.seed, "must not be empty")
        if not self.default_rollout_attribute:
            raise InvalidSettingValueError(
                "default_rollout_attribute", self.default_rollout_attribute, "must not be empty"
            )
        if self.store_backend not in STORE_BACKENDS:
            raise InvalidSettingValueError(
                "store_backend", self.store_backend, f"must be one of {', '.join(STORE_BACKENDS)}"
            )
        if self.store_backend == "file" and not self.store_path:
            raise InvalidSettingValueError("store_path", self.store_path, "required for the file backend")
        if self.store_backend == "redis" and not self.redis_url:
            raise InvalidSettingValueError("redis_url", self.redis_url, "required for the redis backend")


def build_store(settings: FeatureFlagSettings) -> FlagStore:
    """Construct the store selected by ``settings.store_backend``.

    Raises :class:`~mp_flags.kernel.errors.StoreUnavailableError` when the
    backend's substrate is missing.
    """
    if settings.store_backend == "file":
        from mp_flags.adapters.file import JsonFileFlagStore

        return JsonFileFlagStore(settings.store_path)  # type: ignore[arg-type]
    if settings.store_backend == "redis":
        from mp_flags.adapters.redis import RedisFlagStore

        return RedisFlagStore.from_url(settings.redis_url, key=settings.storage_key)  # type: ignore[arg-type]
    return InMemoryFlagStore()


__all__ = ["DEFAULT_STORAGE_KEY", "STORE_BACKENDS", "FeatureFlagSettings", "build_store"]
