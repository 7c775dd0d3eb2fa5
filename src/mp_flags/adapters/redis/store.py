"""Redis adapter – RedisFlagStore."""
from __future__ import annotations

from typing import Any

from mp_flags.application.feature_flags.serialized import SerializedFlagStore
from mp_flags.kernel.errors import StoreUnavailableError


def _require_redis() -> Any:
    try:
        import redis
        return redis
    except ImportError as exc:
        raise StoreUnavailableError(
            "redis", "Install 'mp-flags[redis]' to use the Redis flag store", cause=exc
        ) from exc


class RedisFlagStore(SerializedFlagStore):
    """Keep the whole flag mapping as one JSON string under a single Redis key.

    The key is read once at construction; every mutation rewrites it with a
    single ``SET``, which Redis applies atomically.  Construction fails with
    :class:`StoreUnavailableError` when ``redis`` is not installed or the
    server does not answer ``PING``.
    """

    def __init__(self, client: Any, *, key: str = "feature-flags") -> None:
        self._redis = _require_redis()
        self._client = client
        self._key = key
        super().__init__()

    @classmethod
    def from_url(cls, url: str, *, key: str = "feature-flags", **kwargs: Any) -> RedisFlagStore:
        redis = _require_redis()
        return cls(redis.Redis.from_url(url, **kwargs), key=key)

    @property
    def key(self) -> str:
        return self._key

    @property
    def slot_name(self) -> str:
        return f"redis:{self._key}"

    def _ensure_available(self) -> None:
        try:
            self._client.ping()
        except self._redis.exceptions.RedisError as exc:
            raise StoreUnavailableError("redis", f"Redis is unreachable: {exc}", cause=exc) from exc

    def _read_slot(self) -> bytes | str | None:
        return self._client.get(self._key)

    def _write_slot(self, payload: str) -> None:
        self._client.set(self._key, payload)

    def close(self) -> None:
        self._client.close()


__all__ = ["RedisFlagStore"]
