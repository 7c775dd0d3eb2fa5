"""Redis adapter – Redis-persisted flag store."""
from mp_flags.adapters.redis.store import RedisFlagStore

__all__ = ["RedisFlagStore"]
