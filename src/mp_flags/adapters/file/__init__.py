"""File adapter – JSON-file persisted flag store."""
from mp_flags.adapters.file.store import JsonFileFlagStore

__all__ = ["JsonFileFlagStore"]
