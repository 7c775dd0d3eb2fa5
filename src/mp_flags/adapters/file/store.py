"""File adapter – JsonFileFlagStore."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path

from mp_flags.application.feature_flags.serialized import SerializedFlagStore
from mp_flags.kernel.errors import StoreUnavailableError


class JsonFileFlagStore(SerializedFlagStore):
    """Persist every flag as one JSON object in a single file.

    The parent directory must exist and be writable.  The file itself may be
    missing (empty store).  Writes go to a temporary file in the same
    directory which is then renamed over the slot, so readers of the file
    never observe a partial mapping.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        super().__init__()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def slot_name(self) -> str:
        return str(self._path)

    def _ensure_available(self) -> None:
        parent = self._path.parent
        if not parent.is_dir():
            raise StoreUnavailableError(
                "file", f"Directory '{parent}' for flag file '{self._path}' does not exist"
            )
        if not os.access(parent, os.W_OK):
            raise StoreUnavailableError("file", f"Directory '{parent}' is not writable")
        if self._path.exists() and not self._path.is_file():
            raise StoreUnavailableError("file", f"'{self._path}' is not a regular file")

    def _read_slot(self) -> bytes | None:
        try:
            return self._path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StoreUnavailableError("file", f"Cannot read '{self._path}': {exc}", cause=exc) from exc

    def _write_slot(self, payload: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


__all__ = ["JsonFileFlagStore"]
