"""JSON file store for the NVR to content-set mapping."""
from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from threading import Lock

from pydantic import TypeAdapter

from ..schemas import MappingEntry, mapping_key

logger = logging.getLogger(__name__)

_MAPPING_ADAPTER = TypeAdapter(dict[str, MappingEntry])

# Process umask, applied to freshly created mapping files.
_UMASK = os.umask(0)
os.umask(_UMASK)

# One lock per backing file, shared by every store instance in the process.
_PATH_LOCKS: dict[Path, Lock] = {}
_PATH_LOCKS_GUARD = Lock()


def _lock_for(path: Path) -> Lock:
    with _PATH_LOCKS_GUARD:
        return _PATH_LOCKS.setdefault(path, Lock())


class StoreError(RuntimeError):
    """Raised when the mapping file cannot be read, parsed or written."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Mapping store {path}: {message}")
        self.path = path


class MappingStore:
    """Thread-safe read-modify-write access to the persisted mapping."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path).expanduser().resolve()
        self._lock = _lock_for(self._path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> dict[str, MappingEntry]:
        """Return the whole persisted mapping."""

        with self._lock:
            return self._load()

    def get(self, nvr: str, arch: str) -> MappingEntry | None:
        """Return the cached entry for ``nvr`` on ``arch`` if present."""

        return self.read().get(mapping_key(nvr, arch))

    def merge(self, entry: MappingEntry) -> None:
        """Insert or overwrite ``entry`` and persist the whole mapping."""

        with self._lock:
            mapping = self._load()
            mapping[entry.key] = entry
            self._persist(mapping)
            logger.debug("Merged %s into %s (%d entries)", entry.key, self._path, len(mapping))

    def _load(self) -> dict[str, MappingEntry]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StoreError(self._path, f"cannot read: {exc}") from exc

        try:
            return _MAPPING_ADAPTER.validate_json(raw)
        except ValueError as exc:
            raise StoreError(self._path, f"invalid mapping: {exc}") from exc

    def _file_mode(self) -> int:
        try:
            return stat.S_IMODE(self._path.stat().st_mode)
        except FileNotFoundError:
            return 0o666 & ~_UMASK

    def _persist(self, mapping: dict[str, MappingEntry]) -> None:
        payload = {key: entry.model_dump() for key, entry in mapping.items()}
        text = json.dumps(payload, indent=2, ensure_ascii=False, sort_keys=True) + "\n"

        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StoreError(self._path, f"cannot write: {exc}") from exc
