"""A JSON file holding one document per key, with versioned writes.

Each file is a JSON list of documents. Every write holds two locks for
the whole read, check and write: a per-path thread lock for writers in
this process and a ``<file>.lock`` file lock for writers in other
processes (each CLI command is its own process). Writes replace the
file through a temporary file and an atomic rename, so readers never
see a partial document and need no lock. Versioned documents carry a
``version`` field that ``replace`` checks before writing
(compare-and-swap).
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock

from storefront.domain.exceptions import ConcurrentModificationError

_LOCKS: dict[Path, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _LOCKS_GUARD:
        return _LOCKS.setdefault(path, threading.RLock())


class JsonDocumentStore:

    def __init__(self, file_path: Path, key_field: str) -> None:
        self._file_path = file_path.resolve()
        self._key_field = key_field
        self._lock = _lock_for(self._file_path)
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_lock = FileLock(f"{self._file_path}.lock")
        self._ensure_file()

    # --- Reads ----------------------------------------------------------------

    def find(self, key: str) -> dict | None:
        for raw in self._load_raw():
            if raw[self._key_field] == key:
                return raw
        return None

    def all(self) -> list[dict]:
        return self._load_raw()

    # --- Writes ---------------------------------------------------------------

    def insert_if_absent(self, document: dict) -> dict:
        """Store *document* unless one with the same key exists; return the stored one."""
        key = document[self._key_field]
        with self._write_lock():
            records = self._load_raw()
            for raw in records:
                if raw[self._key_field] == key:
                    return raw
            records.append(document)
            self._persist_raw(records)
            return document

    def replace(self, document: dict, expected_version: int) -> int:
        """Write *document* if the stored version equals *expected_version*.

        A missing document counts as version 0. Returns the new version.
        """
        key = document[self._key_field]
        with self._write_lock():
            records = self._load_raw()
            index = next(
                (i for i, raw in enumerate(records) if raw[self._key_field] == key),
                None,
            )
            stored_version = records[index].get("version", 0) if index is not None else 0
            if stored_version != expected_version:
                raise ConcurrentModificationError(
                    f"Document '{key}' was modified concurrently "
                    f"(expected version {expected_version}, found {stored_version})"
                )

            new_version = expected_version + 1
            document = {**document, "version": new_version}
            if index is None:
                records.append(document)
            else:
                records[index] = document
            self._persist_raw(records)
            return new_version

    def upsert(self, document: dict) -> None:
        """Unconditional write, for documents that are not versioned."""
        key = document[self._key_field]
        with self._write_lock():
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw[self._key_field] == key:
                    records[i] = document
                    break
            else:
                records.append(document)
            self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    @contextmanager
    def _write_lock(self):
        with self._lock, self._file_lock:
            yield

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        with self._write_lock():
            if not self._file_path.exists():
                self._persist_raw([])
