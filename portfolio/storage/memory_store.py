"""Backend em memória, usado nos testes e com ``STORAGE_BACKEND=memory``."""

from __future__ import annotations

import threading
from typing import Any, Mapping, Optional

from .base import RecordStore


class InMemoryStore(RecordStore):

    def __init__(self, fields, defaults=None, records=None) -> None:
        super().__init__(fields, defaults)
        self._records: dict[int, dict] = {}
        self._last_id = 0
        self._lock = threading.RLock()
        for values in records or ():
            self.create(values)

    def list(self) -> list[dict]:
        with self._lock:
            return [dict(self._records[k]) for k in sorted(self._records)]

    def get(self, record_id: int) -> Optional[dict]:
        with self._lock:
            record = self._records.get(record_id)
            return dict(record) if record else None

    def create(self, fields: Mapping[str, Any]) -> dict:
        with self._lock:
            self._last_id += 1
            record = self._shape(self._last_id, fields)
            self._records[record['id']] = record
            return dict(record)

    def update(self, record_id: int, fields: Mapping[str, Any]) -> Optional[dict]:
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            self._records[record_id] = self._shape(record_id, fields, base=current)
            return dict(self._records[record_id])

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._records)
