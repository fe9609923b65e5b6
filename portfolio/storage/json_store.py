"""
Backend baseado em arquivo JSON.

A coleção inteira vive em um único array JSON; cada escrita relê o arquivo,
altera a lista em memória e regrava tudo de forma atômica (arquivo temporário
+ ``os.replace``). O maior id já emitido fica em ``<arquivo>.seq`` para que
ids removidos nunca sejam reaproveitados.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Mapping, Optional

from .base import RecordStore, StorageError

logger = logging.getLogger(__name__)

_locks: dict[str, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = str(path.resolve())
    with _locks_guard:
        return _locks.setdefault(key, threading.RLock())


class JsonFileStore(RecordStore):

    def __init__(self, path, fields, defaults=None) -> None:
        super().__init__(fields, defaults)
        self.path = Path(path)
        self.sequence_path = self.path.with_name(self.path.name + '.seq')
        self._lock = _lock_for(self.path)

    # ------------------------------------------------------------------ leitura
    def list(self) -> list[dict]:
        with self._lock:
            return self._read()

    def get(self, record_id: int) -> Optional[dict]:
        with self._lock:
            return next((r for r in self._read() if r['id'] == record_id), None)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._read(strict=True)

    # ------------------------------------------------------------------ escrita
    def create(self, fields: Mapping[str, Any]) -> dict:
        with self._lock:
            records = self._read(strict=True)
            last_id = max([r['id'] for r in records] + [self._read_sequence()], default=0)
            record = self._shape(last_id + 1, fields)
            records.append(record)
            self._write(records)
            self._write_sequence(record['id'])
            return dict(record)

    def update(self, record_id: int, fields: Mapping[str, Any]) -> Optional[dict]:
        with self._lock:
            records = self._read(strict=True)
            for index, record in enumerate(records):
                if record['id'] == record_id:
                    updated = self._shape(record_id, fields, base=record)
                    records[index] = updated
                    self._write(records)
                    return dict(updated)
            return None

    def delete(self, record_id: int) -> bool:
        with self._lock:
            records = self._read(strict=True)
            remaining = [r for r in records if r['id'] != record_id]
            if len(remaining) == len(records):
                return False
            self._write(remaining)
            return True

    # ------------------------------------------------------------------ arquivo
    def _read(self, strict: bool = False) -> list[dict]:
        """Lê o array do disco.

        Arquivo ausente é uma coleção vazia. Arquivo ilegível ou corrompido é
        logado e tratado como vazio nas leituras; com ``strict`` (caminho de
        escrita) vira ``StorageError`` para não sobrescrever dados existentes.
        """
        try:
            with self.path.open('r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as exc:
            logger.error("Erro ao ler %s: %s", self.path, exc)
            if strict:
                raise StorageError(f"Não foi possível ler {self.path.name}.") from exc
            return []

        if not isinstance(data, list):
            logger.error("Conteúdo inválido em %s: esperado um array JSON.", self.path)
            if strict:
                raise StorageError(f"Conteúdo inválido em {self.path.name}.")
            return []

        records = [r for r in data if isinstance(r, dict) and isinstance(r.get('id'), int)]
        if len(records) != len(data):
            logger.warning("%d registro(s) sem id válido ignorado(s) em %s", len(data) - len(records), self.path)
        return sorted(records, key=lambda r: r['id'])

    def _write(self, records: list[dict]) -> None:
        tmp_path = self.path.with_name(f'.{self.path.name}.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding='utf-8')
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.error("Erro ao salvar %s: %s", self.path, exc)
            raise StorageError(f"Não foi possível salvar {self.path.name}.") from exc

    def _read_sequence(self) -> int:
        try:
            return int(self.sequence_path.read_text(encoding='utf-8').strip())
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Sequência de ids ilegível em %s (%s); usando o maior id do arquivo.", self.sequence_path, exc)
            return 0

    def _write_sequence(self, last_id: int) -> None:
        try:
            self.sequence_path.write_text(str(last_id), encoding='utf-8')
        except OSError as exc:
            # o registro já foi salvo; sem a sequência o próximo id cai para max + 1
            logger.error("Erro ao salvar a sequência de ids em %s: %s", self.sequence_path, exc)
