"""
Contrato comum dos backends de armazenamento.

Os serviços dependem apenas de ``RecordStore``; o backend concreto (arquivo
JSON, banco relacional ou memória) é escolhido na configuração da aplicação.
Registros trafegam como dicts com exatamente os campos lógicos da coleção.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional


class StorageError(Exception):
    """Falha de leitura/escrita no armazenamento (arquivo ou banco)."""


class RecordStore(ABC):

    def __init__(self, fields: Iterable[str], defaults: Optional[Mapping[str, Any]] = None) -> None:
        self.fields = tuple(fields)
        self.defaults = dict(defaults or {})

    @abstractmethod
    def list(self) -> list[dict]:
        """Todos os registros, em ordem crescente de id."""

    @abstractmethod
    def get(self, record_id: int) -> Optional[dict]:
        """O registro com ``record_id``; ``None`` se o id não existir."""

    @abstractmethod
    def create(self, fields: Mapping[str, Any]) -> dict:
        """Persiste um novo registro com um id inédito e o retorna."""

    @abstractmethod
    def update(self, record_id: int, fields: Mapping[str, Any]) -> Optional[dict]:
        """Aplica ``fields`` ao registro; ``None`` se o id não existir."""

    @abstractmethod
    def delete(self, record_id: int) -> bool:
        """Remove o registro; ``False`` se o id não existir."""

    def count(self) -> int:
        return len(self.list())

    def is_empty(self) -> bool:
        """Verificação estrita: levanta ``StorageError`` se a coleção não puder ser lida."""
        return self.count() == 0

    def _shape(self, record_id: int, values: Mapping[str, Any], base: Optional[Mapping[str, Any]] = None) -> dict:
        record = {'id': record_id}
        for field in self.fields:
            if field in values:
                record[field] = values[field]
            elif base is not None and field in base:
                record[field] = base[field]
            else:
                record[field] = self.defaults.get(field)
        return record
