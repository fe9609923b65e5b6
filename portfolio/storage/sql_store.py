"""
Backend relacional sobre Flask-SQLAlchemy.

``update`` e ``delete`` são um único comando condicional
(``... WHERE id = :id``); o número de linhas afetadas decide se o registro
existia, então verificação e alteração acontecem juntas no banco.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError

from ..models.database import db
from .base import RecordStore, StorageError

logger = logging.getLogger(__name__)


class SqlStore(RecordStore):

    def __init__(self, model) -> None:
        super().__init__(model.FIELDS)
        self.model = model

    @property
    def table(self) -> str:
        return self.model.__tablename__

    def list(self) -> list[dict]:
        try:
            rows = db.session.scalars(select(self.model).order_by(self.model.id)).all()
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.error("Erro ao ler %s: %s", self.table, exc)
            return []
        return [row.to_dict() for row in rows]

    def get(self, record_id: int) -> Optional[dict]:
        try:
            row = db.session.get(self.model, record_id)
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.error("Erro ao buscar %s id=%s: %s", self.table, record_id, exc)
            return None
        return row.to_dict() if row else None

    def count(self) -> int:
        try:
            return db.session.scalar(select(func.count(self.model.id))) or 0
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.error("Erro ao contar %s: %s", self.table, exc)
            return 0

    def is_empty(self) -> bool:
        try:
            first = db.session.scalar(select(self.model.id).limit(1))
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.error("Erro ao ler %s: %s", self.table, exc)
            raise StorageError(f"Não foi possível ler {self.table}.") from exc
        return first is None

    def create(self, fields: Mapping[str, Any]) -> dict:
        entity = self.model(**self._values(fields))
        try:
            db.session.add(entity)
            db.session.commit()
            return entity.to_dict()
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.error("Erro ao inserir em %s: %s", self.table, exc)
            raise StorageError(f"Não foi possível salvar em {self.table}.") from exc

    def update(self, record_id: int, fields: Mapping[str, Any]) -> Optional[dict]:
        values = self._values(fields)
        if not values:
            return self.get(record_id)

        stmt = update(self.model).where(self.model.id == record_id).values(**values)
        try:
            result = db.session.execute(stmt)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.error("Erro ao atualizar %s id=%s: %s", self.table, record_id, exc)
            raise StorageError(f"Não foi possível atualizar {self.table}.") from exc

        if result.rowcount == 0:
            return None
        return self.get(record_id)

    def delete(self, record_id: int) -> bool:
        stmt = delete(self.model).where(self.model.id == record_id)
        try:
            result = db.session.execute(stmt)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.error("Erro ao excluir %s id=%s: %s", self.table, record_id, exc)
            raise StorageError(f"Não foi possível excluir de {self.table}.") from exc
        return result.rowcount > 0

    def _values(self, fields: Mapping[str, Any]) -> dict:
        return {k: v for k, v in fields.items() if k in self.fields}
