# portfolio/models/disciplina.py

from __future__ import annotations
import typing as t
from datetime import datetime, timezone
from .database import db
from sqlalchemy.orm import Mapped, mapped_column


class Disciplina(db.Model):
    __tablename__ = 'disciplinas'
    # AUTOINCREMENT no SQLite: ids removidos nunca são reaproveitados
    __table_args__ = {'sqlite_autoincrement': True}

    FIELDS = ('nome',)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(db.String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __init__(self, nome: str, **kw: t.Any) -> None:
        super().__init__(nome=nome, **kw)

    def to_dict(self):
        return {
            'id': self.id,
            'nome': self.nome,
        }

    def __repr__(self):
        return f"<Disciplina id={self.id} nome='{self.nome}'>"
