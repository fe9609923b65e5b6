# portfolio/models/projeto.py

from __future__ import annotations
import typing as t
from datetime import datetime, timezone
from .database import db
from sqlalchemy.orm import Mapped, mapped_column


class Projeto(db.Model):
    __tablename__ = 'projetos'
    __table_args__ = {'sqlite_autoincrement': True}

    FIELDS = ('nome', 'descricao', 'participacao', 'imagem', 'concluido')

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(db.String(255), nullable=False)
    descricao: Mapped[str] = mapped_column(db.Text, nullable=False)
    participacao: Mapped[str] = mapped_column(db.Text, nullable=False)
    imagem: Mapped[t.Optional[str]] = mapped_column(db.String(255), nullable=True)
    concluido: Mapped[bool] = mapped_column(default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __init__(self, nome: str, descricao: str, participacao: str,
                 imagem: t.Optional[str] = None, concluido: bool = False, **kw: t.Any) -> None:
        super().__init__(nome=nome, descricao=descricao, participacao=participacao,
                         imagem=imagem, concluido=concluido, **kw)

    def to_dict(self):
        return {
            'id': self.id,
            'nome': self.nome,
            'descricao': self.descricao,
            'participacao': self.participacao,
            'imagem': self.imagem,
            'concluido': self.concluido,
        }

    def __repr__(self):
        return f"<Projeto id={self.id} nome='{self.nome}' concluido={self.concluido}>"
