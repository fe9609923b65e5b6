# portfolio/models/__init__.py

# Importa a instância do banco de dados para que os modelos possam ser associados a ela
from .database import db

# Importa todos os modelos para garantir que sejam registrados no SQLAlchemy
from .disciplina import Disciplina
from .projeto import Projeto


__all__ = [
    'db',
    'Disciplina',
    'Projeto',
]
