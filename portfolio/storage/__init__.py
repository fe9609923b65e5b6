"""
Backends de armazenamento das coleções ``disciplinas`` e ``projetos``.

O backend é escolhido uma única vez (``STORAGE_BACKEND``) e os stores ficam
registrados em ``app.extensions``; os serviços obtêm o store com
``get_store`` e nunca importam um backend concreto.
"""

from flask import current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ..models.database import db
from ..models.disciplina import Disciplina
from ..models.projeto import Projeto
from .base import RecordStore, StorageError
from .json_store import JsonFileStore
from .memory_store import InMemoryStore
from .sql_store import SqlStore

EXTENSION_KEY = 'portfolio_storage'

PROJETO_DEFAULTS = {'imagem': None, 'concluido': False}


def init_storage(app):
    """Cria os stores do backend configurado. Deve rodar dentro de um app context."""
    backend = app.config['STORAGE_BACKEND']

    if backend == 'sql':
        _check_database(app)
        stores = {
            'disciplinas': SqlStore(Disciplina),
            'projetos': SqlStore(Projeto),
        }
    elif backend == 'json':
        stores = {
            'disciplinas': JsonFileStore(app.config['DISCIPLINAS_FILE'], Disciplina.FIELDS),
            'projetos': JsonFileStore(app.config['PROJETOS_FILE'], Projeto.FIELDS, PROJETO_DEFAULTS),
        }
    else:
        stores = {
            'disciplinas': InMemoryStore(Disciplina.FIELDS),
            'projetos': InMemoryStore(Projeto.FIELDS, PROJETO_DEFAULTS),
        }

    app.extensions[EXTENSION_KEY] = stores
    app.logger.info("Armazenamento inicializado (backend=%s).", backend)
    return stores


def _check_database(app):
    """Falha cedo se o banco não estiver acessível: a app não deve subir sem ele."""
    try:
        db.session.execute(text('SELECT 1'))
        if app.config.get('SQL_AUTO_CREATE', True):
            db.create_all()
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        app.logger.critical("Não foi possível conectar ao banco de dados: %s", exc)
        raise StorageError("Não foi possível conectar ao banco de dados.") from exc


def get_store(name, app=None) -> RecordStore:
    app = app or current_app
    try:
        return app.extensions[EXTENSION_KEY][name]
    except KeyError:
        raise RuntimeError(
            f"Store '{name}' não registrado. init_storage(app) foi chamado?"
        ) from None


__all__ = [
    'RecordStore',
    'StorageError',
    'JsonFileStore',
    'InMemoryStore',
    'SqlStore',
    'init_storage',
    'get_store',
]
