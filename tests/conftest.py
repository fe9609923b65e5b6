# tests/conftest.py

import pytest

from portfolio.app import create_app
from portfolio.config import Config
from portfolio.models.database import db


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    STORAGE_BACKEND = 'memory'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQL_AUTO_CREATE = True
    SEED_ON_STARTUP = False
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def make_app(tmp_path):
    """Fábrica de apps de teste: backend e opções de config sobrescrevíveis."""
    apps = []

    def _make(backend='memory', **overrides):
        attrs = {
            'STORAGE_BACKEND': backend,
            'DISCIPLINAS_FILE': str(tmp_path / 'disciplinas.json'),
            'PROJETOS_FILE': str(tmp_path / 'projetos.json'),
        }
        attrs.update(overrides)
        config_class = type('CustomTestConfig', (TestConfig,), attrs)
        app = create_app(config_class)
        apps.append(app)
        return app

    yield _make

    for app in apps:
        if app.config['STORAGE_BACKEND'] != 'sql':
            continue
        with app.app_context():
            db.session.remove()
            db.drop_all()
            db.engine.dispose()


@pytest.fixture()
def test_app(make_app):
    return make_app('memory')


@pytest.fixture()
def test_client(test_app):
    return test_app.test_client()


@pytest.fixture(params=['memory', 'json', 'sql'])
def store_app(request, make_app):
    """Mesma app em cada backend, para verificar que se comportam igual."""
    return make_app(request.param)


@pytest.fixture()
def seeded_app(make_app):
    return make_app('memory', SEED_ON_STARTUP=True)
