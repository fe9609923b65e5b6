# portfolio/config.py

import os
basedir = os.path.abspath(os.path.dirname(__file__))
project_root = os.path.abspath(os.path.join(basedir, os.pardir))


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or '6f1c0e9b7a5d3c2b1a0f9e8d7c6b5a4f3e2d1c0b'

    # Backend de armazenamento: 'json' (arquivos), 'sql' (banco relacional) ou 'memory'
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'json').strip().lower()
    DATA_DIR = os.environ.get('DATA_DIR') or project_root
    DISCIPLINAS_FILE = os.environ.get('DISCIPLINAS_FILE') or os.path.join(DATA_DIR, 'disciplinas.json')
    PROJETOS_FILE = os.environ.get('PROJETOS_FILE') or os.path.join(DATA_DIR, 'projetos.json')

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///' + os.path.join(project_root, 'portfolio.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Cria as tabelas na inicialização quando o backend é 'sql' (sem precisar rodar `flask db upgrade`)
    SQL_AUTO_CREATE = _env_bool('SQL_AUTO_CREATE', True)

    SEED_ON_STARTUP = _env_bool('SEED_ON_STARTUP', True)

    BABEL_DEFAULT_LOCALE = 'pt_BR'
    BABEL_DEFAULT_TIMEZONE = os.environ.get('BABEL_DEFAULT_TIMEZONE', 'America/Sao_Paulo')

    # Rate limiting das rotas de escrita da API (storage escolhido em extensions.py)
    RATELIMIT_ENABLED = _env_bool('RATELIMIT_ENABLED', True)
    API_RATE_LIMIT = os.environ.get('API_RATE_LIMIT', '30 per minute')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Segurança: configurações de cookies e sessão (a sessão guarda as mensagens flash).
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.environ.get('SESSION_COOKIE_SAMESITE', 'Lax')
    if os.environ.get('SESSION_COOKIE_SECURE') is not None:
        SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE') == 'True'
    else:
        SESSION_COOKIE_SECURE = os.environ.get('FLASK_ENV', '').lower() == 'production'

    STORAGE_BACKENDS = ('json', 'sql', 'memory')

    @staticmethod
    def init_app(app):
        """
        Executa verificações de configuração depois que a app foi criada.
        Isso evita erros durante a importação em ambientes de teste.
        """
        if not app.config.get("SECRET_KEY") and not app.testing:
            raise ValueError("No SECRET_KEY set for Flask application. Set the SECRET_KEY environment variable.")

        backend = app.config.get('STORAGE_BACKEND')
        if backend not in Config.STORAGE_BACKENDS:
            raise ValueError(
                f"STORAGE_BACKEND inválido: {backend!r}. Use um de: {', '.join(Config.STORAGE_BACKENDS)}."
            )
