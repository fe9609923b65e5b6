# portfolio/app.py

import logging
import os
import sys
from importlib import import_module

import click
from flask import Flask, jsonify, render_template, request
from flask_babel import Babel
from flask_migrate import Migrate

from portfolio.config import Config
from portfolio.content import ESTUDANTE
from portfolio.extensions import csrf, limiter
from portfolio.middleware import MethodOverrideMiddleware
from portfolio.models.database import db
# Importações dos modelos para que o Flask-Migrate os reconheça
from portfolio.models.disciplina import Disciplina
from portfolio.models.projeto import Projeto
from portfolio.services.seed_service import SeedService
from portfolio.storage import StorageError, get_store, init_storage


def create_app(config_class=Config):
    """
    Fábrica de aplicação: cria e configura a instância do Flask.

    Falhas ao inicializar o armazenamento (banco inacessível, seed que não
    consegue gravar) propagam como StorageError: a app não chega a subir.
    """
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
    template_dir = os.path.join(project_root, 'templates')
    static_dir = os.path.join(project_root, 'static')

    app = Flask(__name__, template_folder=template_dir, static_folder=static_dir)
    app.config.from_object(config_class)

    # Executa a verificação da config (importante para produção)
    config_class.init_app(app)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Inicializa as extensões com a app
    db.init_app(app)
    Migrate(app, db)
    csrf.init_app(app)
    limiter.init_app(app)
    Babel(app)

    # Formulários HTML enviam PUT/DELETE como POST ?_method=...
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    with app.app_context():
        init_storage(app)
        register_blueprints(app)
        register_handlers_and_processors(app)
        if app.config.get('SEED_ON_STARTUP', False):
            SeedService.seed_initial_data()

    register_cli_commands(app)
    return app


def register_blueprints(app):
    """Importa e registra os blueprints na aplicação."""

    def _register(module_path: str, blueprint_name: str) -> None:
        module = import_module(module_path)
        blueprint = getattr(module, blueprint_name, None)
        if blueprint is None:
            app.logger.warning(
                "Blueprint '%s' não encontrado no módulo '%s'. Registro ignorado.",
                blueprint_name,
                module_path,
            )
            return
        app.register_blueprint(blueprint)

    for module_path, blueprint_name in [
        ('portfolio.controllers.main_controller', 'main_bp'),
        ('portfolio.controllers.projeto_controller', 'projeto_bp'),
        ('portfolio.controllers.disciplina_controller', 'disciplina_bp'),
        ('portfolio.controllers.api_controller', 'api_bp'),
    ]:
        _register(module_path, blueprint_name)


def _wants_json():
    return request.path.startswith('/api/')


def register_handlers_and_processors(app):
    """Registra hooks, context processors e error handlers."""
    @app.context_processor
    def inject_estudante():
        return dict(estudante=ESTUDANTE)

    @app.after_request
    def add_header(response):
        response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
        return response

    @app.errorhandler(404)
    def not_found_error(error):
        if _wants_json():
            return jsonify({'error': 'Recurso não encontrado.'}), 404
        return render_template('404.html'), 404

    @app.errorhandler(StorageError)
    def storage_error(error):
        db.session.rollback()
        app.logger.error("Falha de armazenamento em %s %s: %s", request.method, request.path, error)
        if _wants_json():
            return jsonify({'error': str(error)}), 500
        return render_template('500.html'), 500

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        if _wants_json():
            return jsonify({'error': 'Erro interno do servidor.'}), 500
        return render_template('500.html'), 500


def register_cli_commands(app):
    """Registra os comandos de linha de comando."""
    @app.cli.command("seed-data")
    def seed_data_command():
        """Popula projetos e disciplinas se as coleções estiverem vazias."""
        inserted = SeedService.seed_initial_data()
        if not any(inserted.values()):
            print("As coleções já possuem registros. Nada foi inserido.")
            return
        print(f"Seed aplicado: {inserted['projetos']} projeto(s), {inserted['disciplinas']} disciplina(s).")

    @app.cli.command("clear-data")
    @click.option('--yes', is_flag=True, help='Não pede confirmação.')
    def clear_data_command(yes):
        """Apaga todas as disciplinas e projetos do backend configurado."""
        if not yes and not click.confirm("ATENÇÃO: Este comando irá apagar TODAS as disciplinas e projetos. Deseja continuar?"):
            print("Operação cancelada.")
            return

        for name in ('disciplinas', 'projetos'):
            store = get_store(name)
            removidos = 0
            for record in store.list():
                if store.delete(record['id']):
                    removidos += 1
            print(f"{name}: {removidos} registro(s) removido(s).")

    @app.cli.command("list-disciplinas")
    def list_disciplinas_command():
        """Lista as disciplinas em ordem de id."""
        for disciplina in get_store('disciplinas').list():
            print(f"{disciplina['id']:>4}  {disciplina['nome']}")


# Este bloco só é executado quando o arquivo é chamado diretamente
if __name__ == '__main__':
    try:
        app = create_app()
    except StorageError as exc:
        logging.basicConfig()
        logging.getLogger(__name__).critical("Falha ao iniciar o armazenamento: %s", exc)
        sys.exit(1)
    app.run(debug=True)
