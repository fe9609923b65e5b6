# portfolio/controllers/api_controller.py

from flask import Blueprint, current_app, jsonify, request

from ..extensions import csrf, limiter
from ..services.disciplina_service import DisciplinaService
from ..services.errors import ServiceError, ValidationError
from ..services.projeto_service import ProjetoService

api_bp = Blueprint('api', __name__, url_prefix='/api')

# A API é consumida por clientes JSON, sem token de formulário
csrf.exempt(api_bp)


def _api_rate_limit():
    return current_app.config.get('API_RATE_LIMIT', '30 per minute')


def _payload():
    """Aceita corpo JSON ou formulário urlencoded."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


@api_bp.errorhandler(ServiceError)
def service_error(error):
    body = {'error': error.message}
    if isinstance(error, ValidationError):
        body['field'] = error.field
    return jsonify(body), error.status_code


@api_bp.route('/disciplinas', methods=['GET'])
def listar_disciplinas():
    return jsonify(DisciplinaService.list_disciplinas())


@api_bp.route('/disciplinas/<int:disciplina_id>', methods=['GET'])
def obter_disciplina(disciplina_id):
    return jsonify(DisciplinaService.get_disciplina(disciplina_id))


@api_bp.route('/disciplinas', methods=['POST'])
@limiter.limit(_api_rate_limit)
def criar_disciplina():
    disciplina = DisciplinaService.add_disciplina(_payload())
    return jsonify(disciplina), 201


@api_bp.route('/disciplinas/<int:disciplina_id>', methods=['PUT'])
@limiter.limit(_api_rate_limit)
def atualizar_disciplina(disciplina_id):
    disciplina = DisciplinaService.rename_disciplina(disciplina_id, _payload())
    return jsonify(disciplina)


@api_bp.route('/disciplinas/<int:disciplina_id>', methods=['DELETE'])
@limiter.limit(_api_rate_limit)
def excluir_disciplina(disciplina_id):
    DisciplinaService.remove_disciplina(disciplina_id)
    return jsonify({'message': 'Disciplina removida', 'id': disciplina_id})


@api_bp.route('/projetos', methods=['GET'])
def listar_projetos():
    return jsonify(ProjetoService.list_projetos())
