# portfolio/controllers/projeto_controller.py

from flask import Blueprint, render_template

from ..services.projeto_service import ProjetoService

projeto_bp = Blueprint('projeto', __name__)


@projeto_bp.route('/projetos')
def listar_projetos():
    projetos = ProjetoService.list_projetos()
    return render_template('pages/projetos.html', projetos=projetos)
