# portfolio/controllers/disciplina_controller.py

from flask import Blueprint, render_template, request, redirect, url_for, flash
from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length

from ..services.disciplina_service import DisciplinaService
from ..services.errors import ServiceError

disciplina_bp = Blueprint('disciplina', __name__)


class DisciplinaForm(FlaskForm):
    nome = StringField('Nome da disciplina', validators=[DataRequired(), Length(max=255)])
    submit = SubmitField('Salvar')


class DeleteForm(FlaskForm):
    pass


@disciplina_bp.route('/disciplinas', methods=['GET'])
def listar_disciplinas():
    disciplinas = DisciplinaService.list_disciplinas()
    return render_template('pages/disciplinas.html',
                           disciplinas=disciplinas,
                           form=DisciplinaForm(),
                           delete_form=DeleteForm())


@disciplina_bp.route('/disciplinas', methods=['POST'])
def adicionar_disciplina():
    try:
        disciplina = DisciplinaService.add_disciplina(request.form)
        flash(f'Disciplina "{disciplina["nome"]}" adicionada com sucesso!', 'success')
    except ServiceError as e:
        flash(e.message, 'danger')
    return redirect(url_for('disciplina.listar_disciplinas'))


@disciplina_bp.route('/disciplinas/<int:disciplina_id>', methods=['PUT'])
def renomear_disciplina(disciplina_id):
    try:
        disciplina = DisciplinaService.rename_disciplina(disciplina_id, request.form)
        flash(f'Disciplina renomeada para "{disciplina["nome"]}".', 'success')
    except ServiceError as e:
        flash(e.message, 'danger')
    return redirect(url_for('disciplina.listar_disciplinas'))


@disciplina_bp.route('/disciplinas/<int:disciplina_id>', methods=['DELETE'])
def excluir_disciplina(disciplina_id):
    try:
        disciplina = DisciplinaService.remove_disciplina(disciplina_id)
        flash(f'Disciplina "{disciplina["nome"]}" removida.', 'success')
    except ServiceError as e:
        flash(e.message, 'danger')
    return redirect(url_for('disciplina.listar_disciplinas'))
