# portfolio/services/disciplina_service.py

from flask import current_app

from ..storage import get_store
from .errors import NotFoundError
from .validation import validate_fields

NOME_MAX_LENGTH = 255


class DisciplinaService:
    @staticmethod
    def list_disciplinas():
        """Todas as disciplinas, em ordem crescente de id."""
        return get_store('disciplinas').list()

    @staticmethod
    def count_disciplinas():
        return get_store('disciplinas').count()

    @staticmethod
    def get_disciplina(disciplina_id):
        disciplina = get_store('disciplinas').get(disciplina_id)
        if disciplina is None:
            raise NotFoundError('Disciplina não encontrada.')
        return disciplina

    @staticmethod
    def add_disciplina(data):
        """Valida e cria uma nova disciplina, retornando-a já com o id atribuído."""
        fields = validate_fields(data, required=('nome',), max_lengths={'nome': NOME_MAX_LENGTH})
        disciplina = get_store('disciplinas').create(fields)
        current_app.logger.info("Disciplina criada: id=%s nome=%r", disciplina['id'], disciplina['nome'])
        return disciplina

    @staticmethod
    def rename_disciplina(disciplina_id, data):
        """
        Substitui o nome de uma disciplina existente.

        A validação acontece antes de qualquer acesso ao armazenamento; um nome
        inválido nunca altera o registro.
        """
        fields = validate_fields(data, required=('nome',), max_lengths={'nome': NOME_MAX_LENGTH})
        disciplina = get_store('disciplinas').update(disciplina_id, fields)
        if disciplina is None:
            raise NotFoundError('Disciplina não encontrada.')
        current_app.logger.info("Disciplina renomeada: id=%s nome=%r", disciplina_id, disciplina['nome'])
        return disciplina

    @staticmethod
    def remove_disciplina(disciplina_id):
        """Exclui uma disciplina e retorna o registro removido."""
        store = get_store('disciplinas')
        disciplina = store.get(disciplina_id)
        if disciplina is None or not store.delete(disciplina_id):
            raise NotFoundError('Disciplina não encontrada.')
        current_app.logger.info("Disciplina removida: id=%s", disciplina_id)
        return disciplina
