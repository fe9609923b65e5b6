# portfolio/services/projeto_service.py

from flask import current_app

from ..storage import get_store
from .validation import coerce_bool, validate_fields


class ProjetoService:
    REQUIRED_FIELDS = ('nome', 'descricao', 'participacao')

    @staticmethod
    def list_projetos():
        return get_store('projetos').list()

    @staticmethod
    def count_projetos():
        return get_store('projetos').count()

    @staticmethod
    def add_projeto(data):
        """Cria um projeto. Só é usado pelo seed e pela linha de comando."""
        fields = validate_fields(
            data,
            required=ProjetoService.REQUIRED_FIELDS,
            optional=('imagem',),
            max_lengths={'nome': 255, 'imagem': 255},
        )
        fields['concluido'] = coerce_bool((data or {}).get('concluido'))
        projeto = get_store('projetos').create(fields)
        current_app.logger.info("Projeto criado: id=%s nome=%r", projeto['id'], projeto['nome'])
        return projeto
