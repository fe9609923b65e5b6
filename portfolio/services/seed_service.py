# portfolio/services/seed_service.py

from flask import current_app

from ..content import SEED_DISCIPLINAS, SEED_PROJETOS
from ..storage import StorageError, get_store
from .disciplina_service import DisciplinaService
from .projeto_service import ProjetoService


def _needs_seed(name):
    """Só semeia coleções comprovadamente vazias; ilegível não conta como vazia."""
    try:
        return get_store(name).is_empty()
    except StorageError as exc:
        current_app.logger.error("Seed de %s ignorado: coleção ilegível (%s).", name, exc)
        return False


class SeedService:
    @staticmethod
    def seed_initial_data():
        """
        Popula as coleções vazias com os dados iniciais.

        Cada coleção é verificada separadamente e só recebe o seed se estiver
        vazia, então chamar isto a cada inicialização não duplica registros.
        Uma coleção que não pode ser lida fica como está.
        Retorna quantos registros foram inseridos em cada coleção.
        """
        inserted = {'projetos': 0, 'disciplinas': 0}

        if _needs_seed('projetos'):
            for projeto in SEED_PROJETOS:
                ProjetoService.add_projeto(projeto)
            inserted['projetos'] = len(SEED_PROJETOS)

        if _needs_seed('disciplinas'):
            for nome in SEED_DISCIPLINAS:
                DisciplinaService.add_disciplina({'nome': nome})
            inserted['disciplinas'] = len(SEED_DISCIPLINAS)

        if any(inserted.values()):
            current_app.logger.info(
                "Seed aplicado: %s projeto(s), %s disciplina(s).",
                inserted['projetos'], inserted['disciplinas'],
            )
        return inserted
