# portfolio/services/dashboard_service.py

from ..content import TECNOLOGIAS_MAIS_USADAS
from .disciplina_service import DisciplinaService
from .projeto_service import ProjetoService


class DashboardService:
    @staticmethod
    def get_dashboard_data():
        """
        Busca os dados estatísticos principais para o dashboard.
        """
        projetos = ProjetoService.list_projetos()
        total_projetos = len(projetos)
        concluidos = sum(1 for p in projetos if p.get('concluido'))

        return {
            'total_disciplinas': DisciplinaService.count_disciplinas(),
            'total_projetos': total_projetos,
            'concluidos': concluidos,
            'em_andamento': total_projetos - concluidos,
            'tecnologias_mais_usadas': list(TECNOLOGIAS_MAIS_USADAS),
        }
