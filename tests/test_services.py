# tests/test_services.py

import pytest
from sqlalchemy.exc import OperationalError

from portfolio.content import SEED_DISCIPLINAS, SEED_PROJETOS, TECNOLOGIAS_MAIS_USADAS
from portfolio.models.database import db
from portfolio.services.dashboard_service import DashboardService
from portfolio.services.disciplina_service import DisciplinaService
from portfolio.services.errors import NotFoundError, ValidationError
from portfolio.services.projeto_service import ProjetoService
from portfolio.services.seed_service import SeedService
from portfolio.services.validation import coerce_bool, validate_fields
from portfolio.storage import EXTENSION_KEY, InMemoryStore, get_store


class TestValidation:

    def test_trims_required_fields(self):
        assert validate_fields({'nome': '  Redes  '}, required=('nome',)) == {'nome': 'Redes'}

    @pytest.mark.parametrize('data', [{}, {'nome': ''}, {'nome': '   '}, {'nome': None}, {'nome': 42}, None])
    def test_missing_or_blank_required_field(self, data):
        with pytest.raises(ValidationError) as excinfo:
            validate_fields(data, required=('nome',))

        assert excinfo.value.field == 'nome'
        assert "'nome'" in excinfo.value.message

    def test_ignores_unknown_fields_and_blanks_optional(self):
        cleaned = validate_fields(
            {'nome': 'App', 'imagem': '  ', 'id': 99},
            required=('nome',),
            optional=('imagem',),
        )

        assert cleaned == {'nome': 'App', 'imagem': None}

    def test_max_length(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_fields({'nome': 'x' * 256}, required=('nome',), max_lengths={'nome': 255})

        assert excinfo.value.field == 'nome'

    @pytest.mark.parametrize('value, expected', [
        (True, True), (1, True), ('on', True), ('true', True), ('Sim', True),
        (False, False), (0, False), ('', False), ('off', False), (None, False),
    ])
    def test_coerce_bool(self, value, expected):
        assert coerce_bool(value) is expected


class TestDisciplinaService:
    """Suíte de testes para o DisciplinaService."""

    def test_add_returns_record_with_new_id(self, test_app):
        with test_app.app_context():
            redes = DisciplinaService.add_disciplina({'nome': ' Redes '})
            so = DisciplinaService.add_disciplina({'nome': 'SO'})

            assert redes == {'id': 1, 'nome': 'Redes'}
            assert so == {'id': 2, 'nome': 'SO'}

    def test_add_rejects_blank_name_without_touching_storage(self, test_app):
        with test_app.app_context():
            with pytest.raises(ValidationError):
                DisciplinaService.add_disciplina({'nome': '   '})

            assert DisciplinaService.list_disciplinas() == []

    def test_add_remove_add_does_not_reuse_ids(self, test_app):
        with test_app.app_context():
            DisciplinaService.add_disciplina({'nome': 'Redes'})
            DisciplinaService.add_disciplina({'nome': 'SO'})
            DisciplinaService.remove_disciplina(1)

            bd = DisciplinaService.add_disciplina({'nome': 'BD'})

            assert bd == {'id': 3, 'nome': 'BD'}
            assert DisciplinaService.list_disciplinas() == [{'id': 2, 'nome': 'SO'}, {'id': 3, 'nome': 'BD'}]

    def test_rename(self, test_app):
        with test_app.app_context():
            disciplina = DisciplinaService.add_disciplina({'nome': 'Redes'})

            renomeada = DisciplinaService.rename_disciplina(disciplina['id'], {'nome': 'Redes de Computadores'})

            assert renomeada == {'id': disciplina['id'], 'nome': 'Redes de Computadores'}
            assert DisciplinaService.get_disciplina(disciplina['id'])['nome'] == 'Redes de Computadores'

    @pytest.mark.parametrize('data', [{'nome': ''}, {}])
    def test_rename_with_invalid_name_keeps_record(self, test_app, data):
        with test_app.app_context():
            disciplina = DisciplinaService.add_disciplina({'nome': 'Redes'})

            with pytest.raises(ValidationError):
                DisciplinaService.rename_disciplina(disciplina['id'], data)

            assert DisciplinaService.get_disciplina(disciplina['id']) == disciplina

    def test_rename_missing_id(self, test_app):
        with test_app.app_context():
            DisciplinaService.add_disciplina({'nome': 'Redes'})

            with pytest.raises(NotFoundError) as excinfo:
                DisciplinaService.rename_disciplina(999, {'nome': 'X'})

            assert excinfo.value.status_code == 404
            assert DisciplinaService.list_disciplinas() == [{'id': 1, 'nome': 'Redes'}]

    def test_rename_validates_before_looking_up_id(self, test_app):
        with test_app.app_context():
            with pytest.raises(ValidationError):
                DisciplinaService.rename_disciplina(999, {})

    def test_remove_then_remove_again(self, test_app):
        with test_app.app_context():
            disciplina = DisciplinaService.add_disciplina({'nome': 'Redes'})

            removida = DisciplinaService.remove_disciplina(disciplina['id'])

            assert removida == disciplina
            assert disciplina['id'] not in [d['id'] for d in DisciplinaService.list_disciplinas()]
            with pytest.raises(NotFoundError):
                DisciplinaService.remove_disciplina(disciplina['id'])

    def test_uses_whatever_store_is_registered(self, test_app):
        """O serviço depende só do contrato do store, não do backend concreto."""
        with test_app.app_context():
            fake = InMemoryStore(('nome',), records=[{'nome': 'Pré-existente'}])
            test_app.extensions[EXTENSION_KEY]['disciplinas'] = fake

            DisciplinaService.add_disciplina({'nome': 'Nova'})

            assert [d['nome'] for d in fake.list()] == ['Pré-existente', 'Nova']


class TestProjetoService:

    def test_add_projeto_normalizes_fields(self, test_app):
        with test_app.app_context():
            projeto = ProjetoService.add_projeto({
                'nome': ' Portfólio ',
                'descricao': 'Site pessoal em Flask',
                'participacao': 'Desenvolvimento completo',
                'imagem': '',
                'concluido': 'on',
            })

            assert projeto == {
                'id': 1,
                'nome': 'Portfólio',
                'descricao': 'Site pessoal em Flask',
                'participacao': 'Desenvolvimento completo',
                'imagem': None,
                'concluido': True,
            }

    def test_add_projeto_requires_descricao(self, test_app):
        with test_app.app_context():
            with pytest.raises(ValidationError) as excinfo:
                ProjetoService.add_projeto({'nome': 'App', 'participacao': 'Tudo'})

            assert excinfo.value.field == 'descricao'
            assert ProjetoService.count_projetos() == 0


class TestSeedService:

    def test_seeds_empty_collections(self, store_app):
        with store_app.app_context():
            inserted = SeedService.seed_initial_data()

            assert inserted == {'projetos': len(SEED_PROJETOS), 'disciplinas': len(SEED_DISCIPLINAS)}
            assert [d['nome'] for d in DisciplinaService.list_disciplinas()] == list(SEED_DISCIPLINAS)
            assert len(ProjetoService.list_projetos()) == 6

    def test_seeding_twice_does_not_duplicate(self, store_app):
        with store_app.app_context():
            SeedService.seed_initial_data()
            antes = (DisciplinaService.list_disciplinas(), ProjetoService.list_projetos())

            inserted = SeedService.seed_initial_data()

            assert inserted == {'projetos': 0, 'disciplinas': 0}
            assert (DisciplinaService.list_disciplinas(), ProjetoService.list_projetos()) == antes

    def test_collections_are_checked_independently(self, test_app):
        with test_app.app_context():
            DisciplinaService.add_disciplina({'nome': 'Minha disciplina'})

            inserted = SeedService.seed_initial_data()

            assert inserted == {'projetos': 6, 'disciplinas': 0}
            assert DisciplinaService.list_disciplinas() == [{'id': 1, 'nome': 'Minha disciplina'}]

    def test_seed_on_startup_survives_restart(self, make_app):
        primeira = make_app('json', SEED_ON_STARTUP=True)
        segunda = make_app('json', SEED_ON_STARTUP=True)

        with segunda.app_context():
            assert get_store('disciplinas').count() == 10
            assert get_store('projetos').count() == 6
        with primeira.app_context():
            assert get_store('disciplinas').list() == get_store('disciplinas', segunda).list()

    def test_unreadable_collection_is_left_alone_on_startup(self, make_app, tmp_path, caplog):
        arquivo = tmp_path / 'disciplinas.json'
        arquivo.write_text('{corrompido', encoding='utf-8')

        app = make_app('json', SEED_ON_STARTUP=True)

        assert arquivo.read_text(encoding='utf-8') == '{corrompido'
        assert 'Seed de disciplinas ignorado' in caplog.text
        with app.app_context():
            assert get_store('projetos').count() == 6
        assert app.test_client().get('/').status_code == 200

    def test_sql_read_failure_skips_seed(self, make_app, monkeypatch):
        app = make_app('sql')
        with app.app_context():

            def _fail(*args, **kwargs):
                raise OperationalError('SELECT', {}, Exception('banco indisponível'))

            monkeypatch.setattr(db.session, 'scalar', _fail)
            inserted = SeedService.seed_initial_data()
            monkeypatch.undo()

            assert inserted == {'projetos': 0, 'disciplinas': 0}
            assert get_store('projetos').count() == 0


class TestDashboardService:

    def test_counts_after_seed(self, seeded_app):
        with seeded_app.app_context():
            data = DashboardService.get_dashboard_data()

            assert data['total_projetos'] == 6
            assert data['concluidos'] == 6
            assert data['em_andamento'] == 0
            assert data['total_disciplinas'] == 10
            assert data['tecnologias_mais_usadas'] == list(TECNOLOGIAS_MAIS_USADAS)

    def test_em_andamento(self, test_app):
        with test_app.app_context():
            base = {'descricao': 'd', 'participacao': 'p'}
            ProjetoService.add_projeto({**base, 'nome': 'A', 'concluido': True})
            ProjetoService.add_projeto({**base, 'nome': 'B'})
            ProjetoService.add_projeto({**base, 'nome': 'C', 'concluido': False})

            data = DashboardService.get_dashboard_data()

            assert (data['total_projetos'], data['concluidos'], data['em_andamento']) == (3, 1, 2)
            assert data['total_disciplinas'] == 0
