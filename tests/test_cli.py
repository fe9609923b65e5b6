# tests/test_cli.py

from portfolio.storage import get_store


class TestCliCommands:

    def test_seed_data_is_idempotent(self, test_app):
        runner = test_app.test_cli_runner()

        first = runner.invoke(args=['seed-data'])
        second = runner.invoke(args=['seed-data'])

        assert first.exit_code == 0
        assert '6 projeto(s), 10 disciplina(s)' in first.output
        assert 'Nada foi inserido' in second.output
        with test_app.app_context():
            assert get_store('disciplinas').count() == 10

    def test_list_disciplinas(self, seeded_app):
        result = seeded_app.test_cli_runner().invoke(args=['list-disciplinas'])

        assert result.exit_code == 0
        linhas = result.output.strip().splitlines()
        assert len(linhas) == 10
        assert linhas[0].split(maxsplit=1) == ['1', 'Algoritmos e Lógica de Programação']

    def test_clear_data_asks_for_confirmation(self, seeded_app):
        runner = seeded_app.test_cli_runner()

        cancelled = runner.invoke(args=['clear-data'], input='n\n')

        assert 'Operação cancelada.' in cancelled.output
        with seeded_app.app_context():
            assert get_store('projetos').count() == 6

        result = runner.invoke(args=['clear-data', '--yes'])

        assert result.exit_code == 0
        assert 'disciplinas: 10 registro(s) removido(s).' in result.output
        with seeded_app.app_context():
            assert get_store('disciplinas').count() == 0
            assert get_store('projetos').count() == 0
