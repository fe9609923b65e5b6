"""WSGI entrypoint para Gunicorn em produção.

Cria a aplicação usando a factory `create_app` e expõe a variável `app`.
Se o armazenamento não puder ser inicializado a importação falha e o
processo não chega a atender requisições.
"""
from portfolio.app import create_app

app = create_app()
