# portfolio/middleware.py

from urllib.parse import parse_qs


class MethodOverrideMiddleware:
    """
    Permite que formulários HTML (que só enviam GET/POST) acionem rotas PUT/DELETE.

    Um POST com ``?_method=PUT`` (ou PATCH/DELETE) na query string chega ao
    Flask com o método indicado. Outros métodos e valores são ignorados.
    """

    allowed_methods = frozenset(['PUT', 'PATCH', 'DELETE'])

    def __init__(self, app, input_name='_method'):
        self.app = app
        self.input_name = input_name

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            values = parse_qs(environ.get('QUERY_STRING', '')).get(self.input_name)
            if values:
                method = values[0].upper()
                if method in self.allowed_methods:
                    environ['REQUEST_METHOD'] = method
        return self.app(environ, start_response)
