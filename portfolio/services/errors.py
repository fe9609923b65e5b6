# portfolio/services/errors.py


class ServiceError(Exception):
    """Erro recuperável de uma operação de serviço, com mensagem para o usuário."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Campo obrigatório ausente/vazio ou valor inválido."""

    status_code = 400

    def __init__(self, field, message):
        super().__init__(message)
        self.field = field


class NotFoundError(ServiceError):
    status_code = 404
