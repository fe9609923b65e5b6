import logging
import os
import warnings

from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_wtf.csrf import CSRFProtect

logger = logging.getLogger(__name__)

# URL do Redis usado para rate limiting; só é testada quando definida via env var
REDIS_URL = os.environ.get("REDIS_URL")


def _choose_storage():
    """Escolhe o storage para o Limiter.

    Sem REDIS_URL o limiter usa memória. Com REDIS_URL tenta conectar
    rapidamente; se falhar, em produção lança RuntimeError (fail-fast) e nos
    outros ambientes emite um warning e volta para memória.
    """
    explicit = os.environ.get("RATELIMIT_STORAGE_URI")
    if explicit:
        return explicit
    if not REDIS_URL:
        return "memory://"

    try:
        # import local para evitar import-errors quando redis não estiver instalado
        import redis as _redis  # type: ignore

        client = _redis.from_url(REDIS_URL, socket_connect_timeout=1)
        client.ping()
        storage = REDIS_URL
    except Exception as exc:
        is_production = os.environ.get("FLASK_ENV", "").lower() == "production"
        if is_production:
            raise RuntimeError(
                f"Falha ao conectar ao Redis em {REDIS_URL}: {exc}. Em produção o Redis deve estar acessível."
            )

        warnings.warn(
            f"Redis não disponível em {REDIS_URL}: {exc}. Usando storage em memória como fallback. "
            "Isto não é recomendado em produção.",
            stacklevel=2,
        )
        storage = "memory://"

    logger.info("Rate limiter storage: %s", storage)
    return storage


limiter = Limiter(key_func=get_remote_address, storage_uri=_choose_storage())
csrf = CSRFProtect()

__all__ = ["limiter", "csrf"]
