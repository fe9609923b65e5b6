# portfolio/services/validation.py

from typing import Any, Iterable, Mapping, Optional

from .errors import ValidationError

TRUE_VALUES = {'1', 'true', 'on', 'yes', 'sim', 's'}


def validate_fields(data: Optional[Mapping[str, Any]],
                    required: Iterable[str],
                    optional: Iterable[str] = (),
                    max_lengths: Optional[Mapping[str, int]] = None) -> dict:
    """
    Retorna um dict só com os campos conhecidos, com espaços das pontas removidos.

    Campo obrigatório ausente, não-texto ou vazio após o strip levanta
    ValidationError identificando o campo. Campo opcional em branco vira None.
    """
    data = data or {}
    cleaned = {}

    for field in required:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(field, f"O campo '{field}' é obrigatório.")
        cleaned[field] = value.strip()

    for field in optional:
        if field not in data:
            continue
        value = data.get(field)
        if value is None:
            cleaned[field] = None
        elif isinstance(value, str):
            cleaned[field] = value.strip() or None
        else:
            raise ValidationError(field, f"O campo '{field}' deve ser um texto.")

    for field, limit in (max_lengths or {}).items():
        value = cleaned.get(field)
        if isinstance(value, str) and len(value) > limit:
            raise ValidationError(field, f"O campo '{field}' deve ter no máximo {limit} caracteres.")

    return cleaned


def coerce_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return False
