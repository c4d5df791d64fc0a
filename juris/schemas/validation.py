"""
Validação de payloads contra os schemas de entrada.

Converte erros do Pydantic em `ValidationError` com a lista de campos
violados, no mesmo formato usado pelas respostas HTTP 400.
"""

from typing import Any, Iterable, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from juris.core.exceptions import ValidationError

SchemaType = TypeVar("SchemaType", bound=BaseModel)

# Prefixos de localização adicionados pelo FastAPI
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}

REASON_REQUIRED = "required"
REASON_WRONG_TYPE = "wrong_type"
REASON_NOT_IN_ENUM = "not_in_enum"
REASON_UNKNOWN_FIELD = "unknown_field"
REASON_INVALID = "invalid"

_REASON_BY_TYPE = {
    "missing": REASON_REQUIRED,
    "null_not_allowed": REASON_REQUIRED,
    "enum": REASON_NOT_IN_ENUM,
    "literal_error": REASON_NOT_IN_ENUM,
    "extra_forbidden": REASON_UNKNOWN_FIELD,
}


def reason_for(error_type: str) -> str:
    """Classifica o tipo de erro do Pydantic."""
    if error_type in _REASON_BY_TYPE:
        return _REASON_BY_TYPE[error_type]
    if error_type.endswith("_type") or error_type.endswith("_parsing"):
        return REASON_WRONG_TYPE
    return REASON_INVALID


def field_name(loc: Iterable[Any]) -> str:
    """Monta o nome do campo a partir da localização do erro."""
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]
    return ".".join(parts) or "body"


def field_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """Converte `exc.errors()` em [{"field", "reason"}]."""
    return [
        {"field": field_name(error["loc"]), "reason": reason_for(error["type"])}
        for error in errors
    ]


def validate_payload(schema: type[SchemaType], data: Any) -> SchemaType:
    """
    Valida um objeto bruto contra o schema.

    Retorna a instância normalizada ou levanta `ValidationError`
    enumerando todos os campos violados.
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(errors=field_errors(exc.errors())) from exc
