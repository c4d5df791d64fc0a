"""
Schemas base compartilhados.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from juris.core.clock import as_utc

# Instante normalizado para UTC (sem fuso = UTC)
UTCDatetime = Annotated[datetime, AfterValidator(as_utc)]


class BaseSchema(BaseModel):
    """
    Schema base com configurações padrão.

    Atributos em snake_case, JSON em camelCase (processNumber, clientId).
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class PartialSchema(BaseSchema):
    """
    Base para atualizações parciais.

    Qualquer subconjunto de campos é aceito; campos desconhecidos não.
    """

    model_config = ConfigDict(extra="forbid")


def reject_null(value: Any) -> Any:
    """Campos obrigatórios podem ser omitidos num PUT, mas não anulados."""
    if value is None:
        raise PydanticCustomError("null_not_allowed", "Campo não pode ser nulo")
    return value


def blank_to_none(value: Any) -> Any:
    """Formulários enviam "" para campos opcionais vazios."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class IDMixin(BaseSchema):
    """Mixin com campo ID."""

    id: int


class CreatedAtMixin(BaseSchema):
    """Mixin com data de criação."""

    created_at: UTCDatetime


class MessageResponse(BaseModel):
    """Resposta simples com mensagem (ex.: exclusão)."""

    message: str


class FieldError(BaseModel):
    """Campo rejeitado na validação."""

    field: str
    reason: str


class ErrorResponse(BaseModel):
    """Corpo padrão de erro."""

    message: str
    errors: list[FieldError] | None = None
