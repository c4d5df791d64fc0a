"""
Schemas de Comunicações.
"""

from pydantic import Field, field_validator

from juris.models.communication import CommunicationType
from juris.schemas.base import BaseSchema, IDMixin, PartialSchema, UTCDatetime, reject_null


class CommunicationBase(BaseSchema):
    """Campos base da comunicação."""

    case_id: int
    client_id: int
    type: CommunicationType
    subject: str | None = Field(None, max_length=255)
    content: str | None = None


class CommunicationCreate(CommunicationBase):
    """Schema para registro de comunicação. Sem `date`, vale o instante atual."""

    date: UTCDatetime | None = None


class CommunicationUpdate(PartialSchema):
    """Schema para atualização parcial de comunicação."""

    case_id: int | None = None
    client_id: int | None = None
    type: CommunicationType | None = None
    subject: str | None = Field(None, max_length=255)
    content: str | None = None
    date: UTCDatetime | None = None

    @field_validator("case_id", "client_id", "type", "date", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class CommunicationResponse(CommunicationBase, IDMixin):
    """Schema de resposta da comunicação."""

    date: UTCDatetime
