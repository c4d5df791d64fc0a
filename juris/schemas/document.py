"""
Schemas de Documentos.
"""

from pydantic import Field, field_validator

from juris.schemas.base import BaseSchema, IDMixin, PartialSchema, UTCDatetime, reject_null


class DocumentBase(BaseSchema):
    """Campos base do documento."""

    case_id: int
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100)
    file_path: str | None = Field(None, max_length=500)


class DocumentCreate(DocumentBase):
    """Schema para registro de documento (upload simulado)."""
    pass


class DocumentUpdate(PartialSchema):
    """Schema para atualização de metadados do documento."""

    case_id: int | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    type: str | None = Field(None, min_length=1, max_length=100)
    file_path: str | None = Field(None, max_length=500)

    @field_validator("case_id", "name", "type", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class DocumentResponse(DocumentBase, IDMixin):
    """Schema de resposta do documento."""

    uploaded_at: UTCDatetime
