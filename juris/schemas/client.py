"""
Schemas do Cliente.
"""

from pydantic import EmailStr, Field, field_validator

from juris.schemas.base import (
    BaseSchema,
    CreatedAtMixin,
    IDMixin,
    PartialSchema,
    blank_to_none,
    reject_null,
)


class ClientBase(BaseSchema):
    """Campos base do cliente."""

    name: str = Field(..., min_length=1, max_length=255)

    # Contato
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=30)

    # CPF/CNPJ
    document: str | None = Field(None, max_length=30)

    address: str | None = None
    notes: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def empty_email(cls, v: str | None) -> str | None:
        return blank_to_none(v)


class ClientCreate(ClientBase):
    """Schema para criação de cliente."""
    pass


class ClientUpdate(PartialSchema):
    """Schema para atualização parcial de cliente."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=30)
    document: str | None = Field(None, max_length=30)
    address: str | None = None
    notes: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def name_not_null(cls, v: str | None) -> str:
        return reject_null(v)

    @field_validator("email", mode="before")
    @classmethod
    def empty_email(cls, v: str | None) -> str | None:
        return blank_to_none(v)


class ClientResponse(ClientBase, IDMixin, CreatedAtMixin):
    """Schema de resposta do cliente."""
    pass
