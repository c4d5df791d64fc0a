"""
Schemas Financeiros.
"""

from decimal import Decimal

from pydantic import Field, field_validator

from juris.models.financial import FinancialStatus, FinancialType
from juris.schemas.base import (
    BaseSchema,
    CreatedAtMixin,
    IDMixin,
    PartialSchema,
    UTCDatetime,
    reject_null,
)


class FinancialBase(BaseSchema):
    """Campos base do lançamento financeiro."""

    case_id: int
    type: FinancialType
    description: str = Field(..., min_length=1, max_length=500)
    amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
    status: FinancialStatus = FinancialStatus.PENDING
    due_date: UTCDatetime | None = None
    paid_date: UTCDatetime | None = None


class FinancialCreate(FinancialBase):
    """Schema para criação de lançamento."""
    pass


class FinancialUpdate(PartialSchema):
    """Schema para atualização parcial de lançamento."""

    case_id: int | None = None
    type: FinancialType | None = None
    description: str | None = Field(None, min_length=1, max_length=500)
    amount: Decimal | None = Field(None, gt=0, max_digits=15, decimal_places=2)
    status: FinancialStatus | None = None
    due_date: UTCDatetime | None = None
    paid_date: UTCDatetime | None = None

    @field_validator("case_id", "type", "description", "amount", "status", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class FinancialResponse(FinancialBase, IDMixin, CreatedAtMixin):
    """Schema de resposta do lançamento."""
    pass
