"""
Modelo Financeiro.

Honorários, custas e indenizações lançados por processo.
"""

import enum
from datetime import datetime
from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from juris.db.base import Base, CreatedAtMixin, PgEnum, UTCDateTime


class FinancialType(str, enum.Enum):
    """Natureza do lançamento."""

    FEE = "fee"  # Honorário
    COST = "cost"  # Custas
    COMPENSATION = "compensation"  # Indenização


class FinancialStatus(str, enum.Enum):
    """Status do lançamento."""

    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class Financial(CreatedAtMixin, Base):
    """Lançamento financeiro de um processo."""

    __tablename__ = "financial"

    case_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cases.id"),
        nullable=False,
        index=True,
    )

    type: Mapped[FinancialType] = mapped_column(PgEnum(FinancialType), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)

    # Valores em ponto fixo
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)

    status: Mapped[FinancialStatus] = mapped_column(
        PgEnum(FinancialStatus),
        default=FinancialStatus.PENDING,
        nullable=False,
        index=True,
    )

    due_date: Mapped[datetime | None] = mapped_column(UTCDateTime())
    paid_date: Mapped[datetime | None] = mapped_column(UTCDateTime())

    def __repr__(self) -> str:
        return f"<Financial(id={self.id}, type={self.type.value}, amount={self.amount})>"
