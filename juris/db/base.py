"""
Base class para todos os modelos SQLAlchemy.

Define campos comuns e tipos de coluna compartilhados.
"""

from datetime import datetime
from typing import Type

from sqlalchemy import DateTime, Enum as SQLEnum, Integer, func
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from juris.core.clock import as_utc, utcnow


def PgEnum(enum_class: Type) -> SQLEnum:
    """
    Cria um SQLAlchemy Enum que usa os valores (values) em vez dos nomes (names).

    Isso é necessário para compatibilidade com PostgreSQL que espera valores
    em minúsculo no banco, enquanto Python Enums usam nomes em maiúsculo.

    Exemplo:
        class CaseStatus(str, enum.Enum):
            ONGOING = "ongoing"  # Nome: ONGOING, Valor: ongoing

        # Sem PgEnum: PostgreSQL recebe "ONGOING" (falha)
        # Com PgEnum: PostgreSQL recebe "ongoing" (funciona)
    """
    return SQLEnum(enum_class, values_callable=lambda x: [e.value for e in x])


class UTCDateTime(TypeDecorator):
    """
    DateTime que sempre grava e devolve instantes UTC timezone-aware.

    SQLite descarta o fuso; a leitura recoloca UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        return as_utc(value)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        return as_utc(value)


class Base(DeclarativeBase):
    """
    Classe base para todos os modelos.

    Todas as entidades são identificadas por um inteiro sequencial.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class CreatedAtMixin:
    """Mixin com a data de criação preenchida pelo servidor."""

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )
