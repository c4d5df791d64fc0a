"""
Modelos relacionados a Processos Judiciais.

Inclui Case (processo), Activity (prazos e tarefas) e Hearing (audiências).
"""

import enum
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from juris.core.clock import utcnow
from juris.db.base import Base, CreatedAtMixin, PgEnum, UTCDateTime


class CaseStatus(str, enum.Enum):
    """Situação do processo."""

    ONGOING = "ongoing"
    COMPLETED = "completed"
    SUSPENDED = "suspended"
    ARCHIVED = "archived"


class ActivityType(str, enum.Enum):
    """Tipos de atividade vinculada ao processo."""

    DEADLINE = "deadline"
    HEARING = "hearing"
    PETITION = "petition"
    DOCUMENT = "document"


class ActivityPriority(str, enum.Enum):
    """Prioridade da atividade."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class HearingType(str, enum.Enum):
    """Tipos de audiência."""

    CONCILIATION = "conciliation"
    INSTRUCTION = "instruction"
    JUDGMENT = "judgment"


class Case(CreatedAtMixin, Base):
    """
    Processo judicial.

    Identificado pelo número único (formato CNJ) e vinculado a exatamente
    um cliente. `updated_at` é renovado a cada alteração.
    """

    __tablename__ = "cases"

    process_number: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
        comment="Formato: NNNNNNN-DD.AAAA.J.TR.OOOO",
    )
    court: Mapped[str] = mapped_column(String(100), nullable=False)

    client_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("clients.id"),
        nullable=False,
        index=True,
    )

    # Partes e tipo de ação
    action_type: Mapped[str] = mapped_column(String(255), nullable=False)
    plaintiff: Mapped[str] = mapped_column(String(255), nullable=False)
    defendant: Mapped[str] = mapped_column(String(255), nullable=False)

    case_value: Mapped[Decimal | None] = mapped_column(Numeric(15, 2))

    status: Mapped[CaseStatus] = mapped_column(
        PgEnum(CaseStatus),
        default=CaseStatus.ONGOING,
        nullable=False,
        index=True,
    )

    description: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Case(id={self.id}, process_number='{self.process_number}')>"


class Activity(CreatedAtMixin, Base):
    """
    Atividade do processo (prazo, audiência, petição ou documento).

    Prazos (`type=deadline`) alimentam o painel de vencimentos.
    """

    __tablename__ = "activities"

    case_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cases.id"),
        nullable=False,
        index=True,
    )

    type: Mapped[ActivityType] = mapped_column(PgEnum(ActivityType), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)

    due_date: Mapped[datetime | None] = mapped_column(UTCDateTime(), index=True)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    priority: Mapped[ActivityPriority] = mapped_column(
        PgEnum(ActivityPriority),
        default=ActivityPriority.MEDIUM,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Activity(id={self.id}, type={self.type.value}, due_date={self.due_date})>"


class Hearing(CreatedAtMixin, Base):
    """Audiência agendada em um processo."""

    __tablename__ = "hearings"

    case_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cases.id"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, index=True)
    location: Mapped[str | None] = mapped_column(String(255))
    type: Mapped[HearingType] = mapped_column(PgEnum(HearingType), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Hearing(id={self.id}, date={self.date}, case_id={self.case_id})>"
