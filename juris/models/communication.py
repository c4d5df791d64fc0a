"""
Modelo de Comunicação com o cliente.
"""

import enum
from datetime import datetime

from sqlalchemy import ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from juris.core.clock import utcnow
from juris.db.base import Base, PgEnum, UTCDateTime


class CommunicationType(str, enum.Enum):
    """Canal da comunicação."""

    EMAIL = "email"
    PHONE = "phone"
    MEETING = "meeting"
    LETTER = "letter"


class Communication(Base):
    """Interação registrada entre o escritório e o cliente sobre um processo."""

    __tablename__ = "communications"

    case_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cases.id"),
        nullable=False,
        index=True,
    )
    client_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("clients.id"),
        nullable=False,
        index=True,
    )

    type: Mapped[CommunicationType] = mapped_column(PgEnum(CommunicationType), nullable=False)
    subject: Mapped[str | None] = mapped_column(String(255))
    content: Mapped[str | None] = mapped_column(Text)

    date: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Communication(id={self.id}, type={self.type.value}, case_id={self.case_id})>"
