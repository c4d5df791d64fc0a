"""
Modelo de Documento.

Apenas metadados: o upload é simulado e `file_path` fica nulo
quando não há arquivo.
"""

from datetime import datetime

from sqlalchemy import ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from juris.core.clock import utcnow
from juris.db.base import Base, UTCDateTime


class Document(Base):
    """Documento vinculado a um processo (petição, contestação, ...)."""

    __tablename__ = "documents"

    case_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cases.id"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Rótulo livre: Petição, Contestação, Procuração...
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    file_path: Mapped[str | None] = mapped_column(String(500))

    uploaded_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Document(id={self.id}, name='{self.name}', type='{self.type}')>"
