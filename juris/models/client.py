"""
Modelo do Cliente.

Pessoa física ou jurídica atendida pelo escritório.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from juris.db.base import Base, CreatedAtMixin


class Client(CreatedAtMixin, Base):
    """Cliente do escritório. Possui processos e comunicações."""

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Contato
    email: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(30))

    # CPF/CNPJ
    document: Mapped[str | None] = mapped_column(String(30))

    address: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name='{self.name}')>"
