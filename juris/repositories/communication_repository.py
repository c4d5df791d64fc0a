"""
Repository de Comunicações.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from juris.models.communication import Communication
from juris.repositories.base import BaseRepository


class CommunicationRepository(BaseRepository[Communication]):
    """Repository para o histórico de comunicações com clientes."""

    def __init__(self, db: AsyncSession):
        super().__init__(Communication, db)

    def ordering(self) -> list[Any]:
        return [Communication.date.desc(), Communication.id.desc()]

    async def get_by_case(self, case_id: int) -> list[Communication]:
        """Lista comunicações de um processo, mais recentes primeiro."""
        return await self.get_all(Communication.case_id == case_id)
