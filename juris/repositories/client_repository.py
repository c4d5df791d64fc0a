"""
Repository do Cliente.
"""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from juris.models.case import Case
from juris.models.client import Client
from juris.models.communication import Communication
from juris.repositories.base import BaseRepository, storage_errors


class ClientRepository(BaseRepository[Client]):
    """Repository para operações com Cliente."""

    def __init__(self, db: AsyncSession):
        super().__init__(Client, db)

    def ordering(self) -> list[Any]:
        return [Client.name.asc(), Client.id.asc()]

    async def count_dependents(self, client_id: int) -> dict[str, int]:
        """Conta processos e comunicações que referenciam o cliente."""
        async with storage_errors(self.db, "count_client_dependents"):
            result = await self.db.execute(
                select(
                    select(func.count())
                    .select_from(Case)
                    .where(Case.client_id == client_id)
                    .scalar_subquery()
                    .label("cases"),
                    select(func.count())
                    .select_from(Communication)
                    .where(Communication.client_id == client_id)
                    .scalar_subquery()
                    .label("communications"),
                )
            )
            counts = result.one()._mapping
        return {name: count for name, count in counts.items() if count}
