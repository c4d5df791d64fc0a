"""
Repository Financeiro.
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from juris.models.financial import Financial, FinancialStatus
from juris.repositories.base import BaseRepository, storage_errors


class FinancialRepository(BaseRepository[Financial]):
    """Repository para honorários, custas e indenizações."""

    def __init__(self, db: AsyncSession):
        super().__init__(Financial, db)

    def ordering(self) -> list[Any]:
        return [Financial.created_at.desc(), Financial.id.desc()]

    async def get_by_case(self, case_id: int) -> list[Financial]:
        """Lista lançamentos de um processo."""
        return await self.get_all(Financial.case_id == case_id)

    async def get_pending(self) -> list[Financial]:
        """Lista lançamentos pendentes por vencimento (sem vencimento por último)."""
        async with storage_errors(self.db, "list_pending_financial"):
            result = await self.db.execute(
                select(Financial)
                .where(Financial.status == FinancialStatus.PENDING)
                .order_by(Financial.due_date.asc().nulls_last(), Financial.id.asc())
            )
            return list(result.scalars().all())

    async def sum_pending(self) -> Decimal | None:
        """Soma dos valores pendentes. None quando não há lançamentos."""
        async with storage_errors(self.db, "sum_pending_financial"):
            result = await self.db.execute(
                select(func.sum(Financial.amount)).where(
                    Financial.status == FinancialStatus.PENDING
                )
            )
            return result.scalar_one_or_none()
