"""
Service do Dashboard.

O contador de prazos usa `DASHBOARD_DEADLINES_DAYS` (7 dias), distinto
da janela de `UPCOMING_DEADLINES_DAYS` (30 dias) da lista de prazos.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from juris.core.clock import today_bounds, window_from_now
from juris.core.config import settings
from juris.models.case import CaseStatus
from juris.repositories.case_repository import (
    ActivityRepository,
    CaseRepository,
    HearingRepository,
)
from juris.repositories.financial_repository import FinancialRepository
from juris.schemas.dashboard import DashboardStats


class DashboardService:
    """Indicadores agregados do escritório."""

    def __init__(self, db: AsyncSession):
        self._case_repo = CaseRepository(db)
        self._activity_repo = ActivityRepository(db)
        self._hearing_repo = HearingRepository(db)
        self._financial_repo = FinancialRepository(db)

    async def get_stats(self) -> DashboardStats:
        """Retorna estatísticas do painel."""
        active = await self._case_repo.count_by_status(CaseStatus.ONGOING)

        start, end = window_from_now(settings.DASHBOARD_DEADLINES_DAYS)
        deadlines = await self._activity_repo.count_deadlines_between(start, end)

        today_start, today_end = today_bounds()
        hearings = await self._hearing_repo.count_pending_between(today_start, today_end)

        total = await self._financial_repo.sum_pending()

        return DashboardStats(
            active_processes=active,
            upcoming_deadlines=deadlines,
            today_hearings=hearings,
            pending_fees=str(total) if total is not None else "0",
        )
