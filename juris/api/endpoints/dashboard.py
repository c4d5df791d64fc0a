"""
Endpoints do Dashboard.
"""

from fastapi import APIRouter

from juris.core.dependencies import DBSession
from juris.schemas.dashboard import DashboardStats
from juris.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def estatisticas(db: DBSession) -> DashboardStats:
    """Processos ativos, prazos da semana, audiências de hoje e honorários pendentes."""
    return await DashboardService(db).get_stats()
