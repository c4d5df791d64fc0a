"""
Schemas do Dashboard.
"""

from juris.schemas.base import BaseSchema


class DashboardStats(BaseSchema):
    """
    Indicadores do painel inicial.

    `pending_fees` é a soma decimal exata dos lançamentos pendentes,
    serializada como texto ("0" quando não há nenhum).
    """

    active_processes: int
    upcoming_deadlines: int
    today_hearings: int
    pending_fees: str
