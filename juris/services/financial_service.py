"""
Service Financeiro.

Honorários, custas e indenizações vinculados a processos.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from juris.core.exceptions import ResourceNotFoundError
from juris.models.financial import Financial
from juris.repositories.financial_repository import FinancialRepository
from juris.schemas.financial import FinancialCreate, FinancialUpdate
from juris.services.case_service import require_case

logger = structlog.get_logger()


class FinancialService:
    """Service para lançamentos financeiros."""

    def __init__(self, db: AsyncSession):
        self._db = db
        self._repo = FinancialRepository(db)

    async def criar(self, dados: FinancialCreate) -> Financial:
        """Cria lançamento em um processo."""
        await require_case(self._db, dados.case_id)

        entry = await self._repo.create(**dados.model_dump())

        logger.info(
            "Lançamento criado",
            financial_id=entry.id,
            case_id=entry.case_id,
            type=entry.type.value,
            amount=str(entry.amount),
        )
        return entry

    async def buscar(self, financial_id: int) -> Financial:
        """Busca lançamento por ID."""
        entry = await self._repo.get_by_id(financial_id)
        if entry is None:
            raise ResourceNotFoundError("Lançamento", financial_id)
        return entry

    async def listar_por_processo(self, case_id: int) -> list[Financial]:
        """Lista lançamentos de um processo."""
        return await self._repo.get_by_case(case_id)

    async def pendentes(self) -> list[Financial]:
        """Lista lançamentos pendentes por vencimento."""
        return await self._repo.get_pending()

    async def atualizar(self, financial_id: int, dados: FinancialUpdate) -> Financial:
        """Atualiza lançamento (ex.: registrar pagamento)."""
        await self.buscar(financial_id)
        update_data = dados.model_dump(exclude_unset=True)
        if "case_id" in update_data:
            await require_case(self._db, update_data["case_id"])

        entry = await self._repo.update(financial_id, **update_data)
        if entry is None:
            raise ResourceNotFoundError("Lançamento", financial_id)

        logger.info(
            "Lançamento atualizado",
            financial_id=financial_id,
            campos=list(update_data.keys()),
        )
        return entry

    async def excluir(self, financial_id: int) -> None:
        """Exclui lançamento."""
        if not await self._repo.delete(financial_id):
            raise ResourceNotFoundError("Lançamento", financial_id)
        logger.info("Lançamento excluído", financial_id=financial_id)
