"""
Service de Comunicações.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from juris.core.exceptions import ResourceNotFoundError
from juris.models.communication import Communication
from juris.repositories.communication_repository import CommunicationRepository
from juris.schemas.communication import CommunicationCreate, CommunicationUpdate
from juris.services.case_service import require_case, require_client

logger = structlog.get_logger()


class CommunicationService:
    """Service para o histórico de comunicações com clientes."""

    def __init__(self, db: AsyncSession):
        self._db = db
        self._repo = CommunicationRepository(db)

    async def criar(self, dados: CommunicationCreate) -> Communication:
        """
        Registra comunicação.

        Sem `date`, o registro assume o instante atual.
        """
        await require_case(self._db, dados.case_id)
        await require_client(self._db, dados.client_id)

        communication = await self._repo.create(**dados.model_dump(exclude_none=True))

        logger.info(
            "Comunicação registrada",
            communication_id=communication.id,
            case_id=communication.case_id,
            client_id=communication.client_id,
            type=communication.type.value,
        )
        return communication

    async def buscar(self, communication_id: int) -> Communication:
        """Busca comunicação por ID."""
        communication = await self._repo.get_by_id(communication_id)
        if communication is None:
            raise ResourceNotFoundError("Comunicação", communication_id)
        return communication

    async def listar_por_processo(self, case_id: int) -> list[Communication]:
        """Lista comunicações de um processo, mais recentes primeiro."""
        return await self._repo.get_by_case(case_id)

    async def atualizar(
        self,
        communication_id: int,
        dados: CommunicationUpdate,
    ) -> Communication:
        """Atualiza comunicação."""
        await self.buscar(communication_id)
        update_data = dados.model_dump(exclude_unset=True)
        if "case_id" in update_data:
            await require_case(self._db, update_data["case_id"])
        if "client_id" in update_data:
            await require_client(self._db, update_data["client_id"])

        communication = await self._repo.update(communication_id, **update_data)
        if communication is None:
            raise ResourceNotFoundError("Comunicação", communication_id)

        logger.info(
            "Comunicação atualizada",
            communication_id=communication_id,
            campos=list(update_data.keys()),
        )
        return communication

    async def excluir(self, communication_id: int) -> None:
        """Exclui comunicação."""
        if not await self._repo.delete(communication_id):
            raise ResourceNotFoundError("Comunicação", communication_id)
        logger.info("Comunicação excluída", communication_id=communication_id)
