"""
Service do Cliente.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from juris.core.exceptions import DeleteRestrictedError, ResourceNotFoundError
from juris.models.client import Client
from juris.repositories.client_repository import ClientRepository
from juris.schemas.client import ClientCreate, ClientUpdate

logger = structlog.get_logger()


class ClientService:
    """
    Service para operações com Cliente.

    Encapsula lógica de negócio e coordena repositories.
    """

    def __init__(self, db: AsyncSession):
        self._repo = ClientRepository(db)
        self._db = db

    async def criar(self, dados: ClientCreate) -> Client:
        """Cria novo cliente."""
        client = await self._repo.create(**dados.model_dump())
        logger.info("Cliente criado", client_id=client.id)
        return client

    async def buscar(self, client_id: int) -> Client:
        """Busca cliente por ID."""
        client = await self._repo.get_by_id(client_id)
        if client is None:
            raise ResourceNotFoundError("Cliente", client_id)
        return client

    async def listar(self) -> list[Client]:
        """Lista clientes em ordem alfabética."""
        return await self._repo.get_all()

    async def atualizar(self, client_id: int, dados: ClientUpdate) -> Client:
        """Atualiza dados do cliente."""
        update_data = dados.model_dump(exclude_unset=True)
        client = await self._repo.update(client_id, **update_data)
        if client is None:
            raise ResourceNotFoundError("Cliente", client_id)

        logger.info(
            "Cliente atualizado",
            client_id=client_id,
            campos=list(update_data.keys()),
        )
        return client

    async def excluir(self, client_id: int) -> None:
        """
        Exclui cliente.

        Bloqueado enquanto houver processos ou comunicações vinculados.
        """
        await self.buscar(client_id)

        dependents = await self._repo.count_dependents(client_id)
        if dependents:
            raise DeleteRestrictedError("Cliente", client_id, dependents)

        if not await self._repo.delete(client_id):
            raise ResourceNotFoundError("Cliente", client_id)

        logger.info("Cliente excluído", client_id=client_id)
