"""
Service de Processos.

Gerencia processos, atividades (prazos) e audiências com regras de negócio.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from juris.core.clock import today_bounds, window_from_now
from juris.core.config import settings
from juris.core.exceptions import (
    DeleteRestrictedError,
    InvalidReferenceError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from juris.models.case import Activity, Case, Hearing
from juris.models.client import Client
from juris.repositories.case_repository import (
    ActivityRepository,
    CaseRelations,
    CaseRepository,
    HearingRepository,
)
from juris.repositories.client_repository import ClientRepository
from juris.schemas.case import (
    ActivityCreate,
    ActivityUpdate,
    CaseCreate,
    CaseUpdate,
    HearingCreate,
    HearingUpdate,
)

logger = structlog.get_logger()


async def require_case(db: AsyncSession, case_id: int) -> None:
    """Garante que o processo referenciado por `caseId` existe."""
    if not await CaseRepository(db).exists(case_id):
        raise InvalidReferenceError("Processo", case_id, "caseId")


async def require_client(db: AsyncSession, client_id: int) -> None:
    """Garante que o cliente referenciado por `clientId` existe."""
    if not await ClientRepository(db).exists(client_id):
        raise InvalidReferenceError("Cliente", client_id, "clientId")


class CaseService:
    """
    Service para operações com Processo.

    Número do processo é único; exclusão é bloqueada enquanto houver
    registros vinculados.
    """

    def __init__(self, db: AsyncSession):
        self._db = db
        self._repo = CaseRepository(db)

    async def criar(self, dados: CaseCreate) -> Case:
        """
        Cria novo processo.

        Valida número único e existência do cliente.
        """
        await self._check_process_number(dados.process_number)
        await require_client(self._db, dados.client_id)

        case = await self._repo.create(**dados.model_dump())

        logger.info(
            "Processo criado",
            case_id=case.id,
            process_number=case.process_number,
            client_id=case.client_id,
        )
        return case

    async def buscar(self, case_id: int) -> Case:
        """Busca processo por ID."""
        case = await self._repo.get_by_id(case_id)
        if case is None:
            raise ResourceNotFoundError("Processo", case_id)
        return case

    async def buscar_com_relacoes(self, case_id: int) -> CaseRelations:
        """Busca processo com cliente e todos os registros vinculados."""
        relations = await self._repo.get_with_relations(case_id)
        if relations is None:
            raise ResourceNotFoundError("Processo", case_id)
        return relations

    async def listar(self) -> list[tuple[Case, Client | None]]:
        """Lista processos com cliente, alterados recentemente primeiro."""
        return await self._repo.get_all_with_client()

    async def pesquisar(self, query: str) -> list[tuple[Case, Client | None]]:
        """Pesquisa por número, partes ou nome do cliente."""
        return await self._repo.search(query)

    async def listar_por_cliente(self, client_id: int) -> list[Case]:
        """Lista processos de um cliente."""
        if not await ClientRepository(self._db).exists(client_id):
            raise ResourceNotFoundError("Cliente", client_id)
        return await self._repo.get_by_client(client_id)

    async def atualizar(self, case_id: int, dados: CaseUpdate) -> Case:
        """Atualiza dados do processo; `updatedAt` sempre avança."""
        case = await self.buscar(case_id)
        update_data = dados.model_dump(exclude_unset=True)

        number = update_data.get("process_number")
        if number is not None and number != case.process_number:
            await self._check_process_number(number)
        if "client_id" in update_data:
            await require_client(self._db, update_data["client_id"])

        case = await self._repo.update(case_id, **update_data)
        if case is None:
            raise ResourceNotFoundError("Processo", case_id)

        logger.info(
            "Processo atualizado",
            case_id=case_id,
            campos=list(update_data.keys()),
        )
        return case

    async def excluir(self, case_id: int) -> None:
        """Exclui processo sem registros vinculados."""
        await self.buscar(case_id)

        dependents = await self._repo.count_dependents(case_id)
        if dependents:
            raise DeleteRestrictedError("Processo", case_id, dependents)

        if not await self._repo.delete(case_id):
            raise ResourceNotFoundError("Processo", case_id)

        logger.info("Processo excluído", case_id=case_id)

    async def _check_process_number(self, process_number: str) -> None:
        if await self._repo.get_by_process_number(process_number) is not None:
            raise ResourceAlreadyExistsError("Processo", "processNumber", process_number)


class ActivityService:
    """Service para atividades e prazos processuais."""

    def __init__(self, db: AsyncSession):
        self._db = db
        self._repo = ActivityRepository(db)

    async def criar(self, dados: ActivityCreate) -> Activity:
        """Cria atividade vinculada a um processo."""
        await require_case(self._db, dados.case_id)

        activity = await self._repo.create(**dados.model_dump())

        logger.info(
            "Atividade criada",
            activity_id=activity.id,
            case_id=activity.case_id,
            type=activity.type.value,
            due_date=str(activity.due_date) if activity.due_date else None,
        )
        return activity

    async def buscar(self, activity_id: int) -> Activity:
        """Busca atividade por ID."""
        activity = await self._repo.get_by_id(activity_id)
        if activity is None:
            raise ResourceNotFoundError("Atividade", activity_id)
        return activity

    async def listar_por_processo(self, case_id: int) -> list[Activity]:
        """Lista atividades de um processo por vencimento."""
        return await self._repo.get_by_case(case_id)

    async def proximos_prazos(self, limit: int | None = None) -> list[Activity]:
        """
        Prazos em aberto que vencem de agora até
        `UPCOMING_DEADLINES_DAYS` dias, mais próximos primeiro.
        """
        start, end = window_from_now(settings.UPCOMING_DEADLINES_DAYS)
        return await self._repo.get_upcoming_deadlines(
            start,
            end,
            settings.UPCOMING_DEADLINES_LIMIT if limit is None else limit,
        )

    async def atualizar(self, activity_id: int, dados: ActivityUpdate) -> Activity:
        """Atualiza atividade (ex.: marcar como concluída)."""
        await self.buscar(activity_id)
        update_data = dados.model_dump(exclude_unset=True)
        if "case_id" in update_data:
            await require_case(self._db, update_data["case_id"])

        activity = await self._repo.update(activity_id, **update_data)
        if activity is None:
            raise ResourceNotFoundError("Atividade", activity_id)

        logger.info(
            "Atividade atualizada",
            activity_id=activity_id,
            campos=list(update_data.keys()),
        )
        return activity

    async def excluir(self, activity_id: int) -> None:
        """Exclui atividade."""
        if not await self._repo.delete(activity_id):
            raise ResourceNotFoundError("Atividade", activity_id)
        logger.info("Atividade excluída", activity_id=activity_id)


class HearingService:
    """Service para agenda de audiências."""

    def __init__(self, db: AsyncSession):
        self._db = db
        self._repo = HearingRepository(db)

    async def criar(self, dados: HearingCreate) -> Hearing:
        """Agenda audiência em um processo."""
        await require_case(self._db, dados.case_id)

        hearing = await self._repo.create(**dados.model_dump())

        logger.info(
            "Audiência agendada",
            hearing_id=hearing.id,
            case_id=hearing.case_id,
            date=str(hearing.date),
        )
        return hearing

    async def buscar(self, hearing_id: int) -> Hearing:
        """Busca audiência por ID."""
        hearing = await self._repo.get_by_id(hearing_id)
        if hearing is None:
            raise ResourceNotFoundError("Audiência", hearing_id)
        return hearing

    async def listar(self) -> list[Hearing]:
        """Lista todas as audiências por data."""
        return await self._repo.get_all()

    async def listar_por_processo(self, case_id: int) -> list[Hearing]:
        """Lista audiências de um processo por data."""
        return await self._repo.get_by_case(case_id)

    async def audiencias_de_hoje(self) -> list[Hearing]:
        """Audiências não realizadas no dia corrente (fuso `TIMEZONE`)."""
        start, end = today_bounds()
        return await self._repo.get_pending_between(start, end)

    async def atualizar(self, hearing_id: int, dados: HearingUpdate) -> Hearing:
        """Atualiza audiência (ex.: marcar como realizada)."""
        await self.buscar(hearing_id)
        update_data = dados.model_dump(exclude_unset=True)
        if "case_id" in update_data:
            await require_case(self._db, update_data["case_id"])

        hearing = await self._repo.update(hearing_id, **update_data)
        if hearing is None:
            raise ResourceNotFoundError("Audiência", hearing_id)

        logger.info(
            "Audiência atualizada",
            hearing_id=hearing_id,
            campos=list(update_data.keys()),
        )
        return hearing

    async def excluir(self, hearing_id: int) -> None:
        """Exclui audiência."""
        if not await self._repo.delete(hearing_id):
            raise ResourceNotFoundError("Audiência", hearing_id)
        logger.info("Audiência excluída", hearing_id=hearing_id)
