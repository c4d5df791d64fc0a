"""
Repository de Processo, Atividade e Audiência.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from juris.core.clock import utcnow
from juris.models.case import Activity, ActivityType, Case, CaseStatus, Hearing
from juris.models.client import Client
from juris.models.communication import Communication
from juris.models.document import Document
from juris.models.financial import Financial
from juris.repositories.base import BaseRepository, storage_errors


def like_pattern(text: str) -> str:
    """Padrão de substring para LIKE com `%`, `_` e `\\` tratados literalmente."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


@dataclass
class CaseRelations:
    """Processo com cliente e registros vinculados."""

    case: Case
    client: Client | None
    activities: list[Activity] = field(default_factory=list)
    hearings: list[Hearing] = field(default_factory=list)
    documents: list[Document] = field(default_factory=list)
    financial: list[Financial] = field(default_factory=list)
    communications: list[Communication] = field(default_factory=list)


class CaseRepository(BaseRepository[Case]):
    """Repository para operações com Processo."""

    def __init__(self, db: AsyncSession):
        super().__init__(Case, db)

    def ordering(self) -> list[Any]:
        return [Case.updated_at.desc(), Case.id.desc()]

    def _with_client(self) -> Select:
        # Left join: processo órfão volta com client=None
        return select(Case, Client).outerjoin(Client, Case.client_id == Client.id)

    async def get_all_with_client(self) -> list[tuple[Case, Client | None]]:
        """Lista processos com o cliente de cada um."""
        async with storage_errors(self.db, "list_cases_with_client"):
            result = await self.db.execute(
                self._with_client().order_by(*self.ordering())
            )
            return [(case, client) for case, client in result.all()]

    async def get_with_client(self, id: int) -> tuple[Case, Client | None] | None:
        """Busca processo com o cliente."""
        async with storage_errors(self.db, "get_case_with_client"):
            result = await self.db.execute(self._with_client().where(Case.id == id))
            row = result.one_or_none()
        if row is None:
            return None
        return row[0], row[1]

    async def search(self, text: str) -> list[tuple[Case, Client | None]]:
        """
        Busca por substring (sem diferenciar maiúsculas) no número do
        processo, autor, réu ou nome do cliente.
        """
        pattern = like_pattern(text)
        async with storage_errors(self.db, "search_cases"):
            result = await self.db.execute(
                self._with_client()
                .where(
                    or_(
                        Case.process_number.ilike(pattern, escape="\\"),
                        Case.plaintiff.ilike(pattern, escape="\\"),
                        Case.defendant.ilike(pattern, escape="\\"),
                        Client.name.ilike(pattern, escape="\\"),
                    )
                )
                .order_by(*self.ordering())
            )
            return [(case, client) for case, client in result.all()]

    async def get_by_process_number(self, process_number: str) -> Case | None:
        """Busca processo pelo número."""
        async with storage_errors(self.db, "get_case_by_number"):
            result = await self.db.execute(
                select(Case).where(Case.process_number == process_number)
            )
            return result.scalar_one_or_none()

    async def get_by_client(self, client_id: int) -> list[Case]:
        """Lista processos de um cliente."""
        return await self.get_all(Case.client_id == client_id)

    async def count_by_status(self, status: CaseStatus) -> int:
        """Conta processos em determinada situação."""
        return await self.count(Case.status == status)

    async def update(self, id: int, **kwargs: Any) -> Case | None:
        """Atualiza processo; `updated_at` sempre avança, mesmo sem alterações."""
        case = await self.get_by_id(id)
        if case is None:
            return None
        kwargs["updated_at"] = max(utcnow(), case.updated_at + timedelta(microseconds=1))
        return await self._apply(case, **kwargs)

    async def get_with_relations(self, id: int) -> CaseRelations | None:
        """
        Busca processo com cliente, atividades, audiências, documentos,
        lançamentos e comunicações.

        As cinco listas são lidas em paralelo, cada uma em sessão própria.
        Se uma leitura falhar, as outras são canceladas.
        """
        row = await self.get_with_client(id)
        if row is None:
            return None
        case, client = row

        queries = [
            select(Activity)
            .where(Activity.case_id == id)
            .order_by(Activity.created_at.desc(), Activity.id.desc()),
            select(Hearing)
            .where(Hearing.case_id == id)
            .order_by(Hearing.date.desc(), Hearing.id.desc()),
            select(Document)
            .where(Document.case_id == id)
            .order_by(Document.uploaded_at.desc(), Document.id.desc()),
            select(Financial)
            .where(Financial.case_id == id)
            .order_by(Financial.created_at.desc(), Financial.id.desc()),
            select(Communication)
            .where(Communication.case_id == id)
            .order_by(Communication.date.desc(), Communication.id.desc()),
        ]

        async with storage_errors(self.db, "get_case_relations"):
            try:
                async with asyncio.TaskGroup() as tg:
                    tasks = [tg.create_task(self._fetch(query)) for query in queries]
            except ExceptionGroup as group:
                raise group.exceptions[0]

        activities, hearings, documents, financial, communications = (
            task.result() for task in tasks
        )

        return CaseRelations(
            case=case,
            client=client,
            activities=activities,
            hearings=hearings,
            documents=documents,
            financial=financial,
            communications=communications,
        )

    async def _fetch(self, query: Select) -> list[Any]:
        async with AsyncSession(bind=self.db.bind, expire_on_commit=False) as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def count_dependents(self, case_id: int) -> dict[str, int]:
        """Conta registros que referenciam o processo."""
        children = {
            "activities": Activity,
            "hearings": Hearing,
            "documents": Document,
            "financial": Financial,
            "communications": Communication,
        }
        async with storage_errors(self.db, "count_case_dependents"):
            result = await self.db.execute(
                select(
                    *(
                        select(func.count())
                        .select_from(model)
                        .where(model.case_id == case_id)
                        .scalar_subquery()
                        .label(name)
                        for name, model in children.items()
                    )
                )
            )
            counts = result.one()._mapping
        return {name: count for name, count in counts.items() if count}


class ActivityRepository(BaseRepository[Activity]):
    """Repository para operações com Atividade."""

    def __init__(self, db: AsyncSession):
        super().__init__(Activity, db)

    def ordering(self) -> list[Any]:
        return [Activity.due_date.asc().nulls_last(), Activity.id.asc()]

    async def get_by_case(self, case_id: int) -> list[Activity]:
        """Lista atividades de um processo por vencimento."""
        return await self.get_all(Activity.case_id == case_id)

    def _open_deadlines(self, start: datetime, end: datetime) -> list[Any]:
        return [
            Activity.type == ActivityType.DEADLINE,
            Activity.completed == False,  # noqa: E712
            Activity.due_date >= start,
            Activity.due_date <= end,
        ]

    async def get_upcoming_deadlines(
        self,
        start: datetime,
        end: datetime,
        limit: int,
    ) -> list[Activity]:
        """Prazos em aberto que vencem em [start, end], mais próximos primeiro."""
        async with storage_errors(self.db, "list_upcoming_deadlines"):
            result = await self.db.execute(
                select(Activity)
                .where(*self._open_deadlines(start, end))
                .order_by(Activity.due_date.asc(), Activity.id.asc())
                .limit(limit)
            )
            return list(result.scalars().all())

    async def count_deadlines_between(self, start: datetime, end: datetime) -> int:
        """Conta prazos em aberto que vencem em [start, end]."""
        return await self.count(*self._open_deadlines(start, end))


class HearingRepository(BaseRepository[Hearing]):
    """Repository para operações com Audiência."""

    def __init__(self, db: AsyncSession):
        super().__init__(Hearing, db)

    def ordering(self) -> list[Any]:
        return [Hearing.date.asc(), Hearing.id.asc()]

    async def get_by_case(self, case_id: int) -> list[Hearing]:
        """Lista audiências de um processo por data."""
        return await self.get_all(Hearing.case_id == case_id)

    def _pending_between(self, start: datetime, end: datetime) -> list[Any]:
        return [
            Hearing.date >= start,
            Hearing.date < end,
            Hearing.completed == False,  # noqa: E712
        ]

    async def get_pending_between(self, start: datetime, end: datetime) -> list[Hearing]:
        """Audiências não realizadas em [start, end)."""
        return await self.get_all(*self._pending_between(start, end))

    async def count_pending_between(self, start: datetime, end: datetime) -> int:
        """Conta audiências não realizadas em [start, end)."""
        return await self.count(*self._pending_between(start, end))
