"""
Endpoints de Atividades (prazos e tarefas).
"""

from fastapi import APIRouter, Query, status

from juris.core.config import settings
from juris.core.dependencies import DBSession, resolve_id
from juris.schemas.base import MessageResponse
from juris.schemas.case import ActivityCreate, ActivityResponse, ActivityUpdate
from juris.services.case_service import ActivityService

router = APIRouter(prefix="/activities", tags=["Atividades"])


@router.get("/upcoming", response_model=list[ActivityResponse])
async def proximos_prazos(
    db: DBSession,
    limit: int = Query(settings.UPCOMING_DEADLINES_LIMIT, ge=0),
) -> list[ActivityResponse]:
    """
    Prazos em aberto dos próximos dias.

    Apenas atividades `deadline` não concluídas, vencimento mais próximo
    primeiro.
    """
    activities = await ActivityService(db).proximos_prazos(limit)
    return [ActivityResponse.model_validate(a) for a in activities]


@router.post("", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
async def criar_atividade(dados: ActivityCreate, db: DBSession) -> ActivityResponse:
    """Cria atividade em um processo."""
    activity = await ActivityService(db).criar(dados)
    return ActivityResponse.model_validate(activity)


@router.get("/{activity_id}", response_model=ActivityResponse)
async def obter_atividade(activity_id: str, db: DBSession) -> ActivityResponse:
    """Obtém uma atividade."""
    activity = await ActivityService(db).buscar(resolve_id(activity_id, "Atividade"))
    return ActivityResponse.model_validate(activity)


@router.put("/{activity_id}", response_model=ActivityResponse)
async def atualizar_atividade(
    activity_id: str,
    dados: ActivityUpdate,
    db: DBSession,
) -> ActivityResponse:
    """Atualiza atividade."""
    activity = await ActivityService(db).atualizar(
        resolve_id(activity_id, "Atividade"), dados
    )
    return ActivityResponse.model_validate(activity)


@router.delete("/{activity_id}", response_model=MessageResponse)
async def excluir_atividade(activity_id: str, db: DBSession) -> MessageResponse:
    """Exclui atividade."""
    await ActivityService(db).excluir(resolve_id(activity_id, "Atividade"))
    return MessageResponse(message="Atividade excluída com sucesso")
