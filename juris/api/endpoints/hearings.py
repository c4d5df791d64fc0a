"""
Endpoints de Audiências.
"""

from fastapi import APIRouter, status

from juris.core.dependencies import DBSession, resolve_id
from juris.schemas.base import MessageResponse
from juris.schemas.case import HearingCreate, HearingResponse, HearingUpdate
from juris.services.case_service import HearingService

router = APIRouter(prefix="/hearings", tags=["Audiências"])


@router.get("", response_model=list[HearingResponse])
async def listar_audiencias(db: DBSession) -> list[HearingResponse]:
    """Lista todas as audiências por data."""
    hearings = await HearingService(db).listar()
    return [HearingResponse.model_validate(h) for h in hearings]


@router.get("/today", response_model=list[HearingResponse])
async def audiencias_de_hoje(db: DBSession) -> list[HearingResponse]:
    """Audiências de hoje ainda não realizadas."""
    hearings = await HearingService(db).audiencias_de_hoje()
    return [HearingResponse.model_validate(h) for h in hearings]


@router.post("", response_model=HearingResponse, status_code=status.HTTP_201_CREATED)
async def agendar_audiencia(dados: HearingCreate, db: DBSession) -> HearingResponse:
    """Agenda audiência."""
    hearing = await HearingService(db).criar(dados)
    return HearingResponse.model_validate(hearing)


@router.get("/{hearing_id}", response_model=HearingResponse)
async def obter_audiencia(hearing_id: str, db: DBSession) -> HearingResponse:
    """Obtém uma audiência."""
    hearing = await HearingService(db).buscar(resolve_id(hearing_id, "Audiência"))
    return HearingResponse.model_validate(hearing)


@router.put("/{hearing_id}", response_model=HearingResponse)
async def atualizar_audiencia(
    hearing_id: str,
    dados: HearingUpdate,
    db: DBSession,
) -> HearingResponse:
    """Atualiza audiência (ex.: `completed=true` após a realização)."""
    hearing = await HearingService(db).atualizar(resolve_id(hearing_id, "Audiência"), dados)
    return HearingResponse.model_validate(hearing)


@router.delete("/{hearing_id}", response_model=MessageResponse)
async def excluir_audiencia(hearing_id: str, db: DBSession) -> MessageResponse:
    """Exclui audiência."""
    await HearingService(db).excluir(resolve_id(hearing_id, "Audiência"))
    return MessageResponse(message="Audiência excluída com sucesso")
