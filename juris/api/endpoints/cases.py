"""
Endpoints de Processos.

Inclui as listagens por processo de atividades, audiências, documentos,
lançamentos e comunicações.
"""

from fastapi import APIRouter, Query, status

from juris.core.dependencies import DBSession, resolve_id
from juris.schemas.base import MessageResponse
from juris.schemas.case import (
    ActivityResponse,
    CaseCreate,
    CaseDetailResponse,
    CaseResponse,
    CaseUpdate,
    CaseWithClientResponse,
    HearingResponse,
)
from juris.schemas.communication import CommunicationResponse
from juris.schemas.document import DocumentResponse
from juris.schemas.financial import FinancialResponse
from juris.services.case_service import ActivityService, CaseService, HearingService
from juris.services.communication_service import CommunicationService
from juris.services.document_service import DocumentService
from juris.services.financial_service import FinancialService

router = APIRouter(prefix="/cases", tags=["Processos"])


@router.get("", response_model=list[CaseWithClientResponse])
async def listar_processos(
    db: DBSession,
    search: str | None = Query(
        None,
        description="Número do processo, autor, réu ou nome do cliente",
    ),
) -> list[CaseWithClientResponse]:
    """Lista processos com o cliente, alterados recentemente primeiro."""
    service = CaseService(db)
    rows = await service.pesquisar(search) if search else await service.listar()
    return [CaseWithClientResponse.from_row(case, client) for case, client in rows]


@router.post("", response_model=CaseResponse, status_code=status.HTTP_201_CREATED)
async def criar_processo(dados: CaseCreate, db: DBSession) -> CaseResponse:
    """
    Cria novo processo.

    Retorna 409 se o número já estiver cadastrado.
    """
    case = await CaseService(db).criar(dados)
    return CaseResponse.model_validate(case)


@router.get("/{case_id}", response_model=CaseDetailResponse)
async def obter_processo(case_id: str, db: DBSession) -> CaseDetailResponse:
    """Obtém processo com cliente e todos os registros vinculados."""
    relations = await CaseService(db).buscar_com_relacoes(resolve_id(case_id, "Processo"))
    return CaseDetailResponse.from_relations(relations)


@router.put("/{case_id}", response_model=CaseResponse)
async def atualizar_processo(
    case_id: str,
    dados: CaseUpdate,
    db: DBSession,
) -> CaseResponse:
    """Atualiza dados do processo."""
    case = await CaseService(db).atualizar(resolve_id(case_id, "Processo"), dados)
    return CaseResponse.model_validate(case)


@router.delete("/{case_id}", response_model=MessageResponse)
async def excluir_processo(case_id: str, db: DBSession) -> MessageResponse:
    """
    Exclui processo.

    Retorna 409 enquanto houver registros vinculados.
    """
    await CaseService(db).excluir(resolve_id(case_id, "Processo"))
    return MessageResponse(message="Processo excluído com sucesso")


# === REGISTROS DO PROCESSO ===

@router.get("/{case_id}/activities", response_model=list[ActivityResponse])
async def listar_atividades(case_id: str, db: DBSession) -> list[ActivityResponse]:
    """Atividades do processo por vencimento."""
    activities = await ActivityService(db).listar_por_processo(
        resolve_id(case_id, "Processo")
    )
    return [ActivityResponse.model_validate(a) for a in activities]


@router.get("/{case_id}/hearings", response_model=list[HearingResponse])
async def listar_audiencias(case_id: str, db: DBSession) -> list[HearingResponse]:
    """Audiências do processo por data."""
    hearings = await HearingService(db).listar_por_processo(resolve_id(case_id, "Processo"))
    return [HearingResponse.model_validate(h) for h in hearings]


@router.get("/{case_id}/documents", response_model=list[DocumentResponse])
async def listar_documentos(case_id: str, db: DBSession) -> list[DocumentResponse]:
    """Documentos do processo, mais recentes primeiro."""
    documents = await DocumentService(db).listar_por_processo(
        resolve_id(case_id, "Processo")
    )
    return [DocumentResponse.model_validate(d) for d in documents]


@router.get("/{case_id}/financial", response_model=list[FinancialResponse])
async def listar_lancamentos(case_id: str, db: DBSession) -> list[FinancialResponse]:
    """Lançamentos financeiros do processo."""
    entries = await FinancialService(db).listar_por_processo(resolve_id(case_id, "Processo"))
    return [FinancialResponse.model_validate(f) for f in entries]


@router.get("/{case_id}/communications", response_model=list[CommunicationResponse])
async def listar_comunicacoes(case_id: str, db: DBSession) -> list[CommunicationResponse]:
    """Comunicações do processo, mais recentes primeiro."""
    communications = await CommunicationService(db).listar_por_processo(
        resolve_id(case_id, "Processo")
    )
    return [CommunicationResponse.model_validate(c) for c in communications]
