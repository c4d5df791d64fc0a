"""
Endpoints Financeiros.
"""

from fastapi import APIRouter, status

from juris.core.dependencies import DBSession, resolve_id
from juris.schemas.base import MessageResponse
from juris.schemas.financial import FinancialCreate, FinancialResponse, FinancialUpdate
from juris.services.financial_service import FinancialService

router = APIRouter(prefix="/financial", tags=["Financeiro"])


@router.get("/pending", response_model=list[FinancialResponse])
async def lancamentos_pendentes(db: DBSession) -> list[FinancialResponse]:
    """Lançamentos pendentes por vencimento."""
    entries = await FinancialService(db).pendentes()
    return [FinancialResponse.model_validate(f) for f in entries]


@router.post("", response_model=FinancialResponse, status_code=status.HTTP_201_CREATED)
async def criar_lancamento(dados: FinancialCreate, db: DBSession) -> FinancialResponse:
    """Cria lançamento (honorário, custa ou indenização)."""
    entry = await FinancialService(db).criar(dados)
    return FinancialResponse.model_validate(entry)


@router.get("/{financial_id}", response_model=FinancialResponse)
async def obter_lancamento(financial_id: str, db: DBSession) -> FinancialResponse:
    """Obtém um lançamento."""
    entry = await FinancialService(db).buscar(resolve_id(financial_id, "Lançamento"))
    return FinancialResponse.model_validate(entry)


@router.put("/{financial_id}", response_model=FinancialResponse)
async def atualizar_lancamento(
    financial_id: str,
    dados: FinancialUpdate,
    db: DBSession,
) -> FinancialResponse:
    """Atualiza lançamento (ex.: `status=paid`)."""
    entry = await FinancialService(db).atualizar(
        resolve_id(financial_id, "Lançamento"), dados
    )
    return FinancialResponse.model_validate(entry)


@router.delete("/{financial_id}", response_model=MessageResponse)
async def excluir_lancamento(financial_id: str, db: DBSession) -> MessageResponse:
    """Exclui lançamento."""
    await FinancialService(db).excluir(resolve_id(financial_id, "Lançamento"))
    return MessageResponse(message="Lançamento excluído com sucesso")
