"""
Endpoints de Comunicações.
"""

from fastapi import APIRouter, status

from juris.core.dependencies import DBSession, resolve_id
from juris.schemas.base import MessageResponse
from juris.schemas.communication import (
    CommunicationCreate,
    CommunicationResponse,
    CommunicationUpdate,
)
from juris.services.communication_service import CommunicationService

router = APIRouter(prefix="/communications", tags=["Comunicações"])


@router.post("", response_model=CommunicationResponse, status_code=status.HTTP_201_CREATED)
async def registrar_comunicacao(
    dados: CommunicationCreate,
    db: DBSession,
) -> CommunicationResponse:
    """Registra comunicação com o cliente."""
    communication = await CommunicationService(db).criar(dados)
    return CommunicationResponse.model_validate(communication)


@router.get("/{communication_id}", response_model=CommunicationResponse)
async def obter_comunicacao(communication_id: str, db: DBSession) -> CommunicationResponse:
    """Obtém uma comunicação."""
    communication = await CommunicationService(db).buscar(
        resolve_id(communication_id, "Comunicação")
    )
    return CommunicationResponse.model_validate(communication)


@router.put("/{communication_id}", response_model=CommunicationResponse)
async def atualizar_comunicacao(
    communication_id: str,
    dados: CommunicationUpdate,
    db: DBSession,
) -> CommunicationResponse:
    """Atualiza comunicação."""
    communication = await CommunicationService(db).atualizar(
        resolve_id(communication_id, "Comunicação"), dados
    )
    return CommunicationResponse.model_validate(communication)


@router.delete("/{communication_id}", response_model=MessageResponse)
async def excluir_comunicacao(communication_id: str, db: DBSession) -> MessageResponse:
    """Exclui comunicação."""
    await CommunicationService(db).excluir(resolve_id(communication_id, "Comunicação"))
    return MessageResponse(message="Comunicação excluída com sucesso")
