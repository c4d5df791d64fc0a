"""
Endpoints de Clientes.
"""

from fastapi import APIRouter, status

from juris.core.dependencies import DBSession, resolve_id
from juris.schemas.base import MessageResponse
from juris.schemas.case import CaseResponse
from juris.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from juris.services.case_service import CaseService
from juris.services.client_service import ClientService

router = APIRouter(prefix="/clients", tags=["Clientes"])


@router.get("", response_model=list[ClientResponse])
async def listar_clientes(db: DBSession) -> list[ClientResponse]:
    """Lista clientes em ordem alfabética."""
    clients = await ClientService(db).listar()
    return [ClientResponse.model_validate(c) for c in clients]


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def criar_cliente(dados: ClientCreate, db: DBSession) -> ClientResponse:
    """Cria novo cliente."""
    client = await ClientService(db).criar(dados)
    return ClientResponse.model_validate(client)


@router.get("/{client_id}", response_model=ClientResponse)
async def obter_cliente(client_id: str, db: DBSession) -> ClientResponse:
    """Obtém detalhes de um cliente."""
    client = await ClientService(db).buscar(resolve_id(client_id, "Cliente"))
    return ClientResponse.model_validate(client)


@router.get("/{client_id}/cases", response_model=list[CaseResponse])
async def listar_processos_do_cliente(client_id: str, db: DBSession) -> list[CaseResponse]:
    """Lista processos de um cliente."""
    cases = await CaseService(db).listar_por_cliente(resolve_id(client_id, "Cliente"))
    return [CaseResponse.model_validate(c) for c in cases]


@router.put("/{client_id}", response_model=ClientResponse)
async def atualizar_cliente(
    client_id: str,
    dados: ClientUpdate,
    db: DBSession,
) -> ClientResponse:
    """Atualiza dados de um cliente."""
    client = await ClientService(db).atualizar(resolve_id(client_id, "Cliente"), dados)
    return ClientResponse.model_validate(client)


@router.delete("/{client_id}", response_model=MessageResponse)
async def excluir_cliente(client_id: str, db: DBSession) -> MessageResponse:
    """
    Exclui um cliente.

    Retorna 409 se ainda houver processos ou comunicações vinculados.
    """
    await ClientService(db).excluir(resolve_id(client_id, "Cliente"))
    return MessageResponse(message="Cliente excluído com sucesso")
