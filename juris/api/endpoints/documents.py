"""
Endpoints de Documentos.

Somente metadados; o upload do arquivo não passa por esta API.
"""

from fastapi import APIRouter, status

from juris.core.dependencies import DBSession, resolve_id
from juris.schemas.base import MessageResponse
from juris.schemas.document import DocumentCreate, DocumentResponse, DocumentUpdate
from juris.services.document_service import DocumentService

router = APIRouter(prefix="/documents", tags=["Documentos"])


@router.get("", response_model=list[DocumentResponse])
async def listar_documentos(db: DBSession) -> list[DocumentResponse]:
    """Lista documentos, mais recentes primeiro."""
    documents = await DocumentService(db).listar()
    return [DocumentResponse.model_validate(d) for d in documents]


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def registrar_documento(dados: DocumentCreate, db: DBSession) -> DocumentResponse:
    """Registra documento em um processo."""
    document = await DocumentService(db).criar(dados)
    return DocumentResponse.model_validate(document)


@router.get("/{document_id}", response_model=DocumentResponse)
async def obter_documento(document_id: str, db: DBSession) -> DocumentResponse:
    """Obtém metadados de um documento."""
    document = await DocumentService(db).buscar(resolve_id(document_id, "Documento"))
    return DocumentResponse.model_validate(document)


@router.put("/{document_id}", response_model=DocumentResponse)
async def atualizar_documento(
    document_id: str,
    dados: DocumentUpdate,
    db: DBSession,
) -> DocumentResponse:
    """Atualiza metadados do documento."""
    document = await DocumentService(db).atualizar(
        resolve_id(document_id, "Documento"), dados
    )
    return DocumentResponse.model_validate(document)


@router.delete("/{document_id}", response_model=MessageResponse)
async def excluir_documento(document_id: str, db: DBSession) -> MessageResponse:
    """Exclui registro do documento."""
    await DocumentService(db).excluir(resolve_id(document_id, "Documento"))
    return MessageResponse(message="Documento excluído com sucesso")
