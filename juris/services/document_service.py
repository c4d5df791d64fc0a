"""
Service de Documentos.

Apenas metadados: `filePath` é texto livre, sem armazenamento de arquivo.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from juris.core.exceptions import ResourceNotFoundError
from juris.models.document import Document
from juris.repositories.document_repository import DocumentRepository
from juris.schemas.document import DocumentCreate, DocumentUpdate
from juris.services.case_service import require_case

logger = structlog.get_logger()


class DocumentService:
    """Service para operações com Documento."""

    def __init__(self, db: AsyncSession):
        self._db = db
        self._repo = DocumentRepository(db)

    async def criar(self, dados: DocumentCreate) -> Document:
        """Registra documento em um processo."""
        await require_case(self._db, dados.case_id)

        document = await self._repo.create(**dados.model_dump())

        logger.info(
            "Documento registrado",
            document_id=document.id,
            case_id=document.case_id,
            type=document.type,
        )
        return document

    async def buscar(self, document_id: int) -> Document:
        """Busca documento por ID."""
        document = await self._repo.get_by_id(document_id)
        if document is None:
            raise ResourceNotFoundError("Documento", document_id)
        return document

    async def listar(self) -> list[Document]:
        """Lista todos os documentos, mais recentes primeiro."""
        return await self._repo.get_all()

    async def listar_por_processo(self, case_id: int) -> list[Document]:
        """Lista documentos de um processo."""
        return await self._repo.get_by_case(case_id)

    async def atualizar(self, document_id: int, dados: DocumentUpdate) -> Document:
        """Atualiza metadados do documento."""
        await self.buscar(document_id)
        update_data = dados.model_dump(exclude_unset=True)
        if "case_id" in update_data:
            await require_case(self._db, update_data["case_id"])

        document = await self._repo.update(document_id, **update_data)
        if document is None:
            raise ResourceNotFoundError("Documento", document_id)

        logger.info(
            "Documento atualizado",
            document_id=document_id,
            campos=list(update_data.keys()),
        )
        return document

    async def excluir(self, document_id: int) -> None:
        """Exclui registro do documento."""
        if not await self._repo.delete(document_id):
            raise ResourceNotFoundError("Documento", document_id)
        logger.info("Documento excluído", document_id=document_id)
