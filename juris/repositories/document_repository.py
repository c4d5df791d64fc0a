"""
Repository de Documentos.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from juris.models.document import Document
from juris.repositories.base import BaseRepository


class DocumentRepository(BaseRepository[Document]):
    """Repository para metadados de documentos."""

    def __init__(self, db: AsyncSession):
        super().__init__(Document, db)

    def ordering(self) -> list[Any]:
        return [Document.uploaded_at.desc(), Document.id.desc()]

    async def get_by_case(self, case_id: int) -> list[Document]:
        """Lista documentos de um processo, mais recentes primeiro."""
        return await self.get_all(Document.case_id == case_id)
