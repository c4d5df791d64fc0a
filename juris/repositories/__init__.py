"""Repositories - Data Access Layer."""

from juris.repositories.base import BaseRepository, classify_integrity_error, storage_errors
from juris.repositories.case_repository import (
    ActivityRepository,
    CaseRelations,
    CaseRepository,
    HearingRepository,
)
from juris.repositories.client_repository import ClientRepository
from juris.repositories.communication_repository import CommunicationRepository
from juris.repositories.document_repository import DocumentRepository
from juris.repositories.financial_repository import FinancialRepository

__all__ = [
    # Base
    "BaseRepository",
    "classify_integrity_error",
    "storage_errors",
    # Entidades
    "ClientRepository",
    "CaseRepository",
    "CaseRelations",
    "ActivityRepository",
    "HearingRepository",
    "DocumentRepository",
    "FinancialRepository",
    "CommunicationRepository",
]
