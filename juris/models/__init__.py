"""
Modelos SQLAlchemy do Juris.

Importa todos os modelos para garantir que são registrados no metadata.
"""

from juris.models.case import (
    Activity,
    ActivityPriority,
    ActivityType,
    Case,
    CaseStatus,
    Hearing,
    HearingType,
)
from juris.models.client import Client
from juris.models.communication import Communication, CommunicationType
from juris.models.document import Document
from juris.models.financial import Financial, FinancialStatus, FinancialType

__all__ = [
    # Cliente
    "Client",
    # Processo
    "Case",
    "CaseStatus",
    "Activity",
    "ActivityType",
    "ActivityPriority",
    "Hearing",
    "HearingType",
    # Documento
    "Document",
    # Financeiro
    "Financial",
    "FinancialType",
    "FinancialStatus",
    # Comunicação
    "Communication",
    "CommunicationType",
]
