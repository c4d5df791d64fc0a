"""
Services Layer.

Camada de lógica de negócio do Juris.
"""

from juris.services.case_service import ActivityService, CaseService, HearingService
from juris.services.client_service import ClientService
from juris.services.communication_service import CommunicationService
from juris.services.dashboard_service import DashboardService
from juris.services.document_service import DocumentService
from juris.services.financial_service import FinancialService

__all__ = [
    "ActivityService",
    "CaseService",
    "ClientService",
    "CommunicationService",
    "DashboardService",
    "DocumentService",
    "FinancialService",
    "HearingService",
]
