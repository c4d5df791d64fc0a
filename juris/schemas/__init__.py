"""Schemas Pydantic para validação de request/response."""

from juris.schemas.base import (
    BaseSchema,
    CreatedAtMixin,
    ErrorResponse,
    FieldError,
    IDMixin,
    MessageResponse,
    PartialSchema,
)
from juris.schemas.case import (
    ActivityCreate,
    ActivityResponse,
    ActivityUpdate,
    CaseCreate,
    CaseDetailResponse,
    CaseResponse,
    CaseUpdate,
    CaseWithClientResponse,
    HearingCreate,
    HearingResponse,
    HearingUpdate,
)
from juris.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from juris.schemas.communication import (
    CommunicationCreate,
    CommunicationResponse,
    CommunicationUpdate,
)
from juris.schemas.dashboard import DashboardStats
from juris.schemas.document import DocumentCreate, DocumentResponse, DocumentUpdate
from juris.schemas.financial import FinancialCreate, FinancialResponse, FinancialUpdate
from juris.schemas.validation import field_errors, validate_payload

__all__ = [
    # Base
    "BaseSchema",
    "PartialSchema",
    "IDMixin",
    "CreatedAtMixin",
    "MessageResponse",
    "FieldError",
    "ErrorResponse",
    "field_errors",
    "validate_payload",
    # Cliente
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    # Processo
    "CaseCreate",
    "CaseUpdate",
    "CaseResponse",
    "CaseWithClientResponse",
    "CaseDetailResponse",
    # Atividade
    "ActivityCreate",
    "ActivityUpdate",
    "ActivityResponse",
    # Audiência
    "HearingCreate",
    "HearingUpdate",
    "HearingResponse",
    # Documento
    "DocumentCreate",
    "DocumentUpdate",
    "DocumentResponse",
    # Financeiro
    "FinancialCreate",
    "FinancialUpdate",
    "FinancialResponse",
    # Comunicação
    "CommunicationCreate",
    "CommunicationUpdate",
    "CommunicationResponse",
    # Dashboard
    "DashboardStats",
]
