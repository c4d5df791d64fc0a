"""
Schemas de Processo, Atividade e Audiência.
"""

from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import Field, field_validator

from juris.models.case import ActivityPriority, ActivityType, CaseStatus, HearingType
from juris.models.client import Client
from juris.schemas.base import (
    BaseSchema,
    CreatedAtMixin,
    IDMixin,
    PartialSchema,
    UTCDatetime,
    reject_null,
)
from juris.schemas.client import ClientResponse
from juris.schemas.communication import CommunicationResponse
from juris.schemas.document import DocumentResponse
from juris.schemas.financial import FinancialResponse

if TYPE_CHECKING:
    from juris.models.case import Case
    from juris.repositories.case_repository import CaseRelations


# ==================== ATIVIDADE ====================

class ActivityBase(BaseSchema):
    """Campos base da atividade."""

    case_id: int
    type: ActivityType
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    due_date: UTCDatetime | None = None
    completed: bool = False
    priority: ActivityPriority = ActivityPriority.MEDIUM


class ActivityCreate(ActivityBase):
    """Schema para criação de atividade."""
    pass


class ActivityUpdate(PartialSchema):
    """Schema para atualização parcial de atividade."""

    case_id: int | None = None
    type: ActivityType | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    due_date: UTCDatetime | None = None
    completed: bool | None = None
    priority: ActivityPriority | None = None

    @field_validator("case_id", "type", "title", "completed", "priority", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class ActivityResponse(ActivityBase, IDMixin, CreatedAtMixin):
    """Schema de resposta da atividade."""
    pass


# ==================== AUDIÊNCIA ====================

class HearingBase(BaseSchema):
    """Campos base da audiência."""

    case_id: int
    title: str = Field(..., min_length=1, max_length=255)
    date: UTCDatetime
    location: str | None = Field(None, max_length=255)
    type: HearingType
    notes: str | None = None
    completed: bool = False


class HearingCreate(HearingBase):
    """Schema para agendamento de audiência."""
    pass


class HearingUpdate(PartialSchema):
    """Schema para atualização parcial de audiência."""

    case_id: int | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    date: UTCDatetime | None = None
    location: str | None = Field(None, max_length=255)
    type: HearingType | None = None
    notes: str | None = None
    completed: bool | None = None

    @field_validator("case_id", "title", "date", "type", "completed", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class HearingResponse(HearingBase, IDMixin, CreatedAtMixin):
    """Schema de resposta da audiência."""
    pass


# ==================== PROCESSO ====================

class CaseBase(BaseSchema):
    """Campos base do processo."""

    process_number: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Formato: NNNNNNN-DD.AAAA.J.TR.OOOO",
    )
    court: str = Field(..., min_length=1, max_length=100)
    client_id: int

    action_type: str = Field(..., min_length=1, max_length=255)
    plaintiff: str = Field(..., min_length=1, max_length=255)
    defendant: str = Field(..., min_length=1, max_length=255)

    case_value: Decimal | None = Field(None, ge=0, max_digits=15, decimal_places=2)
    status: CaseStatus = CaseStatus.ONGOING

    description: str | None = None
    notes: str | None = None


class CaseCreate(CaseBase):
    """Schema para criação de processo."""
    pass


class CaseUpdate(PartialSchema):
    """Schema para atualização parcial de processo."""

    process_number: str | None = Field(None, min_length=1, max_length=50)
    court: str | None = Field(None, min_length=1, max_length=100)
    client_id: int | None = None
    action_type: str | None = Field(None, min_length=1, max_length=255)
    plaintiff: str | None = Field(None, min_length=1, max_length=255)
    defendant: str | None = Field(None, min_length=1, max_length=255)
    case_value: Decimal | None = Field(None, ge=0, max_digits=15, decimal_places=2)
    status: CaseStatus | None = None
    description: str | None = None
    notes: str | None = None

    @field_validator(
        "process_number",
        "court",
        "client_id",
        "action_type",
        "plaintiff",
        "defendant",
        "status",
        mode="before",
    )
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class CaseResponse(CaseBase, IDMixin, CreatedAtMixin):
    """Schema de resposta do processo."""

    updated_at: UTCDatetime


class CaseWithClientResponse(CaseResponse):
    """
    Processo com o cliente embutido.

    `client` é nulo quando a chave estrangeira aponta para um cliente
    que não existe mais (left join).
    """

    client: ClientResponse | None = None

    @classmethod
    def from_row(cls, case: "Case", client: Client | None) -> "CaseWithClientResponse":
        return cls(
            **CaseResponse.model_validate(case).model_dump(),
            client=ClientResponse.model_validate(client) if client is not None else None,
        )


class CaseDetailResponse(CaseWithClientResponse):
    """Processo com cliente e todos os registros vinculados."""

    activities: list[ActivityResponse] = []
    hearings: list[HearingResponse] = []
    documents: list[DocumentResponse] = []
    financial: list[FinancialResponse] = []
    communications: list[CommunicationResponse] = []

    @classmethod
    def from_relations(cls, relations: "CaseRelations") -> "CaseDetailResponse":
        return cls(
            **CaseResponse.model_validate(relations.case).model_dump(),
            client=(
                ClientResponse.model_validate(relations.client)
                if relations.client is not None
                else None
            ),
            activities=[ActivityResponse.model_validate(a) for a in relations.activities],
            hearings=[HearingResponse.model_validate(h) for h in relations.hearings],
            documents=[DocumentResponse.model_validate(d) for d in relations.documents],
            financial=[FinancialResponse.model_validate(f) for f in relations.financial],
            communications=[
                CommunicationResponse.model_validate(c) for c in relations.communications
            ],
        )
