"""
Testes para a conversão de erros de validação.
"""
from decimal import Decimal

import pytest

from juris.core.exceptions import ValidationError
from juris.models.case import CaseStatus
from juris.schemas.case import CaseCreate, CaseUpdate
from juris.schemas.client import ClientUpdate
from juris.schemas.validation import field_name, reason_for, validate_payload


@pytest.mark.parametrize(
    ("error_type", "reason"),
    [
        ("missing", "required"),
        ("null_not_allowed", "required"),
        ("enum", "not_in_enum"),
        ("literal_error", "not_in_enum"),
        ("extra_forbidden", "unknown_field"),
        ("int_parsing", "wrong_type"),
        ("string_type", "wrong_type"),
        ("decimal_parsing", "wrong_type"),
        ("greater_than", "invalid"),
        ("value_error", "invalid"),
    ],
)
def test_reason_for(error_type: str, reason: str):
    """Tipos de erro do Pydantic viram motivos estáveis."""
    assert reason_for(error_type) == reason


def test_field_name_strips_location_root():
    """Prefixo body/query/path é removido do nome do campo."""
    assert field_name(("body", "processNumber")) == "processNumber"
    assert field_name(("query", "limit")) == "limit"
    assert field_name(("body",)) == "body"
    assert field_name(("items", 0, "name")) == "items.0.name"


def test_validate_payload_normalizes():
    """Payload válido volta tipado e com defaults."""
    case = validate_payload(
        CaseCreate,
        {
            "processNumber": "0001234-56.2024.8.26.0100",
            "clientId": "7",
            "court": "tjsp",
            "actionType": "Ação Cível",
            "plaintiff": "Ana Souza",
            "defendant": "Banco X",
            "caseValue": "25000.00",
        },
    )
    assert case.client_id == 7
    assert case.status is CaseStatus.ONGOING
    assert case.case_value == Decimal("25000.00")
    assert case.description is None


def test_validate_payload_enumerates_every_field():
    """Todos os campos violados aparecem, não só o primeiro."""
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(CaseCreate, {"status": "closed"})

    errors = exc_info.value.errors
    fields = {e["field"] for e in errors}
    assert fields == {
        "processNumber",
        "court",
        "clientId",
        "actionType",
        "plaintiff",
        "defendant",
        "status",
    }
    assert {"field": "status", "reason": "not_in_enum"} in errors


def test_partial_update_accepts_subset():
    """Atualização parcial guarda só os campos enviados."""
    update = validate_payload(CaseUpdate, {"notes": None, "status": "archived"})
    assert update.model_dump(exclude_unset=True) == {
        "notes": None,
        "status": CaseStatus.ARCHIVED,
    }


def test_partial_update_rejects_unknown_and_null():
    """Campo desconhecido e nulo em campo obrigatório."""
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(ClientUpdate, {"nome": "Ana", "name": None})

    assert sorted(exc_info.value.errors, key=lambda e: e["field"]) == [
        {"field": "name", "reason": "required"},
        {"field": "nome", "reason": "unknown_field"},
    ]
