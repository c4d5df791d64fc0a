"""
Testes para utilitários e helpers.
"""
from datetime import datetime, timedelta, timezone

import pytest

from juris.core import clock
from juris.core.config import settings
from juris.core.dependencies import resolve_id
from juris.core.exceptions import ResourceNotFoundError
from juris.models.case import Case, CaseStatus
from juris.repositories.case_repository import like_pattern
from juris.schemas.case import CaseWithClientResponse


def test_as_utc_treats_naive_as_utc():
    """Data sem fuso é interpretada como UTC."""
    naive = datetime(2024, 5, 1, 12, 0)
    assert clock.as_utc(naive) == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    local = datetime(2024, 5, 1, 9, 0, tzinfo=timezone(timedelta(hours=-3)))
    assert clock.as_utc(local) == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_today_bounds_utc():
    """Dia corrente semiaberto em UTC."""
    now = datetime(2024, 5, 1, 23, 59, tzinfo=timezone.utc)
    start, end = clock.today_bounds(now)
    assert start == datetime(2024, 5, 1, tzinfo=timezone.utc)
    assert end == datetime(2024, 5, 2, tzinfo=timezone.utc)


def test_today_bounds_uses_configured_timezone(monkeypatch):
    """O "hoje" segue o fuso configurado."""
    monkeypatch.setattr(settings, "TIMEZONE", "America/Sao_Paulo")

    # 01:30 UTC do dia 10 ainda é dia 9 em São Paulo (UTC-3)
    now = datetime(2024, 3, 10, 1, 30, tzinfo=timezone.utc)
    start, end = clock.today_bounds(now)
    assert start == datetime(2024, 3, 9, 3, 0, tzinfo=timezone.utc)
    assert end == datetime(2024, 3, 10, 3, 0, tzinfo=timezone.utc)


def test_window_from_now():
    """Janela fechada de N dias a partir de agora."""
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    assert clock.window_from_now(7, now) == (now, now + timedelta(days=7))


@pytest.mark.parametrize("raw", ["abc", "1.5", "-1", "", "١٢", "99999999999"])
def test_resolve_id_rejects_invalid(raw: str):
    """IDs inválidos resultam em recurso não encontrado."""
    with pytest.raises(ResourceNotFoundError):
        resolve_id(raw, "Processo")


def test_resolve_id():
    """ID numérico é convertido."""
    assert resolve_id("42", "Processo") == 42


def test_like_pattern_escapes_wildcards():
    """Curingas do LIKE são tratados literalmente."""
    assert like_pattern("50%_x") == "%50\\%\\_x%"
    assert like_pattern("a\\b") == "%a\\\\b%"


def test_case_without_client_serializes():
    """Processo órfão é serializado com client nulo."""
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    case = Case(
        id=1,
        process_number="0000001-00.2024.8.26.0100",
        court="tjsp",
        client_id=99,
        action_type="Ação Cível",
        plaintiff="A",
        defendant="B",
        status=CaseStatus.ONGOING,
        created_at=now,
        updated_at=now,
    )

    response = CaseWithClientResponse.from_row(case, None)
    data = response.model_dump(by_alias=True, mode="json")
    assert data["client"] is None
    assert data["clientId"] == 99
    assert data["processNumber"] == "0000001-00.2024.8.26.0100"
