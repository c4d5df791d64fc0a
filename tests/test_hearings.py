"""
Testes para a agenda de audiências.
"""
from datetime import datetime, time, timedelta

import pytest
from httpx import AsyncClient

from juris.core.clock import utcnow


def _today_at(hour: int, minute: int) -> datetime:
    return datetime.combine(utcnow().date(), time(hour, minute), tzinfo=utcnow().tzinfo)


@pytest.mark.asyncio
async def test_today_hearings(client: AsyncClient, make_case):
    """Audiência de hoje aparece até ser marcada como realizada."""
    case = await make_case()

    response = await client.post(
        "/api/hearings",
        json={
            "caseId": case["id"],
            "title": "Audiência de instrução",
            "date": _today_at(14, 30).isoformat(),
            "type": "instruction",
            "location": "Fórum Central",
        },
    )
    assert response.status_code == 201
    hearing = response.json()
    assert hearing["completed"] is False

    tomorrow = _today_at(10, 0) + timedelta(days=1)
    await client.post(
        "/api/hearings",
        json={
            "caseId": case["id"],
            "title": "Amanhã",
            "date": tomorrow.isoformat(),
            "type": "judgment",
        },
    )

    response = await client.get("/api/hearings/today")
    assert response.status_code == 200
    assert [h["id"] for h in response.json()] == [hearing["id"]]

    response = await client.put(f"/api/hearings/{hearing['id']}", json={"completed": True})
    assert response.status_code == 200

    response = await client.get("/api/hearings/today")
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_hearings_by_date(client: AsyncClient, make_case):
    """Listagem geral e por processo em ordem de data."""
    case = await make_case()
    for title, date in (
        ("segunda", "2030-03-02T10:00:00Z"),
        ("primeira", "2030-03-01T10:00:00Z"),
    ):
        await client.post(
            "/api/hearings",
            json={"caseId": case["id"], "title": title, "date": date, "type": "conciliation"},
        )

    response = await client.get("/api/hearings")
    assert [h["title"] for h in response.json()] == ["primeira", "segunda"]

    response = await client.get(f"/api/cases/{case['id']}/hearings")
    assert [h["title"] for h in response.json()] == ["primeira", "segunda"]


@pytest.mark.asyncio
async def test_hearing_date_is_normalized_to_utc(client: AsyncClient, make_case):
    """Datas com fuso são gravadas e devolvidas em UTC."""
    case = await make_case()

    response = await client.post(
        "/api/hearings",
        json={
            "caseId": case["id"],
            "title": "Audiência",
            "date": "2030-03-01T10:00:00-03:00",
            "type": "conciliation",
        },
    )
    date = datetime.fromisoformat(response.json()["date"])
    assert date == datetime.fromisoformat("2030-03-01T13:00:00+00:00")


@pytest.mark.asyncio
async def test_hearing_requires_date(client: AsyncClient, make_case):
    """Data obrigatória e não anulável."""
    case = await make_case()

    response = await client.post(
        "/api/hearings",
        json={"caseId": case["id"], "title": "Sem data", "type": "conciliation"},
    )
    assert response.status_code == 400
    assert {"field": "date", "reason": "required"} in response.json()["errors"]

    response = await client.post(
        "/api/hearings",
        json={
            "caseId": case["id"],
            "title": "Audiência",
            "date": "2030-03-01T10:00:00Z",
            "type": "conciliation",
        },
    )
    hearing_id = response.json()["id"]
    response = await client.put(f"/api/hearings/{hearing_id}", json={"date": None})
    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "date", "reason": "required"}]


@pytest.mark.asyncio
async def test_hearing_not_found(client: AsyncClient):
    """Audiência inexistente."""
    assert (await client.get("/api/hearings/999")).status_code == 404
    assert (await client.put("/api/hearings/999", json={"completed": True})).status_code == 404
    assert (await client.delete("/api/hearings/999")).status_code == 404
