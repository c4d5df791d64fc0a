"""
Testes para o histórico de comunicações.
"""
from datetime import datetime

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_communication_defaults_date(client: AsyncClient, make_case):
    """Sem `date`, a comunicação assume o instante atual."""
    case = await make_case()

    response = await client.post(
        "/api/communications",
        json={
            "caseId": case["id"],
            "clientId": case["clientId"],
            "type": "phone",
            "subject": "Andamento",
            "content": "Cliente informado da audiência.",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["type"] == "phone"
    assert datetime.fromisoformat(data["date"]).tzinfo is not None


@pytest.mark.asyncio
async def test_list_case_communications_newest_first(client: AsyncClient, make_case):
    """Comunicações do processo por data decrescente."""
    case = await make_case()
    for subject, date in (
        ("antiga", "2024-01-10T09:00:00Z"),
        ("recente", "2024-02-10T09:00:00Z"),
    ):
        await client.post(
            "/api/communications",
            json={
                "caseId": case["id"],
                "clientId": case["clientId"],
                "type": "email",
                "subject": subject,
                "date": date,
            },
        )

    response = await client.get(f"/api/cases/{case['id']}/communications")
    assert response.status_code == 200
    assert [c["subject"] for c in response.json()] == ["recente", "antiga"]


@pytest.mark.asyncio
async def test_communication_references(client: AsyncClient, make_case):
    """Processo e cliente precisam existir."""
    case = await make_case()

    response = await client.post(
        "/api/communications",
        json={"caseId": case["id"], "clientId": 999, "type": "letter"},
    )
    assert response.status_code == 409

    response = await client.post(
        "/api/communications",
        json={"caseId": case["id"], "clientId": case["clientId"], "type": "sms"},
    )
    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "type", "reason": "not_in_enum"}]


@pytest.mark.asyncio
async def test_update_and_delete_communication(client: AsyncClient, make_case):
    """Atualização parcial e exclusão."""
    case = await make_case()
    response = await client.post(
        "/api/communications",
        json={"caseId": case["id"], "clientId": case["clientId"], "type": "meeting"},
    )
    communication = response.json()

    response = await client.put(
        f"/api/communications/{communication['id']}",
        json={"content": "Reunião remarcada"},
    )
    assert response.status_code == 200
    assert response.json()["content"] == "Reunião remarcada"
    assert response.json()["type"] == "meeting"

    response = await client.delete(f"/api/communications/{communication['id']}")
    assert response.status_code == 200
    response = await client.get(f"/api/communications/{communication['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_client_with_communications_is_restricted(client: AsyncClient, make_case):
    """Cliente com comunicações não pode ser excluído."""
    case = await make_case()
    await client.post(
        "/api/communications",
        json={"caseId": case["id"], "clientId": case["clientId"], "type": "email"},
    )

    response = await client.delete(f"/api/clients/{case['clientId']}")
    assert response.status_code == 409
    assert "communications=1" in response.json()["message"]
