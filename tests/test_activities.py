"""
Testes para atividades e prazos.
"""
from datetime import timedelta

import pytest
from httpx import AsyncClient

from juris.core.clock import utcnow


def _iso(days: float) -> str:
    return (utcnow() + timedelta(days=days)).isoformat()


@pytest.mark.asyncio
async def test_create_activity_defaults(client: AsyncClient, make_case):
    """Atividade nasce pendente com prioridade média."""
    case = await make_case()

    response = await client.post(
        "/api/activities",
        json={"caseId": case["id"], "type": "deadline", "title": "Contestação"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["completed"] is False
    assert data["priority"] == "medium"
    assert data["dueDate"] is None

    response = await client.get(f"/api/activities/{data['id']}")
    assert response.json() == data


@pytest.mark.asyncio
async def test_create_activity_invalid_payload(client: AsyncClient, make_case):
    """Tipo fora do enum e prioridade inválida."""
    case = await make_case()

    response = await client.post(
        "/api/activities",
        json={"caseId": case["id"], "type": "meeting", "title": "X", "priority": "critical"},
    )
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert {"field": "type", "reason": "not_in_enum"} in errors
    assert {"field": "priority", "reason": "not_in_enum"} in errors


@pytest.mark.asyncio
async def test_create_activity_unknown_case(client: AsyncClient):
    """Atividade em processo inexistente."""
    response = await client.post(
        "/api/activities",
        json={"caseId": 999, "type": "deadline", "title": "X"},
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_upcoming_deadlines_window(client: AsyncClient, make_case):
    """Só prazos em aberto dos próximos 30 dias, mais próximos primeiro."""
    case = await make_case()

    async def create(title: str, days: float, **extra):
        response = await client.post(
            "/api/activities",
            json={
                "caseId": case["id"],
                "type": "deadline",
                "title": title,
                "dueDate": _iso(days),
                **extra,
            },
        )
        assert response.status_code == 201
        return response.json()

    await create("20 dias", 20)
    await create("1 dia", 1)
    await create("5 dias", 5)
    await create("40 dias", 40)
    await create("vencido", -1)
    await create("concluído", 2, completed=True)
    await create("petição", 3, type="petition")

    response = await client.get("/api/activities/upcoming")
    assert response.status_code == 200
    assert [a["title"] for a in response.json()] == ["1 dia", "5 dias", "20 dias"]

    response = await client.get("/api/activities/upcoming", params={"limit": 2})
    assert [a["title"] for a in response.json()] == ["1 dia", "5 dias"]


@pytest.mark.asyncio
async def test_upcoming_deadlines_limit(client: AsyncClient, make_case):
    """`limit` corta a lista; zero devolve vazio e não há teto fixo."""
    case = await make_case()
    for n in range(12):
        response = await client.post(
            "/api/activities",
            json={
                "caseId": case["id"],
                "type": "deadline",
                "title": f"Prazo {n}",
                "dueDate": _iso(n + 1),
            },
        )
        assert response.status_code == 201

    response = await client.get("/api/activities/upcoming")
    assert len(response.json()) == 10

    response = await client.get("/api/activities/upcoming", params={"limit": 150})
    assert response.status_code == 200
    assert len(response.json()) == 12

    response = await client.get("/api/activities/upcoming", params={"limit": 0})
    assert response.status_code == 200
    assert response.json() == []

    response = await client.get("/api/activities/upcoming", params={"limit": "abc"})
    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "limit", "reason": "wrong_type"}]


@pytest.mark.asyncio
async def test_complete_activity_leaves_upcoming(client: AsyncClient, make_case):
    """Prazo concluído sai da lista de próximos prazos."""
    case = await make_case()
    response = await client.post(
        "/api/activities",
        json={"caseId": case["id"], "type": "deadline", "title": "Recurso", "dueDate": _iso(2)},
    )
    activity = response.json()

    response = await client.put(f"/api/activities/{activity['id']}", json={"completed": True})
    assert response.status_code == 200
    assert response.json()["completed"] is True
    assert response.json()["title"] == "Recurso"

    response = await client.get("/api/activities/upcoming")
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_case_activities_by_due_date(client: AsyncClient, make_case):
    """Atividades do processo ordenadas por vencimento (sem data no fim)."""
    case = await make_case()
    other = await make_case()
    for title, due in (("sem data", None), ("depois", _iso(10)), ("antes", _iso(1))):
        await client.post(
            "/api/activities",
            json={"caseId": case["id"], "type": "petition", "title": title, "dueDate": due},
        )
    await client.post(
        "/api/activities",
        json={"caseId": other["id"], "type": "petition", "title": "outro processo"},
    )

    response = await client.get(f"/api/cases/{case['id']}/activities")
    assert response.status_code == 200
    assert [a["title"] for a in response.json()] == ["antes", "depois", "sem data"]


@pytest.mark.asyncio
async def test_delete_activity(client: AsyncClient, make_case):
    """Exclusão seguida de busca resulta em 404."""
    case = await make_case()
    response = await client.post(
        "/api/activities",
        json={"caseId": case["id"], "type": "document", "title": "Juntada"},
    )
    activity_id = response.json()["id"]

    assert (await client.delete(f"/api/activities/{activity_id}")).status_code == 200
    assert (await client.get(f"/api/activities/{activity_id}")).status_code == 404
    assert (await client.delete(f"/api/activities/{activity_id}")).status_code == 404
