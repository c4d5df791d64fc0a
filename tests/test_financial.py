"""
Testes para lançamentos financeiros.
"""
from decimal import Decimal

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_financial_entry(client: AsyncClient, make_case):
    """Lançamento nasce pendente e o valor é decimal exato."""
    case = await make_case()

    response = await client.post(
        "/api/financial",
        json={
            "caseId": case["id"],
            "type": "fee",
            "description": "Honorários iniciais",
            "amount": "1500.50",
        },
    )
    assert response.status_code == 201
    entry = response.json()
    assert entry["status"] == "pending"
    assert Decimal(entry["amount"]) == Decimal("1500.50")

    response = await client.get(f"/api/financial/{entry['id']}")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_financial_amount_validation(client: AsyncClient, make_case):
    """Valor obrigatório, positivo e com até duas casas."""
    case = await make_case()
    base = {"caseId": case["id"], "type": "cost", "description": "Custas"}

    response = await client.post("/api/financial", json=base)
    assert {"field": "amount", "reason": "required"} in response.json()["errors"]

    response = await client.post("/api/financial", json={**base, "amount": "-10"})
    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "amount", "reason": "invalid"}]

    response = await client.post("/api/financial", json={**base, "amount": "10.123"})
    assert response.status_code == 400

    response = await client.post("/api/financial", json={**base, "amount": "dez"})
    assert response.json()["errors"] == [{"field": "amount", "reason": "wrong_type"}]


@pytest.mark.asyncio
async def test_pending_fees_by_due_date(client: AsyncClient, make_case):
    """Pendentes em ordem de vencimento; pagos ficam de fora."""
    case = await make_case()

    async def create(description: str, due: str | None, status: str = "pending"):
        response = await client.post(
            "/api/financial",
            json={
                "caseId": case["id"],
                "type": "fee",
                "description": description,
                "amount": "100.00",
                "status": status,
                "dueDate": due,
            },
        )
        assert response.status_code == 201
        return response.json()

    await create("sem vencimento", None)
    await create("março", "2030-03-01T00:00:00Z")
    await create("janeiro", "2030-01-01T00:00:00Z")
    paid = await create("pago", "2029-12-01T00:00:00Z", status="paid")

    response = await client.get("/api/financial/pending")
    assert response.status_code == 200
    assert [f["description"] for f in response.json()] == ["janeiro", "março", "sem vencimento"]

    response = await client.put(
        f"/api/financial/{paid['id']}",
        json={"status": "pending", "paidDate": None},
    )
    assert response.json()["status"] == "pending"

    response = await client.get("/api/financial/pending")
    assert response.json()[0]["description"] == "pago"


@pytest.mark.asyncio
async def test_list_case_financial(client: AsyncClient, make_case):
    """Lançamentos do processo, mais recentes primeiro."""
    case = await make_case()
    for description in ("primeiro", "segundo"):
        await client.post(
            "/api/financial",
            json={
                "caseId": case["id"],
                "type": "compensation",
                "description": description,
                "amount": "10.00",
            },
        )

    response = await client.get(f"/api/cases/{case['id']}/financial")
    assert [f["description"] for f in response.json()] == ["segundo", "primeiro"]


@pytest.mark.asyncio
async def test_delete_financial_entry(client: AsyncClient, make_case):
    """Exclusão de lançamento."""
    case = await make_case()
    response = await client.post(
        "/api/financial",
        json={"caseId": case["id"], "type": "fee", "description": "X", "amount": "1.00"},
    )
    entry_id = response.json()["id"]

    assert (await client.delete(f"/api/financial/{entry_id}")).status_code == 200
    assert (await client.get(f"/api/financial/{entry_id}")).status_code == 404
