"""
Testes para as estatísticas do dashboard.
"""
from datetime import datetime, time, timedelta
from decimal import Decimal

import pytest
from httpx import AsyncClient

from juris.core.clock import utcnow


@pytest.mark.asyncio
async def test_dashboard_empty(client: AsyncClient):
    """Sem dados, contadores zerados e honorários "0"."""
    response = await client.get("/api/dashboard/stats")
    assert response.status_code == 200
    assert response.json() == {
        "activeProcesses": 0,
        "upcomingDeadlines": 0,
        "todayHearings": 0,
        "pendingFees": "0",
    }


@pytest.mark.asyncio
async def test_dashboard_stats(client: AsyncClient, make_case):
    """Indicadores agregados, com janela de 7 dias para prazos."""
    case = await make_case(status="ongoing")
    await make_case(status="ongoing")
    await make_case(status="suspended")
    await make_case(status="completed")

    now = utcnow()
    for days in (1, 5, 20):
        await client.post(
            "/api/activities",
            json={
                "caseId": case["id"],
                "type": "deadline",
                "title": f"{days} dias",
                "dueDate": (now + timedelta(days=days)).isoformat(),
            },
        )

    today = datetime.combine(now.date(), time(14, 30), tzinfo=now.tzinfo)
    await client.post(
        "/api/hearings",
        json={
            "caseId": case["id"],
            "title": "Hoje",
            "date": today.isoformat(),
            "type": "conciliation",
        },
    )

    for amount, status in (("1500.00", "pending"), ("1000.50", "pending"), ("300.00", "paid")):
        await client.post(
            "/api/financial",
            json={
                "caseId": case["id"],
                "type": "fee",
                "description": "Honorários",
                "amount": amount,
                "status": status,
            },
        )

    response = await client.get("/api/dashboard/stats")
    assert response.status_code == 200
    stats = response.json()
    assert stats["activeProcesses"] == 2
    assert stats["upcomingDeadlines"] == 2
    assert stats["todayHearings"] == 1
    assert Decimal(stats["pendingFees"]) == Decimal("2500.50")

    # A lista de prazos usa a janela de 30 dias
    response = await client.get("/api/activities/upcoming")
    assert len(response.json()) == 3
