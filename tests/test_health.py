"""
Testes para os endpoints de health check.
"""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Testa endpoint de health check."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


@pytest.mark.asyncio
async def test_root_health_check(client: AsyncClient):
    """Health check fora do prefixo da API."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_readiness_checks_database(client: AsyncClient):
    """Readiness executa SELECT 1 no banco."""
    response = await client.get("/api/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["database"] == "ok"


@pytest.mark.asyncio
async def test_request_id_header(client: AsyncClient):
    """Toda resposta carrega X-Request-ID."""
    response = await client.get("/api/health")
    assert len(response.headers["x-request-id"]) == 8


@pytest.mark.asyncio
async def test_unknown_route_uses_error_body(client: AsyncClient):
    """Rotas inexistentes respondem 404 no formato {message}."""
    response = await client.get("/api/nao-existe")
    assert response.status_code == 404
    assert "message" in response.json()
