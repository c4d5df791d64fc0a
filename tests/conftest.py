"""
Pytest fixtures para testes do Juris.

Cada teste usa um banco SQLite próprio (arquivo em tmp_path), com as
tabelas criadas a partir do metadata.
"""
from typing import Any, AsyncGenerator, Awaitable, Callable

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from juris.core.dependencies import get_db
from juris.db.base import Base
from juris.db.session import build_engine, build_session_maker
from juris.main import app

JSON = dict[str, Any]


@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Engine SQLite com o schema criado."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'juris_test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Cria sessão de banco de dados para cada teste."""
    async with build_session_maker(test_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def client(test_engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP com uma sessão nova por requisição."""
    session_maker = build_session_maker(test_engine)

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def make_client(client: AsyncClient) -> Callable[..., Awaitable[JSON]]:
    """Factory de clientes via API."""

    async def _make(**overrides: Any) -> JSON:
        payload = {"name": "Ana Souza", "email": "ana@email.com", **overrides}
        response = await client.post("/api/clients", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest_asyncio.fixture
async def make_case(
    client: AsyncClient,
    make_client: Callable[..., Awaitable[JSON]],
) -> Callable[..., Awaitable[JSON]]:
    """Factory de processos via API (cria o cliente se `clientId` não vier)."""
    counter = {"n": 0}

    async def _make(**overrides: Any) -> JSON:
        counter["n"] += 1
        if "clientId" not in overrides:
            overrides["clientId"] = (await make_client())["id"]
        payload = {
            "processNumber": f"{counter['n']:07d}-56.2024.8.26.0100",
            "court": "tjsp",
            "actionType": "Ação Cível",
            "plaintiff": "Ana Souza",
            "defendant": "Banco X",
            "status": "ongoing",
            **overrides,
        }
        response = await client.post("/api/cases", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
