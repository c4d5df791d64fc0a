"""
Dependências injetáveis do FastAPI.

Define a sessão de banco de dados e a conversão de IDs de rota.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from juris.core.exceptions import ResourceNotFoundError
from juris.db.session import async_session_maker

# Maior valor de uma coluna INTEGER
MAX_ID = 2**31 - 1


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency que fornece uma sessão de banco de dados.

    Uso:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()


def resolve_id(raw: str, resource_type: str) -> int:
    """
    Converte o ID da rota em inteiro.

    IDs não numéricos (ou fora do intervalo) não podem existir, então
    resultam em 404 e não em erro de validação.
    """
    if not (raw.isascii() and raw.isdigit()):
        raise ResourceNotFoundError(resource_type, raw)
    value = int(raw)
    if value > MAX_ID:
        raise ResourceNotFoundError(resource_type, raw)
    return value


# Type aliases para facilitar uso nas rotas
DBSession = Annotated[AsyncSession, Depends(get_db)]
