"""
Configuração da sessão de banco de dados assíncrona.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from juris.core.config import settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite só aplica chaves estrangeiras com o pragma ligado por conexão."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Cria engine assíncrona.

    NullPool: cada sessão abre sua própria conexão, o que permite
    consultas paralelas em sessões distintas.
    """
    engine = create_async_engine(
        url,
        echo=echo,
        poolclass=NullPool,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory com o padrão do projeto."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# Engine assíncrona
engine = build_engine(str(settings.DATABASE_URL), echo=settings.DEBUG)

# Session factory
async_session_maker = build_session_maker(engine)
