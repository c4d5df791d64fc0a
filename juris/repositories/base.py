"""
Repository base com operações CRUD genéricas.

Toda chamada ao banco passa por `storage_errors`, que desfaz a transação
e converte falhas do SQLAlchemy nas exceções da aplicação.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, TypeVar

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from juris.core.exceptions import ConstraintError, StorageError
from juris.db.base import Base

logger = structlog.get_logger()

ModelType = TypeVar("ModelType", bound=Base)

# SQLSTATE (PostgreSQL)
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

# Mensagens do SQLite
_SQLITE_UNIQUE = "UNIQUE constraint failed"
_SQLITE_FOREIGN_KEY = "FOREIGN KEY constraint failed"


def _sqlstate(exc: IntegrityError) -> str | None:
    """Extrai o SQLSTATE do erro do driver, quando disponível."""
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return str(code)
    return getattr(getattr(orig, "__cause__", None), "sqlstate", None)


def classify_integrity_error(exc: IntegrityError) -> ConstraintError:
    """Converte `IntegrityError` em `ConstraintError` (unicidade ou chave estrangeira)."""
    code = _sqlstate(exc)
    text = str(exc.orig)

    if code == UNIQUE_VIOLATION or _SQLITE_UNIQUE in text:
        return ConstraintError(
            "Registro duplicado: restrição de unicidade violada",
            constraint="unique",
        )
    if code == FOREIGN_KEY_VIOLATION or _SQLITE_FOREIGN_KEY in text:
        return ConstraintError(
            "Referência inválida: restrição de chave estrangeira violada",
            constraint="foreign_key",
        )
    return ConstraintError("Violação de integridade dos dados", constraint="integrity")


@asynccontextmanager
async def storage_errors(db: AsyncSession, operation: str) -> AsyncIterator[None]:
    """
    Executa operações de banco convertendo falhas.

    - `IntegrityError` vira `ConstraintError`
    - qualquer outro `SQLAlchemyError` vira `StorageError` genérico

    O erro original fica encadeado e vai para o log, nunca para a resposta.
    """
    try:
        yield
    except IntegrityError as exc:
        await db.rollback()
        error = classify_integrity_error(exc)
        logger.warning(
            "Violação de restrição",
            operation=operation,
            constraint=error.constraint,
            error=str(exc.orig),
        )
        raise error from exc
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error(
            "Falha no banco de dados",
            operation=operation,
            exc_type=type(exc).__name__,
            error=str(exc),
        )
        raise StorageError(operation=operation) from exc


class BaseRepository(Generic[ModelType]):
    """
    Repository base com operações CRUD.

    Uso:
        class ClientRepository(BaseRepository[Client]):
            def __init__(self, db: AsyncSession):
                super().__init__(Client, db)

    Subclasses definem a ordenação padrão das listagens em `ordering()`.
    """

    def __init__(self, model: type[ModelType], db: AsyncSession):
        self.model = model
        self.db = db

    @property
    def _name(self) -> str:
        return self.model.__tablename__

    def ordering(self) -> list[Any]:
        """Ordenação padrão das listagens."""
        return [self.model.id]

    async def get_by_id(self, id: int) -> ModelType | None:
        """Busca entidade por ID."""
        async with storage_errors(self.db, f"get_{self._name}"):
            result = await self.db.execute(
                select(self.model).where(self.model.id == id)
            )
            return result.scalar_one_or_none()

    async def exists(self, id: int) -> bool:
        """Verifica se a entidade existe."""
        async with storage_errors(self.db, f"exists_{self._name}"):
            result = await self.db.execute(
                select(self.model.id).where(self.model.id == id)
            )
            return result.scalar_one_or_none() is not None

    async def get_all(self, *criteria: Any) -> list[ModelType]:
        """Lista entidades, opcionalmente filtradas, na ordenação padrão."""
        async with storage_errors(self.db, f"list_{self._name}"):
            result = await self.db.execute(
                select(self.model).where(*criteria).order_by(*self.ordering())
            )
            return list(result.scalars().all())

    async def count(self, *criteria: Any) -> int:
        """Conta entidades, opcionalmente filtradas."""
        async with storage_errors(self.db, f"count_{self._name}"):
            result = await self.db.execute(
                select(func.count()).select_from(self.model).where(*criteria)
            )
            return result.scalar_one()

    async def create(self, **kwargs: Any) -> ModelType:
        """Cria nova entidade."""
        instance = self.model(**kwargs)
        async with storage_errors(self.db, f"create_{self._name}"):
            self.db.add(instance)
            await self.db.commit()
            await self.db.refresh(instance)
        return instance

    async def update(self, id: int, **kwargs: Any) -> ModelType | None:
        """
        Atualiza entidade existente.

        Apenas as chaves informadas são alteradas; `None` explícito limpa
        o campo. Retorna None se a entidade não existir.
        """
        instance = await self.get_by_id(id)
        if instance is None:
            return None
        return await self._apply(instance, **kwargs)

    async def _apply(self, instance: ModelType, **kwargs: Any) -> ModelType:
        async with storage_errors(self.db, f"update_{self._name}"):
            for key, value in kwargs.items():
                setattr(instance, key, value)
            await self.db.commit()
            await self.db.refresh(instance)
        return instance

    async def delete(self, id: int) -> bool:
        """Remove entidade (hard delete). Retorna False se não existir."""
        instance = await self.get_by_id(id)
        if instance is None:
            return False

        async with storage_errors(self.db, f"delete_{self._name}"):
            await self.db.delete(instance)
            await self.db.commit()
        return True
