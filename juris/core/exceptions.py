"""
Exceções customizadas da aplicação.

Define hierarquia de exceções para tratamento consistente de erros.
A camada HTTP converte cada classe em um status (ver middleware).
"""

from typing import Any


class JurisException(Exception):
    """Exceção base do Juris."""

    def __init__(
        self,
        message: str,
        code: str = "JURIS_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


# === Exceções de Validação ===

class ValidationError(JurisException):
    """
    Erro de validação de dados de entrada.

    `errors` enumera cada campo violado no formato {"field", "reason"}.
    """

    def __init__(
        self,
        message: str = "Erro de validação",
        errors: list[dict[str, str]] | None = None,
    ):
        super().__init__(message, code="VALIDATION_ERROR")
        self.errors = errors or []


# === Exceções de Recursos ===

class ResourceNotFoundError(JurisException):
    """Recurso não encontrado."""

    def __init__(
        self,
        resource_type: str,
        resource_id: int | str | None = None,
    ):
        message = f"{resource_type} não encontrado"
        if resource_id is not None:
            message = f"{resource_type} com ID {resource_id} não encontrado"
        super().__init__(message, code="NOT_FOUND")
        self.resource_type = resource_type
        self.resource_id = resource_id


# === Exceções de Integridade ===

class ConstraintError(JurisException):
    """Violação de restrição do banco (unicidade ou chave estrangeira)."""

    def __init__(
        self,
        message: str,
        constraint: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code="CONSTRAINT_VIOLATION", details=details)
        self.constraint = constraint


class ResourceAlreadyExistsError(ConstraintError):
    """Recurso já existe (conflito de unicidade)."""

    def __init__(
        self,
        resource_type: str,
        field: str,
        value: str,
    ):
        super().__init__(
            f"{resource_type} com {field}='{value}' já existe",
            constraint=f"unique_{field}",
        )
        self.code = "ALREADY_EXISTS"
        self.resource_type = resource_type
        self.field = field
        self.value = value


class InvalidReferenceError(ConstraintError):
    """Registro referencia entidade inexistente."""

    def __init__(self, resource_type: str, resource_id: int, field: str):
        super().__init__(
            f"{resource_type} com ID {resource_id} não existe",
            constraint=f"fk_{field}",
        )
        self.code = "INVALID_REFERENCE"
        self.field = field


class DeleteRestrictedError(ConstraintError):
    """Exclusão bloqueada por registros dependentes."""

    def __init__(self, resource_type: str, resource_id: int, dependents: dict[str, int]):
        listed = ", ".join(f"{name}={count}" for name, count in dependents.items())
        super().__init__(
            f"{resource_type} com ID {resource_id} possui registros vinculados ({listed})",
            constraint="restrict_delete",
            details={"dependents": dependents},
        )
        self.code = "DELETE_RESTRICTED"


# === Exceções de Persistência ===

class StorageError(JurisException):
    """Falha genérica da camada de persistência."""

    def __init__(
        self,
        message: str = "Falha ao acessar o banco de dados",
        operation: str | None = None,
    ):
        super().__init__(message, code="STORAGE_ERROR")
        self.operation = operation
