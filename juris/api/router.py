"""
Router principal da API.

Agrega todas as rotas organizadas por domínio.
"""

from fastapi import APIRouter

from juris.api.endpoints import (
    activities,
    cases,
    clients,
    communications,
    dashboard,
    documents,
    financial,
    health,
    hearings,
)

api_router = APIRouter()

# Health check
api_router.include_router(health.router, prefix="/health", tags=["Health"])

# Dashboard
api_router.include_router(dashboard.router)

# Clientes
api_router.include_router(clients.router)

# Processos
api_router.include_router(cases.router)

# Atividades e prazos
api_router.include_router(activities.router)

# Audiências
api_router.include_router(hearings.router)

# Documentos
api_router.include_router(documents.router)

# Financeiro
api_router.include_router(financial.router)

# Comunicações
api_router.include_router(communications.router)
