"""
Router principal de la API v1.
Agrupa todos los endpoints de la version 1.
"""
from fastapi import APIRouter

from baseline_connector.api.v1.endpoints import auth, sync


# Router principal de la API v1
api_router = APIRouter(prefix="/v1")

api_router.include_router(sync.router)
api_router.include_router(auth.router)
