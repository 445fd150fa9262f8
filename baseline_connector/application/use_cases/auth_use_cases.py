"""
Casos de uso para autenticación.

El conector no gestiona sesiones: solo reenvía email/password al servicio
de catálogo y traduce el resultado a {ok, error}.
"""

from __future__ import annotations

from typing import Callable, Optional

from loguru import logger

from baseline_connector.application.dto.sync_dto import AuthResponseDTO
from baseline_connector.application.interfaces.catalog_service import CatalogService
from baseline_connector.shared.exceptions.base import AppException


class AuthUseCases:
    def __init__(self, catalog_provider: Callable[[], CatalogService]) -> None:
        self._catalog_provider = catalog_provider

    def login(self, email: Optional[str], password: Optional[str]) -> AuthResponseDTO:
        if not email:
            logger.info("Url Param 'email' is missing")
            return AuthResponseDTO(ok=False, error="Url Param 'email' is missing")
        if not password:
            logger.info("Url Param 'password' is missing")
            return AuthResponseDTO(ok=False, error="Url Param 'password' is missing")

        try:
            self._catalog_provider().authenticate(email, password)
        except AppException as e:
            logger.warning(f"Autenticación rechazada para {email}: {e.message}")
            return AuthResponseDTO(ok=False, error=e.message)
        return AuthResponseDTO(ok=True)
