"""
Dependencias para inyeccion de casos de uso.
"""
from baseline_connector.application.use_cases.auth_use_cases import AuthUseCases
from baseline_connector.application.use_cases.sync_use_cases import SyncUseCases, build_from_settings
from baseline_connector.core.config import settings
from baseline_connector.infrastructure.external.catalog.catalog_client import CatalogClient


def get_sync_use_cases() -> SyncUseCases:
    """
    Dependencia para obtener los casos de uso de sincronizacion.

    Returns:
        SyncUseCases: Instancia configurada desde settings
    """
    return build_from_settings(settings)


def get_auth_use_cases() -> AuthUseCases:
    """
    Dependencia para obtener los casos de uso de autenticacion.

    Returns:
        AuthUseCases: Instancia que reenvia el login al servicio de catalogo
    """
    return AuthUseCases(
        lambda: CatalogClient(settings.CATALOG_BASE_URL, timeout_s=settings.CATALOG_TIMEOUT_S)
    )
