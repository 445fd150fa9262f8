"""
Manejadores de eventos de inicio y cierre de la aplicacion.

Se registran en FastAPI a traves de `lifespan` (los eventos on_startup /
on_shutdown ya no existen en Starlette).
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable
from fastapi import FastAPI
from loguru import logger

from baseline_connector.core.config import settings, Settings


def startup_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de inicio de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de inicio
    """
    async def startup() -> None:
        """Configura logging y valida configuracion al inicio."""
        logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Entorno: {settings.ENVIRONMENT}")

        app.state.log_sink_id = logger.add(
            settings.LOG_FILE,
            rotation="500 MB",
            retention="10 days",
            level=settings.LOG_LEVEL
        )

        for warning in validate_config(settings):
            logger.warning(f"CONFIG: {warning}")

        logger.success("Aplicacion iniciada correctamente")

    return startup


def validate_config(config: Settings) -> list[str]:
    """
    Revisa la configuracion critica. No falla: los puntos de entrada
    reportan el error concreto en cada invocacion.
    """
    warnings = []
    if not config.CATALOG_BASE_URL:
        warnings.append("CATALOG_BASE_URL no configurada - el sync no funcionara")
    if not config.SPREADSHEET_ID:
        warnings.append("SPREADSHEET_ID no configurado - el sync no funcionara")
    return warnings


def shutdown_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de cierre de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de cierre
    """
    async def shutdown() -> None:
        """Libera recursos al cerrar la aplicacion."""
        logger.info("Cerrando aplicacion...")
        sink_id = getattr(app.state, "log_sink_id", None)
        if sink_id is not None:
            logger.remove(sink_id)
            app.state.log_sink_id = None
        logger.success("Aplicacion cerrada correctamente")

    return shutdown


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    await startup_handler(app)()
    yield
    # Shutdown
    await shutdown_handler(app)()
