"""
Endpoints para sincronizacion hoja <-> servicio de catalogo.

Todos responden 200 con {ok, error, updates}: los errores del ciclo viajan
en el cuerpo, no como status HTTP.
"""
import asyncio

from fastapi import APIRouter, Depends, status
from loguru import logger

from baseline_connector.api.v1.dependencies.use_case_deps import get_sync_use_cases
from baseline_connector.application.dto.sync_dto import SyncResponseDTO, SyncStatusDTO
from baseline_connector.application.use_cases.sync_use_cases import SyncUseCases


router = APIRouter(prefix="/sync", tags=["Sync"])


@router.post(
    "/inbound",
    response_model=SyncResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Copiar RFPs nuevas del servicio de catalogo a la hoja",
)
async def sync_inbound(
    use_cases: SyncUseCases = Depends(get_sync_use_cases),
) -> SyncResponseDTO:
    logger.info("Sync inbound solicitado desde API")
    # Ejecutar en thread separado para no bloquear el event loop
    return await asyncio.to_thread(use_cases.sync_inbound)


@router.post(
    "/outbound",
    response_model=SyncResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Enviar propuestas nuevas de la hoja al servicio de catalogo",
)
async def sync_outbound(
    use_cases: SyncUseCases = Depends(get_sync_use_cases),
) -> SyncResponseDTO:
    logger.info("Sync outbound solicitado desde API")
    return await asyncio.to_thread(use_cases.sync_outbound)


@router.post(
    "/all",
    response_model=SyncResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Sync inbound y luego outbound",
)
async def sync_all(
    use_cases: SyncUseCases = Depends(get_sync_use_cases),
) -> SyncResponseDTO:
    logger.info("Sync completo solicitado desde API")
    return await asyncio.to_thread(use_cases.sync_all)


@router.get(
    "/status",
    response_model=SyncStatusDTO,
    status_code=status.HTTP_200_OK,
    summary="Conteos locales/remotos y pendientes (solo lectura)",
)
async def sync_status(
    use_cases: SyncUseCases = Depends(get_sync_use_cases),
) -> SyncStatusDTO:
    return await asyncio.to_thread(use_cases.status)
