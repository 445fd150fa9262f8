"""
Casos de uso de sincronización (puntos de entrada).

Expone "sync inbound", "sync outbound", "sync all" y "status". Ninguno
propaga excepciones: todo error termina en SyncResponseDTO(ok=False, error=...).
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from loguru import logger

from baseline_connector.application.dto.sync_dto import SyncResponseDTO, SyncStatusDTO
from baseline_connector.application.interfaces.catalog_service import CatalogService
from baseline_connector.application.interfaces.tabular_store import TabularStore
from baseline_connector.application.use_cases.inbound_sync import InboundReconciler
from baseline_connector.application.use_cases.outbound_sync import OutboundReconciler
from baseline_connector.core.config import Settings
from baseline_connector.infrastructure.external.catalog.catalog_client import CatalogClient
from baseline_connector.infrastructure.external.sheets.sheet_layout import (
    DEFAULT_LAYOUT,
    SheetLayout,
    parse_proposal_rows,
)
from baseline_connector.infrastructure.external.sheets.sheets_client import GoogleSheetsStore
from baseline_connector.infrastructure.sync_lock import SyncRunLock, sync_run_lock
from baseline_connector.shared.exceptions.base import AppException


T = TypeVar("T")

StoreProvider = Callable[[], TabularStore]
CatalogProvider = Callable[[], CatalogService]


class SyncUseCases:
    """
    Orquesta los reconciliadores y convierte errores en respuestas.

    Los clientes se construyen por invocación (sin estado entre corridas):
    un fallo al construirlos (credenciales, URL) también se reporta como
    respuesta de error.
    """

    def __init__(
        self,
        *,
        store_provider: StoreProvider,
        catalog_provider: CatalogProvider,
        layout: SheetLayout = DEFAULT_LAYOUT,
        buyer_label: str = "Buyer",
        lock: Optional[SyncRunLock] = None,
    ) -> None:
        self._store_provider = store_provider
        self._catalog_provider = catalog_provider
        self._layout = layout
        self._buyer_label = buyer_label
        self._lock = lock or sync_run_lock

    def sync_inbound(self) -> SyncResponseDTO:
        def run(store: TabularStore, catalog: CatalogService) -> SyncResponseDTO:
            result = self._inbound(store, catalog).sync()
            return SyncResponseDTO.success(
                new_order_items=result.order_items_added,
                new_rfps=result.rfps_added,
            )

        return self._guarded("inbound", run)

    def sync_outbound(self) -> SyncResponseDTO:
        def run(store: TabularStore, catalog: CatalogService) -> SyncResponseDTO:
            result = self._outbound(store, catalog).sync()
            return SyncResponseDTO.success(sent_proposals=result.sent_proposals)

        return self._guarded("outbound", run)

    def sync_all(self) -> SyncResponseDTO:
        """Inbound y luego outbound; si inbound falla, outbound no se ejecuta."""

        def run(store: TabularStore, catalog: CatalogService) -> SyncResponseDTO:
            inbound = self._inbound(store, catalog).sync()
            outbound = self._outbound(store, catalog).sync()
            return SyncResponseDTO.success(
                new_order_items=inbound.order_items_added,
                new_rfps=inbound.rfps_added,
                sent_proposals=outbound.sent_proposals,
            )

        return self._guarded("all", run)

    def status(self) -> SyncStatusDTO:
        """
        Lee ambos lados y calcula lo pendiente sin escribir nada.
        No toma el lock: es solo lectura.
        """
        try:
            store = self._store_provider()
            catalog = self._catalog_provider()

            local_rfps = len(store.read_range(self._layout.rfps_read_range))
            local_items = len(store.read_range(self._layout.order_items_read_range))
            proposals = parse_proposal_rows(store.read_range(self._layout.proposals_read_range))
            remote_rfps = len(catalog.list_rfps())
            remote_proposals = len(catalog.list_proposals())
        except AppException as e:
            logger.error(f"Error leyendo estado de sync: {e.message}")
            return SyncStatusDTO(ok=False, error=e.message)
        except Exception as e:
            logger.exception("Error inesperado leyendo estado de sync")
            return SyncStatusDTO(ok=False, error=str(e) or type(e).__name__)

        pending_outbound = 0
        if len(proposals) > remote_proposals:
            pending_outbound = sum(1 for p in proposals[remote_proposals:] if p.is_unsent)

        return SyncStatusDTO(
            ok=True,
            local_rfps=local_rfps,
            remote_rfps=remote_rfps,
            local_order_items=local_items,
            local_proposals=len(proposals),
            remote_proposals=remote_proposals,
            pending_inbound=max(remote_rfps - local_rfps, 0),
            pending_outbound=pending_outbound,
        )

    def _inbound(self, store: TabularStore, catalog: CatalogService) -> InboundReconciler:
        return InboundReconciler(
            store=store,
            catalog=catalog,
            layout=self._layout,
            buyer_label=self._buyer_label,
        )

    def _outbound(self, store: TabularStore, catalog: CatalogService) -> OutboundReconciler:
        return OutboundReconciler(store=store, catalog=catalog, layout=self._layout)

    def _guarded(
        self,
        name: str,
        run: Callable[[TabularStore, CatalogService], SyncResponseDTO],
    ) -> SyncResponseDTO:
        try:
            with self._lock.hold(name):
                logger.info(f"Iniciando sync '{name}'")
                response = run(self._store_provider(), self._catalog_provider())
                logger.info(f"Sync '{name}' OK: {response.updates.model_dump(by_alias=True)}")
                return response
        except AppException as e:
            logger.error(f"Sync '{name}' falló [{e.error_code}]: {e.message}")
            return SyncResponseDTO.failure(e.message)
        except Exception as e:
            logger.exception(f"Error inesperado en sync '{name}'")
            return SyncResponseDTO.failure(str(e) or type(e).__name__)


def build_from_settings(settings: Settings) -> SyncUseCases:
    """
    Constructor "oficial" de los casos de uso a partir de la configuración.
    """

    def store_provider() -> TabularStore:
        if not settings.SPREADSHEET_ID:
            raise AppException(
                message="SPREADSHEET_ID no configurado",
                status_code=503,
                error_code="CONFIG_ERROR",
            )
        return GoogleSheetsStore(
            settings.SPREADSHEET_ID,
            credentials_file=settings.GOOGLE_CREDENTIALS_FILE,
        )

    def catalog_provider() -> CatalogService:
        return CatalogClient(settings.CATALOG_BASE_URL, timeout_s=settings.CATALOG_TIMEOUT_S)

    return SyncUseCases(
        store_provider=store_provider,
        catalog_provider=catalog_provider,
        buyer_label=settings.RFP_BUYER_LABEL,
    )
