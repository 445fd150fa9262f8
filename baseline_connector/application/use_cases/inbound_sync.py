"""
Reconciliación inbound: servicio de catálogo -> hoja (RFPs y Order Items).

Diseño (resumen):
- Cursor = cantidad de filas ya presentes en RFPS (sin clave externa guardada)
- La fila i de RFPS corresponde a la RFP i del listado remoto, desde el inicio
- Se transfiere solo el sufijo remoto[cursor:], en orden
- Por cada RFP nueva: primero sus order items, luego la fila resumen

Debilidad conocida:
- Un error a mitad de ciclo NO revierte lo ya agregado. Como la fila RFP se
  escribe después de sus items, un fallo entre ambos deja items huérfanos
  que la próxima corrida vuelve a agregar.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from baseline_connector.application.interfaces.catalog_service import CatalogService
from baseline_connector.application.interfaces.tabular_store import TabularStore
from baseline_connector.domain.entities.catalog import RFPSummary
from baseline_connector.infrastructure.external.sheets.sheet_layout import (
    DEFAULT_LAYOUT,
    SheetLayout,
    order_item_row,
    rfp_row,
)


@dataclass(frozen=True)
class InboundSyncResult:
    order_items_added: int
    rfps_added: int


class InboundReconciler:
    """
    Orquestador del ciclo inbound.
    """

    def __init__(
        self,
        *,
        store: TabularStore,
        catalog: CatalogService,
        layout: SheetLayout = DEFAULT_LAYOUT,
        buyer_label: str = "Buyer",
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._layout = layout
        self._buyer_label = buyer_label

    def saved_rfps_count(self) -> int:
        return len(self._store.read_range(self._layout.rfps_read_range))

    def sync(self) -> InboundSyncResult:
        """
        Ejecuta un ciclo completo. Cualquier excepción aborta el ciclo.
        """
        saved_count = self.saved_rfps_count()
        remote = self._catalog.list_rfps()

        if len(remote) <= saved_count:
            logger.info(
                f"Inbound: sin RFPs nuevas (local={saved_count}, remoto={len(remote)})"
            )
            return InboundSyncResult(order_items_added=0, rfps_added=0)

        new_rfps = remote[saved_count:]
        logger.info(
            f"Inbound: {len(new_rfps)} RFP(s) nuevas (local={saved_count}, remoto={len(remote)})"
        )

        order_items_added = 0
        for summary in new_rfps:
            order_items_added += self._insert_rfp(summary)

        logger.info(
            f"Inbound completado. rfps={len(new_rfps)}, order_items={order_items_added}"
        )
        return InboundSyncResult(order_items_added=order_items_added, rfps_added=len(new_rfps))

    def _insert_rfp(self, summary: RFPSummary) -> int:
        rfp = self._catalog.get_rfp(summary.rfp_id)

        # Los items se indexan por el id del listado, no del detalle.
        for item in rfp.items:
            self._store.append_row(
                self._layout.order_items_append_range,
                order_item_row(summary.rfp_id, item),
            )

        self._store.append_row(
            self._layout.rfps_append_range,
            rfp_row(rfp, self._buyer_label),
        )
        logger.debug(f"RFP {summary.rfp_id} agregada con {len(rfp.items)} item(s)")
        return len(rfp.items)
