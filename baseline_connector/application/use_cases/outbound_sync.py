"""
Reconciliación outbound: hoja (Proposals) -> servicio de catálogo.

Diseño (resumen):
- Cursor = cantidad de propuestas que el servicio ya conoce (GET /Proposals)
- Candidatas = filas locales desde ese offset en adelante
- Solo se envían filas con flag "sent" == "No"
- Cada envío exitoso marca la fila con "Yes" (No -> Yes, una sola vez)
- La fila marcada es la misma fila leída y enviada (para ids secuenciales
  coincide con id + 1)

Las filas anteriores al offset no se reintentan aunque sigan en "No";
solo se reportan en el log.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from baseline_connector.application.interfaces.catalog_service import CatalogService
from baseline_connector.application.interfaces.tabular_store import TabularStore
from baseline_connector.application.services.join_resolver import JoinResolver
from baseline_connector.domain.entities.catalog import SENT_YES, ProposalRow
from baseline_connector.infrastructure.external.sheets.sheet_layout import (
    DEFAULT_LAYOUT,
    SheetLayout,
    parse_proposal_rows,
)


@dataclass(frozen=True)
class OutboundSyncResult:
    sent_proposals: int


class OutboundReconciler:
    """
    Orquestador del ciclo outbound.
    """

    def __init__(
        self,
        *,
        store: TabularStore,
        catalog: CatalogService,
        layout: SheetLayout = DEFAULT_LAYOUT,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._layout = layout

    def sync(self) -> OutboundSyncResult:
        """
        Ejecuta un ciclo completo. Cualquier excepción aborta el ciclo; las
        propuestas ya enviadas y marcadas en este ciclo quedan como están.
        """
        sku_rows = self._store.read_range(self._layout.skus_read_range)
        tier_rows = self._store.read_range(self._layout.tiers_read_range)
        proposals = parse_proposal_rows(
            self._store.read_range(self._layout.proposals_read_range)
        )

        remote_count = len(self._catalog.list_proposals())

        if len(proposals) <= remote_count:
            logger.info(
                f"Outbound: sin propuestas nuevas (local={len(proposals)}, remoto={remote_count})"
            )
            return OutboundSyncResult(sent_proposals=0)

        self._warn_unsent_before_offset(proposals[:remote_count])

        resolver = JoinResolver(tier_rows, sku_rows, tiers_sheet=self._layout.tiers_sheet)
        candidates = proposals[remote_count:]
        logger.info(
            f"Outbound: {len(candidates)} candidata(s) desde el offset {remote_count}"
        )

        sent = 0
        for proposal in candidates:
            if not proposal.is_unsent:
                continue

            payload = resolver.resolve(proposal)
            self._catalog.submit_proposal(payload)
            self._mark_sent(proposal.row_number)
            sent += 1
            logger.debug(f"Propuesta {proposal.proposal_id} enviada")

        logger.info(f"Outbound completado. enviadas={sent}")
        return OutboundSyncResult(sent_proposals=sent)

    def _mark_sent(self, row_number: int) -> None:
        self._store.update_cell(self._layout.sent_flag_range(row_number), [SENT_YES])

    @staticmethod
    def _warn_unsent_before_offset(skipped: list[ProposalRow]) -> None:
        unsent_ids = [p.proposal_id for p in skipped if p.is_unsent]
        if unsent_ids:
            logger.warning(
                f"Outbound: {len(unsent_ids)} propuesta(s) sin enviar antes del offset "
                f"no se reintentan: {unsent_ids}"
            )
