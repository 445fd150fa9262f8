"""
Resolución de referencias Proposal -> Proposal_Tiers -> SKU.

Dada una fila de propuesta, arma el payload completo (desnormalizado) que
espera el servicio de catálogo: cada tier referenciado embebe su SKU.

Reglas:
- La primera fila con un id dado gana (orden de arriba hacia abajo);
  ids duplicados no se reportan como ambiguos.
- Una referencia inexistente es un error duro para esa propuesta.
- Cantidades y precio se parsean desde texto; un valor inválido hace fallar
  la resolución completa.
"""

from __future__ import annotations

import math
import re
from typing import Any, Sequence

from baseline_connector.domain.entities.catalog import PriceTier, ProposalPayload, ProposalRow, SKU
from baseline_connector.infrastructure.external.sheets.sheet_layout import (
    SKU_ID_COL,
    SKU_NAME_COL,
    TIER_BUYER_PRODUCT_COL,
    TIER_CURRENCY_COL,
    TIER_ID_COL,
    TIER_PRICE_COL,
    TIER_QTY_FROM_COL,
    TIER_QTY_TO_COL,
    TIER_SKU_COL,
    TIER_UNIT_COL,
    cell,
)
from baseline_connector.shared.exceptions.sync import CellParseException, ReferenceNotFoundException


Row = Sequence[Any]

_INT_RE = re.compile(r"[+-]?[0-9]+")


def index_by_first_column(rows: Sequence[Row], id_col: int = 0) -> dict[str, Row]:
    """Mapa id -> fila. Ante ids repetidos se queda con la primera fila."""
    index: dict[str, Row] = {}
    for row in rows:
        index.setdefault(cell(row, id_col), row)
    return index


def parse_int_cell(value: str, *, sheet: str, column: str) -> int:
    """Entero decimal estricto: sin espacios, separadores "_" ni decimales."""
    if not _INT_RE.fullmatch(value):
        raise CellParseException(sheet, column, value)
    return int(value)


def parse_float_cell(value: str, *, sheet: str, column: str) -> float:
    try:
        parsed = float(value)
    except ValueError as e:
        raise CellParseException(sheet, column, value) from e
    # NaN e infinito no son serializables como JSON
    if not math.isfinite(parsed):
        raise CellParseException(sheet, column, value)
    return parsed


class JoinResolver:
    """
    Construye los índices una sola vez por ciclo y resuelve N propuestas
    contra ellos.
    """

    def __init__(
        self,
        tier_rows: Sequence[Row],
        sku_rows: Sequence[Row],
        *,
        tiers_sheet: str = "Proposal_Tiers",
    ) -> None:
        self._tiers = index_by_first_column(tier_rows, TIER_ID_COL)
        self._skus = index_by_first_column(sku_rows, SKU_ID_COL)
        self._tiers_sheet = tiers_sheet

    def resolve(self, proposal: ProposalRow) -> ProposalPayload:
        tiers = [self.resolve_tier(tier_id) for tier_id in proposal.tier_ids]
        return ProposalPayload(
            proposal_id=proposal.proposal_id,
            buyer_id=proposal.buyer_id,
            referenced_rfp_id=proposal.referenced_rfp_id,
            price_tiers=tiers,
        )

    def resolve_tier(self, tier_id: str) -> PriceTier:
        row = self._tiers.get(tier_id)
        if row is None:
            raise ReferenceNotFoundException("price tier", tier_id)

        sku = self.resolve_sku(
            cell(row, TIER_SKU_COL),
            buyer_product_id=cell(row, TIER_BUYER_PRODUCT_COL),
        )
        sheet = self._tiers_sheet
        return PriceTier(
            tier_id=tier_id,
            sku=sku,
            quantity_from=parse_int_cell(cell(row, TIER_QTY_FROM_COL), sheet=sheet, column="QuantityFrom"),
            quantity_to=parse_int_cell(cell(row, TIER_QTY_TO_COL), sheet=sheet, column="QuantityTo"),
            price=parse_float_cell(cell(row, TIER_PRICE_COL), sheet=sheet, column="Price"),
            unit=cell(row, TIER_UNIT_COL),
            currency=cell(row, TIER_CURRENCY_COL),
        )

    def resolve_sku(self, sku_id: str, *, buyer_product_id: str = "") -> SKU:
        row = self._skus.get(sku_id)
        if row is None:
            raise ReferenceNotFoundException("SKU", sku_id)
        # El id del SKU en la hoja es el id de producto del proveedor;
        # el id de producto del comprador vive en el tier.
        return SKU(
            sku_id=cell(row, SKU_ID_COL),
            product_name=cell(row, SKU_NAME_COL),
            buyer_product_id=buyer_product_id,
            supplier_product_id=cell(row, SKU_ID_COL),
        )
