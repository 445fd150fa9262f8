"""
Layout de la hoja de cálculo (rangos y posiciones de columnas).

Aquí se concentra el conocimiento de "qué columna es qué" para:
- RFPS / Order_Items (destino inbound)
- Proposals / Proposal_Tiers / SKU (origen outbound)

Este módulo no realiza I/O: solo define configuración y mapeos fila <-> entidad.
Todas las hojas tienen header en la fila 1 y datos desde la fila 2.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from baseline_connector.domain.entities.catalog import OrderItem, ProposalRow, RFP


HEADER_ROWS = 1

# Proposals
PROPOSAL_ID_COL = 0
PROPOSAL_BUYER_COL = 1
PROPOSAL_RFP_COL = 2
PROPOSAL_TIERS_COL = 3
PROPOSAL_SENT_COL = 4
PROPOSAL_SENT_COL_LETTER = "E"

# Proposal_Tiers
TIER_ID_COL = 0
TIER_SKU_COL = 1
TIER_QTY_FROM_COL = 2
TIER_QTY_TO_COL = 3
TIER_UNIT_COL = 4
TIER_PRICE_COL = 5
TIER_CURRENCY_COL = 6
TIER_BUYER_PRODUCT_COL = 7

# SKU
SKU_ID_COL = 0
SKU_NAME_COL = 1


@dataclass(frozen=True)
class SheetLayout:
    """
    Nombres de hojas y rangos A1 usados por el conector.

    Los rangos de lectura empiezan en la fila 2 (debajo del header) para
    que len(filas) sea directamente la cantidad de registros.
    """

    rfps_sheet: str = "RFPS"
    order_items_sheet: str = "Order_Items"
    proposals_sheet: str = "Proposals"
    tiers_sheet: str = "Proposal_Tiers"
    skus_sheet: str = "SKU"

    @property
    def rfps_read_range(self) -> str:
        return f"{self.rfps_sheet}!A2:D"

    @property
    def rfps_append_range(self) -> str:
        return f"{self.rfps_sheet}!A2"

    @property
    def order_items_read_range(self) -> str:
        return f"{self.order_items_sheet}!A2:E"

    @property
    def order_items_append_range(self) -> str:
        return f"{self.order_items_sheet}!A2"

    @property
    def proposals_read_range(self) -> str:
        return f"{self.proposals_sheet}!A2:Z"

    @property
    def tiers_read_range(self) -> str:
        return f"{self.tiers_sheet}!A2:Z"

    @property
    def skus_read_range(self) -> str:
        return f"{self.skus_sheet}!A2:Z"

    def sent_flag_range(self, row_number: int) -> str:
        """Rango de una sola celda con el flag "sent" de la fila indicada."""
        col = PROPOSAL_SENT_COL_LETTER
        return f"{self.proposals_sheet}!{col}{row_number}:{col}{row_number}"


DEFAULT_LAYOUT = SheetLayout()


def cell(row: Sequence[Any], index: int) -> str:
    """
    Retorna la celda como texto.

    La API de Sheets recorta las celdas vacías al final de cada fila, así
    que una celda ausente se trata como "".
    """
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index])


def data_row_number(index: int) -> int:
    """Índice 0-based dentro del rango de datos -> número de fila en la hoja."""
    return index + HEADER_ROWS + 1


def order_item_row(rfp_id: str, item: OrderItem) -> list[str]:
    return [
        rfp_id,
        str(item.order_item_id),
        item.sku_buyer,
        f"{item.quantity:f}",
        item.unit,
    ]


def rfp_row(rfp: RFP, buyer_label: str) -> list[str]:
    return [
        rfp.rfp_id,
        buyer_label,
        str(len(rfp.items)),
        rfp.latest_delivery_date,
    ]


def parse_proposal_row(row: Sequence[Any], index: int) -> ProposalRow:
    return ProposalRow(
        row_number=data_row_number(index),
        proposal_id=cell(row, PROPOSAL_ID_COL),
        buyer_id=cell(row, PROPOSAL_BUYER_COL),
        referenced_rfp_id=cell(row, PROPOSAL_RFP_COL),
        tier_ids_raw=cell(row, PROPOSAL_TIERS_COL),
        sent_flag=cell(row, PROPOSAL_SENT_COL),
    )


def parse_proposal_rows(rows: Sequence[Sequence[Any]]) -> list[ProposalRow]:
    return [parse_proposal_row(row, i) for i, row in enumerate(rows)]
