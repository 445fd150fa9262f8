"""
Entidades del catálogo que el conector mueve entre la hoja y el servicio remoto.

Se mantienen libres de I/O. El conector no es dueño de ninguna de ellas:
solo las copia (inbound) o las arma a partir de filas de la hoja (outbound).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


SENT_YES = "Yes"
SENT_NO = "No"


@dataclass(frozen=True)
class OrderItem:
    """Línea de una RFP."""

    order_item_id: int
    sku_buyer: str
    quantity: float
    unit: str


@dataclass(frozen=True)
class RFPSummary:
    """Elemento del listado GET /RequestForProposals (sin items)."""

    rfp_id: str
    buyer_id: str = ""
    supplier_id: str = ""
    latest_delivery_date: str = ""


@dataclass(frozen=True)
class RFP:
    """Detalle GET /RequestForProposals/{id}, con sus OrderItems en orden."""

    rfp_id: str
    supplier_id: str = ""
    latest_delivery_date: str = ""
    items: list[OrderItem] = field(default_factory=list)


@dataclass(frozen=True)
class ProposalRow:
    """
    Fila local de la hoja Proposals.

    row_number es el número de fila real en la hoja (1-based, con header).
    """

    row_number: int
    proposal_id: str
    buyer_id: str
    referenced_rfp_id: str
    tier_ids_raw: str
    sent_flag: str

    @property
    def is_unsent(self) -> bool:
        return self.sent_flag == SENT_NO

    @property
    def tier_ids(self) -> list[str]:
        return [t.strip() for t in self.tier_ids_raw.split(",")]


@dataclass(frozen=True)
class SKU:
    sku_id: str
    product_name: str
    buyer_product_id: str
    supplier_product_id: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.sku_id,
            "ProductName": self.product_name,
            "BuyerProductId": self.buyer_product_id,
            "SupplierProductId": self.supplier_product_id,
        }


@dataclass(frozen=True)
class PriceTier:
    """Escala de precio por banda de cantidad, con el SKU ya resuelto."""

    tier_id: str
    sku: SKU
    quantity_from: int
    quantity_to: int
    price: float
    unit: str
    currency: str

    def to_payload(self) -> dict[str, Any]:
        # El servicio no recibe el id del tier: solo el contenido desnormalizado.
        return {
            "Sku": self.sku.to_payload(),
            "QuantityFrom": self.quantity_from,
            "QuantityTo": self.quantity_to,
            "Price": self.price,
            "Unit": self.unit,
            "Currency": self.currency,
        }


@dataclass(frozen=True)
class ProposalPayload:
    """Propuesta completa lista para POST /Proposals."""

    proposal_id: str
    buyer_id: str
    referenced_rfp_id: str
    price_tiers: list[PriceTier]

    def to_payload(self) -> dict[str, Any]:
        return {
            "ProposalId": self.proposal_id,
            "BuyerId": self.buyer_id,
            "ReferencedRfpId": self.referenced_rfp_id,
            "priceScales": [t.to_payload() for t in self.price_tiers],
        }
