"""
Entidades del dominio.
"""
from baseline_connector.domain.entities.catalog import (
    SENT_NO,
    SENT_YES,
    OrderItem,
    PriceTier,
    ProposalPayload,
    ProposalRow,
    RFP,
    RFPSummary,
    SKU,
)

__all__ = [
    "SENT_NO",
    "SENT_YES",
    "OrderItem",
    "PriceTier",
    "ProposalPayload",
    "ProposalRow",
    "RFP",
    "RFPSummary",
    "SKU",
]
