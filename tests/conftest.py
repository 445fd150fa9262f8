"""
Configuración de fixtures para pytest.

Provee una hoja en memoria (TabularStore) y un servicio de catálogo falso
(CatalogService) para ejercitar los reconciliadores sin red.
"""
from __future__ import annotations

import pytest

from baseline_connector.infrastructure.sync_lock import sync_run_lock
from tests.fakes import FakeCatalog, InMemorySheet


@pytest.fixture(autouse=True)
def release_sync_lock():
    """El lock de proceso es global: se verifica que ningun test lo deje tomado."""
    yield
    assert not sync_run_lock.is_locked


@pytest.fixture
def sheet() -> InMemorySheet:
    return InMemorySheet()


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def outbound_sheet() -> InMemorySheet:
    """Hoja con 2 SKUs, 3 tiers y 2 propuestas sin enviar."""
    return InMemorySheet(
        {
            "SKU": [
                ["S1", "Widget"],
                ["S2", "Gadget"],
            ],
            "Proposal_Tiers": [
                ["T1", "S1", "1", "10", "pcs", "9.5", "EUR", "BP-1"],
                ["T2", "S1", "11", "100", "pcs", "8.25", "EUR", "BP-1"],
                ["T3", "S2", "1", "5", "box", "20", "USD", "BP-2"],
            ],
            "Proposals": [
                ["1", "buyer-a", "RFP-1", "T1,T2", "No"],
                ["2", "buyer-b", "RFP-2", "T3", "No"],
            ],
        }
    )
