from __future__ import annotations

import pytest

from baseline_connector.application.services.join_resolver import JoinResolver, index_by_first_column
from baseline_connector.domain.entities.catalog import ProposalRow
from baseline_connector.shared.exceptions.sync import CellParseException, ReferenceNotFoundException


def _row(tier_ids: str) -> ProposalRow:
    return ProposalRow(
        row_number=2,
        proposal_id="1",
        buyer_id="buyer-a",
        referenced_rfp_id="RFP-1",
        tier_ids_raw=tier_ids,
        sent_flag="No",
    )


TIERS = [["T1", "S1", "1", "10", "pcs", "9.5", "EUR", "BP-1"]]
SKUS = [["S1", "Widget"]]


def test_resolve_embeds_sku_in_tier() -> None:
    payload = JoinResolver(TIERS, SKUS).resolve(_row("T1"))

    assert payload.proposal_id == "1"
    assert payload.buyer_id == "buyer-a"
    assert payload.referenced_rfp_id == "RFP-1"
    assert len(payload.price_tiers) == 1
    tier = payload.price_tiers[0]
    assert tier.sku.product_name == "Widget"
    assert tier.sku.sku_id == "S1"
    assert tier.sku.supplier_product_id == "S1"
    assert tier.sku.buyer_product_id == "BP-1"
    assert (tier.quantity_from, tier.quantity_to) == (1, 10)
    assert tier.price == pytest.approx(9.5)
    assert (tier.unit, tier.currency) == ("pcs", "EUR")


def test_resolve_payload_uses_catalog_wire_keys() -> None:
    body = JoinResolver(TIERS, SKUS).resolve(_row("T1")).to_payload()

    assert body == {
        "ProposalId": "1",
        "BuyerId": "buyer-a",
        "ReferencedRfpId": "RFP-1",
        "priceScales": [
            {
                "Sku": {
                    "id": "S1",
                    "ProductName": "Widget",
                    "BuyerProductId": "BP-1",
                    "SupplierProductId": "S1",
                },
                "QuantityFrom": 1,
                "QuantityTo": 10,
                "Price": 9.5,
                "Unit": "pcs",
                "Currency": "EUR",
            }
        ],
    }


def test_resolve_keeps_tier_order_and_strips_spaces() -> None:
    tiers = TIERS + [["T2", "S1", "11", "20", "pcs", "8", "EUR"]]
    payload = JoinResolver(tiers, SKUS).resolve(_row("T2, T1"))

    assert [t.tier_id for t in payload.price_tiers] == ["T2", "T1"]
    # Columna H ausente: buyer product id vacío
    assert payload.price_tiers[0].sku.buyer_product_id == ""


def test_missing_tier_raises_reference_not_found() -> None:
    with pytest.raises(ReferenceNotFoundException) as exc_info:
        JoinResolver(TIERS, SKUS).resolve(_row("T9"))

    assert exc_info.value.entity_id == "T9"
    assert "T9" in exc_info.value.message


def test_missing_sku_raises_reference_not_found() -> None:
    tiers = [["T1", "S404", "1", "10", "pcs", "9.5", "EUR"]]

    with pytest.raises(ReferenceNotFoundException) as exc_info:
        JoinResolver(tiers, SKUS).resolve(_row("T1"))

    assert exc_info.value.entity == "SKU"
    assert exc_info.value.entity_id == "S404"


def test_one_dangling_reference_fails_whole_proposal() -> None:
    with pytest.raises(ReferenceNotFoundException):
        JoinResolver(TIERS, SKUS).resolve(_row("T1,T9"))


@pytest.mark.parametrize(
    "tier_row, column",
    [
        (["T1", "S1", "one", "10", "pcs", "9.5", "EUR"], "QuantityFrom"),
        (["T1", "S1", "1", "10.5", "pcs", "9.5", "EUR"], "QuantityTo"),
        (["T1", "S1", "1", "10", "pcs", "9,5", "EUR"], "Price"),
        (["T1", "S1", "1", "10", "pcs", "", "EUR"], "Price"),
        (["T1", "S1", "1", "10", "pcs", "NaN", "EUR"], "Price"),
        (["T1", "S1", "1", "10", "pcs", "inf", "EUR"], "Price"),
        (["T1", "S1", "1", "10", "pcs", "-Infinity", "EUR"], "Price"),
        (["T1", "S1", "1_000", "10", "pcs", "9.5", "EUR"], "QuantityFrom"),
        (["T1", "S1", " 1 ", "10", "pcs", "9.5", "EUR"], "QuantityFrom"),
        (["T1", "S1", "1", "", "pcs", "9.5", "EUR"], "QuantityTo"),
    ],
)
def test_malformed_numeric_cell_raises_parse_error(tier_row, column) -> None:
    with pytest.raises(CellParseException) as exc_info:
        JoinResolver([tier_row], SKUS).resolve(_row("T1"))

    assert exc_info.value.details["column"] == column
    assert exc_info.value.details["sheet"] == "Proposal_Tiers"


def test_first_matching_row_wins_on_duplicates() -> None:
    tiers = [
        ["T1", "S1", "1", "10", "pcs", "9.5", "EUR"],
        ["T1", "S2", "5", "50", "box", "1", "USD"],
    ]
    skus = [["S1", "Widget"], ["S1", "Widget v2"], ["S2", "Gadget"]]

    tier = JoinResolver(tiers, skus).resolve(_row("T1")).price_tiers[0]

    assert tier.sku.product_name == "Widget"
    assert tier.currency == "EUR"


def test_index_by_first_column_treats_short_rows_as_empty_id() -> None:
    index = index_by_first_column([[], ["A", "x"]])

    assert set(index) == {"", "A"}


def test_signed_integers_and_plain_floats_are_accepted() -> None:
    tiers = [["T1", "S1", "+1", "-10", "pcs", "1e2", "EUR"]]

    tier = JoinResolver(tiers, SKUS).resolve(_row("T1")).price_tiers[0]

    assert (tier.quantity_from, tier.quantity_to) == (1, -10)
    assert tier.price == pytest.approx(100.0)
