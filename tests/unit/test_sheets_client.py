from __future__ import annotations

from unittest.mock import Mock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from baseline_connector.infrastructure.external.sheets.sheets_client import (
    GoogleSheetsStore,
    build_sheets_service,
)
from baseline_connector.shared.exceptions.sync import UpstreamIOException


def _store() -> tuple[GoogleSheetsStore, Mock]:
    service = Mock()
    values = service.spreadsheets.return_value.values.return_value
    return GoogleSheetsStore("sheet-123", service=service), values


def test_read_range_returns_rows_as_text() -> None:
    store, values = _store()
    values.get.return_value.execute.return_value = {"values": [["A", 1], ["B", None]]}

    rows = store.read_range("RFPS!A2:D")

    assert rows == [["A", "1"], ["B", ""]]
    values.get.assert_called_once_with(
        spreadsheetId="sheet-123", range="RFPS!A2:D", majorDimension="ROWS"
    )


def test_read_range_of_empty_sheet_returns_no_rows() -> None:
    store, values = _store()
    values.get.return_value.execute.return_value = {"range": "RFPS!A2:D1000"}

    assert store.read_range("RFPS!A2:D") == []


def test_append_row_uses_raw_input() -> None:
    store, values = _store()

    store.append_row("Order_Items!A2", ["R1", "1", "SKU", "2.000000", "kg"])

    values.append.assert_called_once_with(
        spreadsheetId="sheet-123",
        range="Order_Items!A2",
        valueInputOption="RAW",
        body={"values": [["R1", "1", "SKU", "2.000000", "kg"]]},
    )
    values.append.return_value.execute.assert_called_once()


def test_update_cell_writes_single_range() -> None:
    store, values = _store()

    store.update_cell("Proposals!E3:E3", ["Yes"])

    values.update.assert_called_once_with(
        spreadsheetId="sheet-123",
        range="Proposals!E3:E3",
        valueInputOption="RAW",
        body={"values": [["Yes"]]},
    )


def test_http_error_is_translated_to_upstream_io() -> None:
    store, values = _store()
    values.get.return_value.execute.side_effect = HttpError(
        Mock(status=403, reason="Forbidden"), b""
    )

    with pytest.raises(UpstreamIOException) as exc_info:
        store.read_range("SKU!A2:Z")

    assert "403" in exc_info.value.message
    assert exc_info.value.details["source"] == "Google Sheets"


def test_network_error_is_translated_to_upstream_io() -> None:
    store, values = _store()
    values.append.return_value.execute.side_effect = ConnectionResetError("reset")

    with pytest.raises(UpstreamIOException):
        store.append_row("RFPS!A2", ["R1"])


def test_unresolvable_host_is_translated_to_upstream_io() -> None:
    store, values = _store()
    values.update.return_value.execute.side_effect = httplib2.ServerNotFoundError(
        "Unable to find the server at sheets.googleapis.com"
    )

    with pytest.raises(UpstreamIOException) as exc_info:
        store.update_cell("Proposals!E2:E2", ["Yes"])

    assert "sheets.googleapis.com" in exc_info.value.message


def test_missing_credentials_file(tmp_path) -> None:
    with pytest.raises(UpstreamIOException) as exc_info:
        build_sheets_service(str(tmp_path / "credentials.json"))

    assert "credentials.json" in exc_info.value.message


def test_invalid_credentials_file(tmp_path) -> None:
    path = tmp_path / "credentials.json"
    path.write_text("{}", encoding="utf-8")

    with pytest.raises(UpstreamIOException):
        build_sheets_service(str(path))


def test_store_requires_service_or_credentials() -> None:
    with pytest.raises(UpstreamIOException):
        GoogleSheetsStore("sheet-123")
