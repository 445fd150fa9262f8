"""
Cliente HTTP del servicio de catálogo (RFPs / Proposals).

Requisitos cubiertos:
- requests (Session inyectable)
- base URL explícita por constructor (una por despliegue)
- decodificación JSON -> entidades del dominio
- sin reintentos: el primer error aborta el ciclo en curso
"""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

import requests
from loguru import logger

from baseline_connector.domain.entities.catalog import OrderItem, ProposalPayload, RFP, RFPSummary
from baseline_connector.shared.exceptions.sync import (
    DecodeException,
    RemoteRejectedException,
    UpstreamIOException,
)


SOURCE_NAME = "Catalog service"


def _require_str(obj: dict[str, Any], key: str, url: str) -> str:
    value = obj.get(key)
    if value is None or value == "":
        raise DecodeException(url, f"falta el campo '{key}'")
    return str(value)


def _optional_str(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key)
    return "" if value is None else str(value)


def _require_object(payload: Any, url: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise DecodeException(url, f"se esperaba un objeto JSON, se recibió {type(payload).__name__}")
    return payload


def _require_list(payload: Any, url: str) -> list[Any]:
    if not isinstance(payload, list):
        raise DecodeException(url, f"se esperaba una lista JSON, se recibió {type(payload).__name__}")
    return payload


def parse_rfp_summary(obj: Any, url: str) -> RFPSummary:
    data = _require_object(obj, url)
    return RFPSummary(
        rfp_id=_require_str(data, "requestForProposalId", url),
        buyer_id=_optional_str(data, "buyerId"),
        supplier_id=_optional_str(data, "supplierId"),
        latest_delivery_date=_optional_str(data, "latestDeliveryDate"),
    )


def parse_order_item(obj: Any, url: str) -> OrderItem:
    data = _require_object(obj, url)
    try:
        order_item_id = int(data.get("orderItemId", 0))
        quantity = float(data.get("quantity", 0.0))
    except (TypeError, ValueError) as e:
        raise DecodeException(url, f"order item con valores numéricos inválidos: {data}") from e
    return OrderItem(
        order_item_id=order_item_id,
        sku_buyer=_optional_str(data, "skuBuyer"),
        quantity=quantity,
        unit=_optional_str(data, "unit"),
    )


def parse_rfp(obj: Any, url: str) -> RFP:
    data = _require_object(obj, url)
    items = data.get("items") or []
    return RFP(
        rfp_id=_require_str(data, "requestForProposalId", url),
        supplier_id=_optional_str(data, "supplierId"),
        latest_delivery_date=_optional_str(data, "latestDeliveryDate"),
        items=[parse_order_item(i, url) for i in _require_list(items, url)],
    )


class CatalogClient:
    """
    Implementación HTTP de CatalogService.

    Importante:
    - El orden de GET /RequestForProposals se respeta tal cual: el conector
      lo usa como cursor posicional.
    - Un GET con status no exitoso se considera servicio no disponible.
    """

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout_s: float = 30,
    ) -> None:
        if not base_url:
            raise UpstreamIOException(SOURCE_NAME, "CATALOG_BASE_URL no configurada")
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def list_rfps(self) -> list[RFPSummary]:
        url = self._url("/RequestForProposals")
        payload = _require_list(self._get_json(url), url)
        return [parse_rfp_summary(obj, url) for obj in payload]

    def get_rfp(self, rfp_id: str) -> RFP:
        url = self._url(f"/RequestForProposals/{quote(rfp_id, safe='')}")
        return parse_rfp(self._get_json(url), url)

    def list_proposals(self) -> list[str]:
        url = self._url("/Proposals")
        payload = _require_list(self._get_json(url), url)
        return [_optional_str(_require_object(obj, url), "proposalId") for obj in payload]

    def submit_proposal(self, payload: ProposalPayload) -> None:
        url = self._url("/Proposals")
        resp = self._request("POST", url, json_body=payload.to_payload())
        if not 200 <= resp.status_code < 300:
            raise RemoteRejectedException(url, resp.status_code, resp.text)
        logger.debug(f"Propuesta {payload.proposal_id} aceptada por el servicio ({resp.status_code})")

    def authenticate(self, email: str, password: str) -> None:
        url = self._url("/Authentication")
        resp = self._request(
            "POST", url, params={"email": email, "password": password}, data=""
        )
        if not 200 <= resp.status_code < 300:
            raise RemoteRejectedException(url, resp.status_code, resp.text)

    def _get_json(self, url: str) -> Any:
        resp = self._request("GET", url)
        if not 200 <= resp.status_code < 300:
            raise UpstreamIOException(
                SOURCE_NAME, f"GET {url} devolvió status {resp.status_code}: {resp.text[:500]}"
            )
        try:
            return resp.json()
        except ValueError as e:
            raise DecodeException(url, str(e)) from e

    def _request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json_body: Any = None,
        data: Any = None,
    ) -> requests.Response:
        try:
            return self._session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                data=data,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout_s,
            )
        except requests.RequestException as e:
            raise UpstreamIOException(SOURCE_NAME, f"{method} {url} falló: {e}") from e
