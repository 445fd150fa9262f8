"""
Interfaz del servicio de catálogo remoto (RFPs y Proposals).
"""

from __future__ import annotations

from typing import Protocol

from baseline_connector.domain.entities.catalog import ProposalPayload, RFP, RFPSummary


class CatalogService(Protocol):
    """
    Implementaciones:
    - HTTP con requests (CatalogClient).
    - Fake en memoria para tests.

    Todos los métodos lanzan UpstreamIOException si el servicio no es
    alcanzable y DecodeException si la respuesta no se puede decodificar.
    """

    def list_rfps(self) -> list[RFPSummary]:
        """GET /RequestForProposals, en el orden que define el servicio."""

    def get_rfp(self, rfp_id: str) -> RFP:
        """GET /RequestForProposals/{id}, con sus OrderItems."""

    def list_proposals(self) -> list[str]:
        """GET /Proposals: ids de propuestas ya conocidas por el servicio."""

    def submit_proposal(self, payload: ProposalPayload) -> None:
        """POST /Proposals. Lanza RemoteRejectedException si el status no es 2xx."""

    def authenticate(self, email: str, password: str) -> None:
        """POST /Authentication. Lanza RemoteRejectedException si el status no es 2xx."""
