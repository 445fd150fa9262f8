"""
DTOs de los puntos de entrada de sincronización.
Define la respuesta estructurada {ok, error, updates} que nunca propaga excepciones.
"""
from pydantic import BaseModel, Field


class SyncUpdatesDTO(BaseModel):
    """Contadores agregados de un ciclo."""

    new_order_items: int = Field(0, alias="newOrderItems", description="Order items agregados a la hoja")
    new_rfps: int = Field(0, alias="newRFPs", description="RFPs agregadas a la hoja")
    sent_proposals: int = Field(0, alias="sentProposals", description="Propuestas enviadas y marcadas")

    class Config:
        populate_by_name = True


class SyncResponseDTO(BaseModel):
    """
    Resultado de un punto de entrada de sincronización.
    Ante un error, ok=False, error contiene el mensaje y los contadores van en 0.
    """

    ok: bool
    error: str = ""
    updates: SyncUpdatesDTO = Field(default_factory=SyncUpdatesDTO)

    @classmethod
    def success(
        cls,
        *,
        new_order_items: int = 0,
        new_rfps: int = 0,
        sent_proposals: int = 0,
    ) -> "SyncResponseDTO":
        return cls(
            ok=True,
            updates=SyncUpdatesDTO(
                new_order_items=new_order_items,
                new_rfps=new_rfps,
                sent_proposals=sent_proposals,
            ),
        )

    @classmethod
    def failure(cls, error: str) -> "SyncResponseDTO":
        return cls(ok=False, error=error)


class SyncStatusDTO(BaseModel):
    """Estado de ambos cursores, sin escribir nada."""

    ok: bool
    error: str = ""
    local_rfps: int = Field(0, alias="localRFPs")
    remote_rfps: int = Field(0, alias="remoteRFPs")
    local_order_items: int = Field(0, alias="localOrderItems")
    local_proposals: int = Field(0, alias="localProposals")
    remote_proposals: int = Field(0, alias="remoteProposals")
    pending_inbound: int = Field(0, alias="pendingInbound", description="RFPs remotas aún no copiadas")
    pending_outbound: int = Field(0, alias="pendingOutbound", description="Filas desde el offset con flag 'No'")

    class Config:
        populate_by_name = True


class AuthResponseDTO(BaseModel):
    ok: bool
    error: str = ""
