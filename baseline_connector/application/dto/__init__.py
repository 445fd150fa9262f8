"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .sync_dto import AuthResponseDTO, SyncResponseDTO, SyncStatusDTO, SyncUpdatesDTO

__all__ = ["AuthResponseDTO", "SyncResponseDTO", "SyncStatusDTO", "SyncUpdatesDTO"]
