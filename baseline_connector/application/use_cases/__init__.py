"""
Casos de uso de la aplicacion.
"""
from .auth_use_cases import AuthUseCases
from .inbound_sync import InboundReconciler, InboundSyncResult
from .outbound_sync import OutboundReconciler, OutboundSyncResult
from .sync_use_cases import SyncUseCases, build_from_settings

__all__ = [
    "AuthUseCases",
    "InboundReconciler",
    "InboundSyncResult",
    "OutboundReconciler",
    "OutboundSyncResult",
    "SyncUseCases",
    "build_from_settings",
]
