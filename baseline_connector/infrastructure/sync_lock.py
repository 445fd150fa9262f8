"""
Lock de proceso para los ciclos de sincronización.

Motivacion:
- La identidad de RFPs/propuestas es posicional (el conteo de filas es el cursor).
- Dos corridas solapadas ven el mismo sufijo "nuevo" y duplican filas.
- Este lock solo protege dentro de un proceso; no hay fencing entre procesos.

Si el lock está tomado no se espera: el llamador recibe
SyncAlreadyRunningException y la corrida se descarta.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from loguru import logger

from baseline_connector.shared.exceptions.base import AppException


class SyncAlreadyRunningException(AppException):
    """Excepcion lanzada cuando ya hay un ciclo de sincronizacion en curso."""

    def __init__(self, running: Optional[str]):
        super().__init__(
            message=f"Sync already running ({running or 'desconocido'})",
            status_code=409,
            error_code="SYNC_ALREADY_RUNNING",
            details={"running": running},
        )


class SyncRunLock:
    """
    Lock no bloqueante compartido por todos los puntos de entrada.

    Usa `threading.Lock` porque los ciclos corren de forma sincrona (en el
    thread del CLI o en un worker via `asyncio.to_thread`).
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._holder: Optional[str] = None

    @property
    def is_locked(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def hold(self, name: str) -> Iterator[None]:
        """
        Ejemplo:
            with lock.hold("inbound"):
                reconciler.sync()
        """
        if not self._lock.acquire(blocking=False):
            logger.warning(f"Sync '{name}' descartado: '{self._holder}' sigue en curso")
            raise SyncAlreadyRunningException(self._holder)
        self._holder = name
        try:
            yield
        finally:
            self._holder = None
            self._lock.release()


# Instancia compartida por el API y el CLI dentro de un mismo proceso
sync_run_lock = SyncRunLock()
