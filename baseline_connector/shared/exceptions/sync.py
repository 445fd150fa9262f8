"""
Excepciones del ciclo de reconciliación hoja <-> servicio de catálogo.

Cualquiera de estas excepciones aborta el ciclo en curso. Las filas ya
agregadas en iteraciones previas del mismo ciclo NO se revierten.
"""
from typing import Any, Dict, Optional

from baseline_connector.shared.exceptions.base import AppException


class SyncException(AppException):
    """Excepción base para errores de sincronización."""

    def __init__(
        self,
        message: str,
        status_code: int = 502,
        error_code: str = "SYNC_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class UpstreamIOException(SyncException):
    """La hoja de cálculo o el servicio de catálogo no son alcanzables."""

    def __init__(self, source: str, message: str):
        super().__init__(
            message=f"{source}: {message}",
            error_code="UPSTREAM_IO_ERROR",
            details={"source": source},
        )


class DecodeException(SyncException):
    """El cuerpo de una respuesta no es JSON válido o no tiene la forma esperada."""

    def __init__(self, url: str, message: str):
        super().__init__(
            message=f"Respuesta inválida de {url}: {message}",
            error_code="DECODE_ERROR",
            details={"url": url},
        )


class RemoteRejectedException(SyncException):
    """El servicio de catálogo respondió con un status no exitoso a un envío."""

    def __init__(self, url: str, status_code: int, body: str = ""):
        super().__init__(
            message=f"POST {url} devolvió status {status_code}",
            error_code="REMOTE_REJECTED",
            details={"url": url, "status": status_code, "body": body[:500]},
        )
        self.remote_status = status_code


class ReferenceNotFoundException(SyncException):
    """Un id de tier o de SKU referenciado por una propuesta no existe en la hoja."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            message=f"No se encontró {entity} con id '{entity_id}'",
            status_code=422,
            error_code="REFERENCE_NOT_FOUND",
            details={"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class CellParseException(SyncException):
    """Una celda numérica de la hoja contiene texto que no se puede parsear."""

    def __init__(self, sheet: str, column: str, value: Any):
        super().__init__(
            message=f"Valor numérico inválido en {sheet}.{column}: '{value}'",
            status_code=422,
            error_code="CELL_PARSE_ERROR",
            details={"sheet": sheet, "column": column, "value": str(value)},
        )
