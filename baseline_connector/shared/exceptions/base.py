"""
Excepción base para todas las excepciones personalizadas del conector.
"""
from typing import Optional, Dict, Any


class AppException(Exception):
    """
    Excepción base de la aplicación.
    Todas las excepciones del conector heredan de esta clase, de modo que
    los puntos de entrada puedan convertirlas en una respuesta estructurada.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Inicializa la excepción.

        Args:
            message: Mensaje de error legible para el usuario
            status_code: Código de estado HTTP sugerido
            error_code: Código de error estable (para clientes)
            details: Contexto adicional (ids, rangos, valores)
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Representación JSON usada por el handler global de FastAPI."""
        return {
            "ok": False,
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }
