"""
Script para ejecutar el servidor del conector en modo desarrollo (autoreload).
"""
import uvicorn
from baseline_connector.core.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        log_level=settings.LOG_LEVEL.lower()
    )
