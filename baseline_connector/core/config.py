"""
Configuracion central del conector.
Gestiona variables de entorno y configuraciones globales.

Todo valor por despliegue (URL del servicio de catalogo, spreadsheet,
credenciales) se lee aqui y se pasa explicitamente a los clientes.
"""
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field


class Settings(BaseSettings):
    """
    Clase de configuracion de la aplicacion.
    Lee variables de entorno (o .env) y proporciona valores por defecto.
    """

    # Configuracion de la aplicacion
    APP_NAME: str = Field(default="Spreadsheet Baseline Connector")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Configuracion del servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=9090)

    # Servicio de catalogo (RFPs / Proposals)
    CATALOG_BASE_URL: str = Field(default="")
    CATALOG_TIMEOUT_S: float = Field(default=30.0)

    # Google Sheets
    SPREADSHEET_ID: str = Field(default="")
    GOOGLE_CREDENTIALS_FILE: str = Field(default="./credentials.json")

    # Valor escrito en la columna "buyer" de cada RFP agregada
    RFP_BUYER_LABEL: str = Field(default="Buyer")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/connector.log")

    @computed_field
    @property
    def is_development(self) -> bool:
        """Indica si el entorno es de desarrollo."""
        return self.ENVIRONMENT.lower() == "development"

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra del .env


# Instancia global de configuracion
settings = Settings()
