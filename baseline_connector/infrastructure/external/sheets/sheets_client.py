"""
Cliente mínimo de Google Sheets v4 usado como TabularStore.

Requisitos cubiertos:
- credenciales de service account (archivo JSON)
- values.get / values.append / values.update con valueInputOption=RAW
- traducción de errores de red/API (HttpError, httplib2, google-auth) a UpstreamIOException

Sin reintentos: un error aborta el ciclo de sincronización en curso.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from loguru import logger

from baseline_connector.shared.exceptions.sync import UpstreamIOException


SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
SOURCE_NAME = "Google Sheets"


def build_sheets_service(credentials_file: str):
    """
    Construye el recurso `sheets v4` autenticado con un service account.

    Lanza UpstreamIOException si el archivo no existe o no es una clave válida.
    """
    path = Path(credentials_file).expanduser()
    if not path.exists():
        raise UpstreamIOException(SOURCE_NAME, f"No existe el archivo de credenciales: {path}")

    try:
        credentials = service_account.Credentials.from_service_account_file(
            str(path), scopes=SCOPES
        )
    except (ValueError, KeyError) as e:
        raise UpstreamIOException(
            SOURCE_NAME, f"Archivo de credenciales inválido ({path}): {e}"
        ) from e
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


class GoogleSheetsStore:
    """
    Implementación de TabularStore sobre un spreadsheet concreto.

    Importante:
    - No hace cast de tipos: las celdas se devuelven como texto.
    - El servicio `sheets v4` se puede inyectar (tests) o construir desde
      el archivo de credenciales.
    """

    def __init__(
        self,
        spreadsheet_id: str,
        *,
        service: Any = None,
        credentials_file: Optional[str] = None,
    ) -> None:
        if service is None:
            if not credentials_file:
                raise UpstreamIOException(SOURCE_NAME, "Falta el archivo de credenciales")
            service = build_sheets_service(credentials_file)
        self._spreadsheet_id = spreadsheet_id
        self._values = service.spreadsheets().values()

    def read_range(self, range_spec: str) -> list[list[str]]:
        request = self._values.get(
            spreadsheetId=self._spreadsheet_id,
            range=range_spec,
            majorDimension="ROWS",
        )
        payload = self._execute(request, f"values.get {range_spec}")
        rows = payload.get("values") or []
        return [["" if v is None else str(v) for v in row] for row in rows]

    def append_row(self, range_spec: str, row: Sequence[str]) -> None:
        request = self._values.append(
            spreadsheetId=self._spreadsheet_id,
            range=range_spec,
            valueInputOption="RAW",
            body={"values": [list(row)]},
        )
        self._execute(request, f"values.append {range_spec}")
        logger.debug(f"Fila agregada en {range_spec}: {list(row)}")

    def update_cell(self, range_spec: str, row: Sequence[str]) -> None:
        request = self._values.update(
            spreadsheetId=self._spreadsheet_id,
            range=range_spec,
            valueInputOption="RAW",
            body={"values": [list(row)]},
        )
        self._execute(request, f"values.update {range_spec}")
        logger.debug(f"Rango actualizado {range_spec}: {list(row)}")

    def _execute(self, request: Any, operation: str) -> dict[str, Any]:
        try:
            return request.execute() or {}
        except HttpError as e:
            status = getattr(e.resp, "status", "?")
            raise UpstreamIOException(
                SOURCE_NAME, f"{operation} falló con status {status}: {e}"
            ) from e
        except (GoogleAuthError, httplib2.HttpLib2Error, OSError) as e:
            raise UpstreamIOException(SOURCE_NAME, f"{operation} falló: {e}") from e
