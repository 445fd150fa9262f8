"""
Interfaz de la hoja de cálculo vista como superficie tabular indexada por fila.

Este contrato existe para:
- Que los reconciliadores no dependan de la API de Google Sheets.
- Facilitar tests unitarios con una hoja en memoria.
"""

from __future__ import annotations

from typing import Protocol, Sequence


class TabularStore(Protocol):
    """
    Lectura y escritura por rangos A1 (ej: "RFPS!A2:D").

    Implementaciones:
    - Google Sheets v4 (GoogleSheetsStore).
    - Fake en memoria para tests.
    """

    def read_range(self, range_spec: str) -> list[list[str]]:
        """
        Lee un rango rectangular. Las filas vacías al final no se devuelven
        y cada fila puede venir más corta que el rango si sus últimas celdas
        están vacías.
        """

    def append_row(self, range_spec: str, row: Sequence[str]) -> None:
        """Agrega una fila después de la última fila con datos del rango."""

    def update_cell(self, range_spec: str, row: Sequence[str]) -> None:
        """Sobrescribe el rango indicado con los valores de una fila."""
