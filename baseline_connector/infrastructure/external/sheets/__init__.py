"""
Acceso a la hoja de cálculo (Google Sheets) como superficie tabular por filas.
"""
from .sheet_layout import DEFAULT_LAYOUT, SheetLayout
from .sheets_client import GoogleSheetsStore, build_sheets_service

__all__ = ["DEFAULT_LAYOUT", "SheetLayout", "GoogleSheetsStore", "build_sheets_service"]
