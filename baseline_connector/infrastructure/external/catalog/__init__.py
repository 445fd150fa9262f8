"""
Cliente del servicio de catálogo remoto (RFPs y Proposals) sobre HTTP.
"""
from .catalog_client import CatalogClient

__all__ = ["CatalogClient"]
