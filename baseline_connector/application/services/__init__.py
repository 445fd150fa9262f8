"""
Servicios de aplicacion.

Contiene la logica reutilizable que no pertenece a un caso de uso especifico.
"""
from baseline_connector.application.services.join_resolver import JoinResolver

__all__ = ["JoinResolver"]
