"""
Endpoint de autenticación.

Reenvía email/password al servicio de catálogo. No se emiten tokens ni se
guarda estado de sesión.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from baseline_connector.api.v1.dependencies.use_case_deps import get_auth_use_cases
from baseline_connector.application.dto.sync_dto import AuthResponseDTO
from baseline_connector.application.use_cases.auth_use_cases import AuthUseCases


router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "",
    response_model=AuthResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Validar credenciales contra el servicio de catálogo",
)
def authenticate(
    email: Optional[str] = Query(default=None),
    password: Optional[str] = Query(default=None),
    use_cases: AuthUseCases = Depends(get_auth_use_cases),
) -> AuthResponseDTO:
    return use_cases.login(email, password)
