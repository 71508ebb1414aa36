"""Routers de la API."""
from fastapi import APIRouter, Depends

from app.api.endpoints import (
    asistente,
    auth,
    disciplinas,
    panel,
    profesores,
    reportes,
    semestres,
)
from app.api.endpoints.auth import get_current_user
from app.models import UsuarioSesion
from app.schemas.auth import UsuarioItem

router = APIRouter()
router.include_router(auth.router)
router.include_router(panel.router)
router.include_router(profesores.router)
router.include_router(disciplinas.router)
router.include_router(semestres.router)
router.include_router(reportes.router)
router.include_router(asistente.router)


@router.get(
    "/me",
    tags=["api"],
    response_model=UsuarioItem,
    summary="Usuario actual (protegido)",
    response_description="Datos del usuario autenticado",
    responses={
        200: {"description": "Usuario obtenido correctamente"},
        401: {"description": "Token no enviado, inválido o expirado"},
    },
)
async def get_me(current_user: UsuarioSesion = Depends(get_current_user)):
    """
    Devuelve el usuario actual a partir del JWT (nombre, rol y departamento).
    **Requiere:** header `Authorization: Bearer <access_token>`.
    """
    return UsuarioItem(**current_user.model_dump())


@router.get("/", tags=["api"], summary="Raíz de la API v1")
async def root():
    return {"message": "SIGEP API v1"}
