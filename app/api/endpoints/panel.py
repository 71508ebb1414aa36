"""Endpoint del panel principal (dashboard)."""
from fastapi import APIRouter, Depends

from app.api.endpoints.auth import get_current_user
from app.core.store import Almacen, get_store
from app.models import UsuarioSesion
from app.schemas.panel import PanelResponse
from app.services.panel_service import resumen_panel

router = APIRouter(prefix="/panel", tags=["panel"])


@router.get(
    "",
    response_model=PanelResponse,
    summary="Indicadores del panel",
    description="Totales, semestre activo y distribución de profesores por titulación.",
)
async def obtener_panel(
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    return resumen_panel(almacen)
