"""Endpoints del reporte de carga horaria (JSON y PDF para impresión)."""
from io import BytesIO
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse

from app.api.endpoints.auth import get_current_user
from app.core.descargas import content_disposition
from app.core.store import Almacen, get_store
from app.models import UsuarioSesion
from app.schemas.reporte import ReporteCargaHoraria
from app.services import reporte_pdf_service, reporte_service

router = APIRouter(prefix="/reportes", tags=["reportes"])


def _semestre_seleccionado(almacen: Almacen, semestre_id: str | None) -> str:
    """Sin semestre_id se usa el primero de la lista (igual que la pantalla de reportes)."""
    if semestre_id is None:
        if not almacen.semestres:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No hay semestres registrados")
        return almacen.semestres[0].id
    if not almacen.obtener_semestre(semestre_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Semestre no encontrado")
    return semestre_id


# ------------------------------------------------------------------
# GET /reportes/carga-horaria
# ------------------------------------------------------------------
@router.get(
    "/carga-horaria",
    response_model=ReporteCargaHoraria,
    summary="Carga horaria por profesor",
    description="Consolida la carga de cada profesor en el semestre. Omite profesores sin ofertas.",
)
async def reporte_carga_horaria(
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
    semestre_id: Annotated[str | None, Query(description="ID del semestre (por defecto el primero)")] = None,
):
    return reporte_service.calcular_carga_horaria(almacen, _semestre_seleccionado(almacen, semestre_id))


# ------------------------------------------------------------------
# GET /reportes/carga-horaria/pdf
# ------------------------------------------------------------------
@router.get(
    "/carga-horaria/pdf",
    summary="Carga horaria en PDF",
    description="Mismo reporte listo para imprimir, devuelto como descarga directa.",
    responses={
        200: {"content": {"application/pdf": {}}, "description": "Archivo PDF generado"},
    },
)
async def reporte_carga_horaria_pdf(
    almacen: Almacen = Depends(get_store),
    current_user: UsuarioSesion = Depends(get_current_user),
    semestre_id: Annotated[str | None, Query(description="ID del semestre (por defecto el primero)")] = None,
):
    reporte = reporte_service.calcular_carga_horaria(almacen, _semestre_seleccionado(almacen, semestre_id))
    pdf_bytes = reporte_pdf_service.generar_carga_horaria(reporte, current_user.nombre)

    filename = f"carga_horaria_{(reporte.semestre_nombre or reporte.semestre_id).replace(' ', '_')}.pdf"
    return StreamingResponse(
        BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(filename)},
    )
