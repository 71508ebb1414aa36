"""Endpoints del plantel de profesores: alta, edición, documentos y exportación."""
import base64
import binascii
import logging
from io import BytesIO
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from fastapi.responses import StreamingResponse

from app.api.endpoints.auth import get_current_user
from app.core.descargas import content_disposition
from app.core.store import Almacen, get_store
from app.models import Documento, Profesor, UsuarioSesion
from app.schemas.profesor import (
    DocumentoItem,
    DocumentoListResponse,
    ProfesorCreate,
    ProfesorItem,
    ProfesorListResponse,
)
from app.services import exportacion_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profesores", tags=["profesores"])


def _documento_item(d: Documento) -> DocumentoItem:
    return DocumentoItem(id=d.id, nombre=d.nombre, tipo=d.tipo, fecha_subida=d.fecha_subida)


def _profesor_item(p: Profesor) -> ProfesorItem:
    return ProfesorItem(
        id=p.id,
        nombre=p.nombre,
        email=p.email,
        documento_identidad=p.documento_identidad,
        titulacion=p.titulacion,
        area=p.area,
        carga_maxima=p.carga_maxima,
        activo=p.activo,
        total_documentos=len(p.documentos),
        documentos=[_documento_item(d) for d in p.documentos],
    )


def _profesor_o_404(almacen: Almacen, profesor_id: str) -> Profesor:
    profesor = almacen.obtener_profesor(profesor_id)
    if not profesor:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profesor no encontrado")
    return profesor


@router.get(
    "",
    response_model=ProfesorListResponse,
    summary="Listar profesores",
    description="Lista los profesores en el orden de registro. Opcional: filtrar por nombre o área.",
)
async def listar_profesores(
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
    busqueda: Annotated[str | None, Query(description="Texto a buscar en nombre o área")] = None,
):
    profesores = almacen.profesores
    if busqueda:
        termino = busqueda.lower()
        profesores = tuple(
            p for p in profesores if termino in p.nombre.lower() or termino in p.area.lower()
        )
    return ProfesorListResponse(profesores=[_profesor_item(p) for p in profesores])


@router.get(
    "/exportar",
    summary="Exportar profesores",
    description="Descarga el plantel completo en CSV (por defecto) o Excel (.xlsx).",
    responses={
        200: {
            "content": {
                "text/csv": {},
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": {},
            },
            "description": "Archivo generado",
        },
    },
)
async def exportar_profesores(
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
    formato: Annotated[Literal["csv", "xlsx"], Query(description="csv o xlsx")] = "csv",
):
    nombre = exportacion_service.NOMBRE_ARCHIVO
    if formato == "xlsx":
        contenido = exportacion_service.exportar_excel(almacen.profesores)
        media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    else:
        contenido = exportacion_service.exportar_csv(almacen.profesores).encode("utf-8")
        media_type = "text/csv; charset=utf-8"
    return StreamingResponse(
        BytesIO(contenido),
        media_type=media_type,
        headers={"Content-Disposition": content_disposition(f"{nombre}.{formato}")},
    )


@router.post(
    "",
    response_model=ProfesorItem,
    status_code=status.HTTP_201_CREATED,
    summary="Crear profesor",
)
async def crear_profesor(
    body: ProfesorCreate,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    profesor = almacen.agregar_profesor(body.model_dump())
    logger.info("Profesor '%s' creado (id=%s)", profesor.nombre, profesor.id)
    return _profesor_item(profesor)


@router.get(
    "/{profesor_id}",
    response_model=ProfesorItem,
    summary="Detalle de profesor",
)
async def obtener_profesor(
    profesor_id: str,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    return _profesor_item(_profesor_o_404(almacen, profesor_id))


@router.put(
    "/{profesor_id}",
    response_model=ProfesorItem,
    summary="Editar profesor",
    description="Reemplaza los datos del profesor. Los documentos se conservan.",
)
async def actualizar_profesor(
    profesor_id: str,
    body: ProfesorCreate,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    actual = _profesor_o_404(almacen, profesor_id)
    profesor = almacen.actualizar_profesor(actual.model_copy(update=body.model_dump()))
    return _profesor_item(profesor)


@router.delete(
    "/{profesor_id}",
    summary="Eliminar profesor",
    description="Elimina el profesor y sus documentos. Las ofertas que lo referencian quedan sin profesor conocido.",
)
async def eliminar_profesor(
    profesor_id: str,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    _profesor_o_404(almacen, profesor_id)
    almacen.eliminar_profesor(profesor_id)
    logger.info("Profesor %s eliminado", profesor_id)
    return {"message": "Profesor eliminado correctamente"}


# ------------------------------------------------------------------
# Documentos
# ------------------------------------------------------------------
@router.get(
    "/{profesor_id}/documentos",
    response_model=DocumentoListResponse,
    summary="Listar documentos del profesor",
)
async def listar_documentos(
    profesor_id: str,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    profesor = _profesor_o_404(almacen, profesor_id)
    return DocumentoListResponse(documentos=[_documento_item(d) for d in profesor.documentos])


@router.post(
    "/{profesor_id}/documentos",
    response_model=DocumentoItem,
    status_code=status.HTTP_201_CREATED,
    summary="Subir documento",
    description="Sube un PDF o imagen. Se guarda en memoria como data URI en base64.",
)
async def subir_documento(
    profesor_id: str,
    archivo: UploadFile = File(..., description="Archivo PDF o imagen"),
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    _profesor_o_404(almacen, profesor_id)
    tipo = archivo.content_type or "application/octet-stream"
    if tipo != "application/pdf" and not tipo.startswith("image/"):
        raise HTTPException(status_code=400, detail="El archivo debe ser PDF o imagen")

    contenido = await archivo.read()
    data_url = f"data:{tipo};base64,{base64.b64encode(contenido).decode('ascii')}"
    documento = almacen.agregar_documento(
        profesor_id,
        nombre=archivo.filename or "sin_nombre",
        tipo=tipo,
        data_url=data_url,
    )
    return _documento_item(documento)


@router.get(
    "/{profesor_id}/documentos/{documento_id}",
    summary="Descargar documento",
    responses={200: {"description": "Contenido original del documento"}},
)
async def descargar_documento(
    profesor_id: str,
    documento_id: str,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    profesor = _profesor_o_404(almacen, profesor_id)
    documento = next((d for d in profesor.documentos if d.id == documento_id), None)
    if not documento:
        raise HTTPException(status_code=404, detail="Documento no encontrado")

    try:
        contenido = base64.b64decode(documento.data_url.split(",", 1)[1])
    except (IndexError, binascii.Error):
        raise HTTPException(status_code=500, detail="El documento almacenado está dañado")
    return StreamingResponse(
        BytesIO(contenido),
        media_type=documento.tipo,
        headers={"Content-Disposition": content_disposition(documento.nombre)},
    )


@router.delete(
    "/{profesor_id}/documentos/{documento_id}",
    summary="Eliminar documento",
)
async def eliminar_documento(
    profesor_id: str,
    documento_id: str,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    profesor = _profesor_o_404(almacen, profesor_id)
    if not any(d.id == documento_id for d in profesor.documentos):
        raise HTTPException(status_code=404, detail="Documento no encontrado")
    almacen.eliminar_documento(profesor_id, documento_id)
    return {"message": "Documento eliminado correctamente"}
