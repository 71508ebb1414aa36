"""Endpoints del planificador de semestres y sus ofertas."""
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.endpoints.auth import get_current_user
from app.core.store import Almacen, get_store
from app.models import Semestre, UsuarioSesion
from app.schemas.semestre import (
    EstadoSemestreUpdate,
    OfertaCreate,
    OfertaItem,
    SemestreCreate,
    SemestreItem,
    SemestreListResponse,
)

# Carga horaria usada cuando ni la oferta ni la disciplina la definen
CARGA_HORARIA_POR_DEFECTO = 60

router = APIRouter(prefix="/semestres", tags=["semestres"])


def _semestre_item(almacen: Almacen, s: Semestre) -> SemestreItem:
    ofertas = []
    for o in s.ofertas:
        disciplina = almacen.obtener_disciplina(o.disciplina_id)
        profesor = almacen.obtener_profesor(o.profesor_id)
        if profesor:
            profesor_nombre = profesor.nombre
        else:
            profesor_nombre = "Pendiente" if o.profesor_id is None else "Desconocido"
        ofertas.append(
            OfertaItem(
                id=o.id,
                disciplina_id=o.disciplina_id,
                disciplina_nombre=disciplina.nombre if disciplina else "Desconocida",
                profesor_id=o.profesor_id,
                profesor_nombre=profesor_nombre,
                carga_horaria=o.carga_horaria,
            )
        )
    return SemestreItem(
        id=s.id,
        nombre=s.nombre,
        estado=s.estado,
        fecha_inicio=s.fecha_inicio,
        fecha_fin=s.fecha_fin,
        ofertas=ofertas,
        total_horas=sum(o.carga_horaria for o in s.ofertas),
    )


def _semestre_o_404(almacen: Almacen, semestre_id: str) -> Semestre:
    semestre = almacen.obtener_semestre(semestre_id)
    if not semestre:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Semestre no encontrado")
    return semestre


@router.get(
    "",
    response_model=SemestreListResponse,
    summary="Listar semestres",
    description="Semestres con sus ofertas; los nombres de disciplina y profesor vienen resueltos.",
)
async def listar_semestres(
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    return SemestreListResponse(semestres=[_semestre_item(almacen, s) for s in almacen.semestres])


@router.post(
    "",
    response_model=SemestreItem,
    status_code=status.HTTP_201_CREATED,
    summary="Crear semestre",
)
async def crear_semestre(
    body: SemestreCreate,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    return _semestre_item(almacen, almacen.agregar_semestre(body.model_dump()))


@router.get(
    "/{semestre_id}",
    response_model=SemestreItem,
    summary="Detalle de semestre",
)
async def obtener_semestre(
    semestre_id: str,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    return _semestre_item(almacen, _semestre_o_404(almacen, semestre_id))


@router.put(
    "/{semestre_id}",
    response_model=SemestreItem,
    summary="Editar semestre",
    description="Reemplaza nombre, fechas y estado. Las ofertas se conservan.",
)
async def actualizar_semestre(
    semestre_id: str,
    body: SemestreCreate,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    actual = _semestre_o_404(almacen, semestre_id)
    semestre = almacen.actualizar_semestre(actual.model_copy(update=body.model_dump()))
    return _semestre_item(almacen, semestre)


@router.patch(
    "/{semestre_id}/estado",
    response_model=SemestreItem,
    summary="Cambiar estado del semestre",
    description="Sobrescribe el estado sin validar la transición.",
)
async def actualizar_estado(
    semestre_id: str,
    body: EstadoSemestreUpdate,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    _semestre_o_404(almacen, semestre_id)
    almacen.actualizar_estado_semestre(semestre_id, body.estado)
    return _semestre_item(almacen, almacen.obtener_semestre(semestre_id))


@router.post(
    "/{semestre_id}/ofertas",
    response_model=OfertaItem,
    status_code=status.HTTP_201_CREATED,
    summary="Asignar disciplina al semestre",
    description=(
        "Crea una oferta. Sin profesor queda pendiente de asignación. "
        "Sin carga horaria se usa la de la disciplina (o 60 horas)."
    ),
)
async def agregar_oferta(
    semestre_id: str,
    body: OfertaCreate,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    _semestre_o_404(almacen, semestre_id)
    disciplina = almacen.obtener_disciplina(body.disciplina_id)
    carga = (
        body.carga_horaria
        or (disciplina.carga_horaria if disciplina else 0)
        or CARGA_HORARIA_POR_DEFECTO
    )
    oferta = almacen.agregar_oferta(
        semestre_id,
        {
            "disciplina_id": body.disciplina_id,
            "profesor_id": body.profesor_id,
            "carga_horaria": carga,
        },
    )
    item = _semestre_item(almacen, almacen.obtener_semestre(semestre_id))
    return next(o for o in item.ofertas if o.id == oferta.id)


@router.delete(
    "/{semestre_id}/ofertas/{oferta_id}",
    summary="Quitar oferta del semestre",
)
async def eliminar_oferta(
    semestre_id: str,
    oferta_id: str,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    semestre = _semestre_o_404(almacen, semestre_id)
    if not any(o.id == oferta_id for o in semestre.ofertas):
        raise HTTPException(status_code=404, detail="Oferta no encontrada en el semestre")
    almacen.eliminar_oferta(semestre_id, oferta_id)
    return {"message": "Oferta eliminada correctamente"}
