"""Endpoints del catálogo de disciplinas."""
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.endpoints.auth import get_current_user
from app.core.store import Almacen, get_store
from app.models import Disciplina, UsuarioSesion
from app.schemas.disciplina import DisciplinaCreate, DisciplinaItem, DisciplinaListResponse

router = APIRouter(prefix="/disciplinas", tags=["disciplinas"])


def _disciplina_item(d: Disciplina) -> DisciplinaItem:
    return DisciplinaItem(id=d.id, nombre=d.nombre, codigo=d.codigo, carga_horaria=d.carga_horaria)


def _disciplina_o_404(almacen: Almacen, disciplina_id: str) -> Disciplina:
    disciplina = almacen.obtener_disciplina(disciplina_id)
    if not disciplina:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Disciplina no encontrada")
    return disciplina


@router.get(
    "",
    response_model=DisciplinaListResponse,
    summary="Listar disciplinas",
)
async def listar_disciplinas(
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    return DisciplinaListResponse(disciplinas=[_disciplina_item(d) for d in almacen.disciplinas])


@router.post(
    "",
    response_model=DisciplinaItem,
    status_code=status.HTTP_201_CREATED,
    summary="Crear disciplina",
    description="El código no se valida como único.",
)
async def crear_disciplina(
    body: DisciplinaCreate,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    return _disciplina_item(almacen.agregar_disciplina(body.model_dump()))


@router.put(
    "/{disciplina_id}",
    response_model=DisciplinaItem,
    summary="Editar disciplina",
)
async def actualizar_disciplina(
    disciplina_id: str,
    body: DisciplinaCreate,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    actual = _disciplina_o_404(almacen, disciplina_id)
    disciplina = almacen.actualizar_disciplina(actual.model_copy(update=body.model_dump()))
    return _disciplina_item(disciplina)


@router.delete(
    "/{disciplina_id}",
    summary="Eliminar disciplina",
    description="Las ofertas que usan la disciplina se conservan y se muestran como 'Desconocida'.",
)
async def eliminar_disciplina(
    disciplina_id: str,
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    _disciplina_o_404(almacen, disciplina_id)
    almacen.eliminar_disciplina(disciplina_id)
    return {"message": "Disciplina eliminada correctamente"}
