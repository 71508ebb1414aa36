"""Esquemas para semestres y ofertas."""
from datetime import date

from pydantic import BaseModel, Field, field_validator

ESTADOS_SEMESTRE = ["planificacion", "activo", "cerrado"]


def _validar_estado(v: str) -> str:
    if v not in ESTADOS_SEMESTRE:
        raise ValueError(f"estado debe ser uno de: {', '.join(ESTADOS_SEMESTRE)}")
    return v


class SemestreCreate(BaseModel):
    """Body para crear o editar un semestre. Al crear, el estado por defecto es planificacion."""

    nombre: str = Field(description="Nombre del semestre (ej. 2024.1)", min_length=1)
    fecha_inicio: date = Field(description="Fecha de inicio")
    fecha_fin: date = Field(description="Fecha de fin")
    estado: str = Field(default="planificacion", description="planificacion, activo o cerrado")

    @field_validator("estado")
    @classmethod
    def validar_estado(cls, v: str) -> str:
        return _validar_estado(v)


class EstadoSemestreUpdate(BaseModel):
    """Body para cambiar el estado del semestre (sin validar la transición)."""

    estado: str = Field(description="planificacion, activo o cerrado")

    @field_validator("estado")
    @classmethod
    def validar_estado(cls, v: str) -> str:
        return _validar_estado(v)


class OfertaCreate(BaseModel):
    """Body para asignar una disciplina (y opcionalmente un profesor) al semestre."""

    disciplina_id: str = Field(description="ID de la disciplina", min_length=1)
    profesor_id: str | None = Field(default=None, description="ID del profesor; vacío = pendiente de asignación")
    carga_horaria: int | None = Field(
        default=None,
        description="Carga horaria de la oferta. Si no se envía se usa la de la disciplina.",
    )

    @field_validator("profesor_id")
    @classmethod
    def vacio_es_pendiente(cls, v: str | None) -> str | None:
        return v or None


class OfertaItem(BaseModel):
    """Oferta con los nombres de disciplina y profesor ya resueltos."""

    id: str
    disciplina_id: str
    disciplina_nombre: str
    profesor_id: str | None
    profesor_nombre: str
    carga_horaria: int


class SemestreItem(BaseModel):
    """Semestre con sus ofertas."""

    id: str
    nombre: str
    estado: str
    fecha_inicio: date
    fecha_fin: date
    ofertas: list[OfertaItem]
    total_horas: int


class SemestreListResponse(BaseModel):
    """Respuesta del listado de semestres."""

    semestres: list[SemestreItem]
