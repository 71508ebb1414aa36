"""Esquemas para el catálogo de disciplinas."""
from pydantic import BaseModel, Field


class DisciplinaCreate(BaseModel):
    """Body para crear o editar una disciplina."""

    nombre: str = Field(description="Nombre de la disciplina", min_length=1)
    codigo: str = Field(description="Código corto (ej. MAT01)", min_length=1)
    carga_horaria: int = Field(default=60, description="Carga horaria por defecto (horas)")


class DisciplinaItem(BaseModel):
    """Fila del catálogo de disciplinas."""

    id: str
    nombre: str
    codigo: str
    carga_horaria: int


class DisciplinaListResponse(BaseModel):
    """Respuesta del listado de disciplinas."""

    disciplinas: list[DisciplinaItem]
