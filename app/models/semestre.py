"""Modelos Semestre y Oferta (asignación disciplina-profesor en el semestre)."""
from datetime import date

from app.models.base import ModeloBase


class EstadoSemestre:
    """Valores permitidos para estado del semestre (sin transiciones forzadas)."""
    PLANIFICACION = "planificacion"
    ACTIVO = "activo"
    CERRADO = "cerrado"


class Oferta(ModeloBase):
    """Disciplina ofrecida en un semestre, con profesor opcional (None = pendiente)."""

    id: str
    disciplina_id: str
    profesor_id: str | None = None
    carga_horaria: int


class Semestre(ModeloBase):
    """Período académico: ej. 2024.1, con su lista ordenada de ofertas."""

    id: str
    nombre: str
    estado: str = EstadoSemestre.PLANIFICACION
    fecha_inicio: date
    fecha_fin: date
    ofertas: tuple[Oferta, ...] = ()
