"""Modelo Disciplina (catálogo de materias)."""
from app.models.base import ModeloBase


class Disciplina(ModeloBase):
    """Disciplina del catálogo: ej. Cálculo I (MAT01). El código no es único."""

    id: str
    nombre: str
    codigo: str
    carga_horaria: int
