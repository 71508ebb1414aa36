"""Esquemas para el reporte de carga horaria."""
from pydantic import BaseModel


class FilaCargaHoraria(BaseModel):
    """Carga horaria de un profesor en el semestre."""

    profesor_id: str
    profesor_nombre: str
    titulacion: str
    disciplinas: str
    total_horas: int


class ReporteCargaHoraria(BaseModel):
    """Reporte consolidado de carga horaria por profesor."""

    semestre_id: str
    semestre_nombre: str | None = None
    filas: list[FilaCargaHoraria]
    total_horas: int
