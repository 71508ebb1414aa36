"""Esquemas para el panel principal (dashboard)."""
from pydantic import BaseModel


class TitulacionConteo(BaseModel):
    """Cantidad de profesores por titulación."""

    titulacion: str
    cantidad: int
    porcentaje: float


class PanelResponse(BaseModel):
    """Indicadores del panel principal."""

    total_profesores: int
    total_disciplinas: int
    total_semestres: int
    semestre_activo: str | None
    ofertas_activas: int
    titulaciones: list[TitulacionConteo]
    mensaje: str
