"""Modelos Profesor y Documento (documentos adjuntos del profesor)."""
from datetime import datetime

from app.models.base import ModeloBase


class Titulacion:
    """Valores permitidos para la titulación académica."""
    GRADUADO = "Graduado"
    ESPECIALISTA = "Especialista"
    MAGISTER = "Magister"
    DOCTOR = "Doctor"


class Documento(ModeloBase):
    """Documento del profesor guardado como data URI en base64."""

    id: str
    nombre: str
    tipo: str
    fecha_subida: datetime
    data_url: str


class Profesor(ModeloBase):
    """Profesor de la universidad. Es dueño exclusivo de sus documentos."""

    id: str
    nombre: str
    email: str
    documento_identidad: str
    titulacion: str
    area: str
    carga_maxima: int
    activo: bool = True
    documentos: tuple[Documento, ...] = ()
