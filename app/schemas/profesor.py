"""Esquemas para profesores y sus documentos."""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

TITULACIONES = ["Graduado", "Especialista", "Magister", "Doctor"]


class ProfesorCreate(BaseModel):
    """Body para crear o editar un profesor (formulario completo)."""

    nombre: str = Field(description="Nombre completo", min_length=1)
    email: str = Field(description="Correo institucional", min_length=1)
    documento_identidad: str = Field(description="Documento de identidad (ej. CPF)", min_length=1)
    titulacion: str = Field(default="Magister", description="Graduado, Especialista, Magister o Doctor")
    area: str = Field(description="Área de actuación", min_length=1)
    carga_maxima: int = Field(default=40, description="Carga horaria máxima semanal (horas)")
    activo: bool = Field(default=True, description="Profesor activo")

    @field_validator("titulacion")
    @classmethod
    def validar_titulacion(cls, v: str) -> str:
        if v not in TITULACIONES:
            raise ValueError(f"titulacion debe ser uno de: {', '.join(TITULACIONES)}")
        return v


class DocumentoItem(BaseModel):
    """Documento adjunto (sin el contenido)."""

    id: str
    nombre: str
    tipo: str
    fecha_subida: datetime


class ProfesorItem(BaseModel):
    """Fila del listado de profesores."""

    id: str
    nombre: str
    email: str
    documento_identidad: str
    titulacion: str
    area: str
    carga_maxima: int
    activo: bool
    total_documentos: int
    documentos: list[DocumentoItem] = Field(default_factory=list)


class ProfesorListResponse(BaseModel):
    """Respuesta del listado de profesores."""

    profesores: list[ProfesorItem]


class DocumentoListResponse(BaseModel):
    """Documentos de un profesor."""

    documentos: list[DocumentoItem]
