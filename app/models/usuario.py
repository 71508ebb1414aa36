"""Modelo UsuarioSesion (usuario derivado del JWT; no se almacena)."""
from app.models.base import ModeloBase


class UsuarioSesion(ModeloBase):
    """Usuario autenticado por el login simulado."""

    id: str
    nombre: str
    email: str
    rol: str = "secretaria"
    departamento: str = ""
