"""Modelos del dominio (entidades inmutables en memoria)."""
from app.models.base import ModeloBase
from app.models.profesor import Documento, Profesor, Titulacion
from app.models.disciplina import Disciplina
from app.models.semestre import EstadoSemestre, Oferta, Semestre
from app.models.mensaje_chat import MensajeChat, RolMensaje
from app.models.usuario import UsuarioSesion

__all__ = [
    "ModeloBase",
    "Documento",
    "Profesor",
    "Titulacion",
    "Disciplina",
    "EstadoSemestre",
    "Oferta",
    "Semestre",
    "MensajeChat",
    "RolMensaje",
    "UsuarioSesion",
]
