"""Esquemas para el asistente (chat con IA)."""
from datetime import datetime

from pydantic import BaseModel


class MensajeChatItem(BaseModel):
    """Mensaje de la transcripción."""

    id: str
    rol: str
    texto: str
    timestamp: datetime
    adjunto: str | None = None


class NavegacionItem(BaseModel):
    """Instrucción de navegación para el frontend."""

    pagina: str
    ruta: str


class EnvioMensajeResponse(BaseModel):
    """Resultado de un envío: mensaje del usuario, respuesta y navegación opcional."""

    mensaje_usuario: MensajeChatItem
    respuesta: MensajeChatItem
    navegacion: NavegacionItem | None = None


class TranscripcionResponse(BaseModel):
    """Transcripción completa del asistente."""

    mensajes: list[MensajeChatItem]


class SugerenciasResponse(BaseModel):
    """Preguntas sugeridas para iniciar la conversación."""

    sugerencias: list[str]
