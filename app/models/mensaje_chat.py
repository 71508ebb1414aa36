"""Modelo MensajeChat (transcripción del asistente)."""
from datetime import datetime

from app.models.base import ModeloBase


class RolMensaje:
    """Valores permitidos para el autor de un mensaje."""
    USER = "user"
    ASSISTANT = "assistant"


class MensajeChat(ModeloBase):
    """Mensaje de la conversación con el asistente."""

    id: str
    rol: str
    texto: str
    timestamp: datetime
    adjunto: str | None = None
