"""Esquemas para autenticación y JWT."""
from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Body del endpoint de login. Se acepta cualquier credencial no vacía (sin contar espacios)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(description="Correo del usuario", min_length=1, examples=["secretaria@uema.br"])
    password: str = Field(description="Contraseña", min_length=1, examples=["1234"])


class UsuarioItem(BaseModel):
    """Datos del usuario autenticado."""

    id: str
    nombre: str
    email: str
    rol: str
    departamento: str


class TokenResponse(BaseModel):
    """Respuesta con access_token JWT y datos del usuario."""

    access_token: str = Field(description="Token JWT para enviar en header Authorization: Bearer <token>")
    token_type: str = Field(default="bearer", description="Tipo de token (siempre 'bearer')")
    usuario: UsuarioItem
