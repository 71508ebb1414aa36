"""Endpoints de autenticación: login simulado y dependencia para proteger rutas."""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.security import create_access_token, decode_access_token
from app.models import UsuarioSesion
from app.schemas.auth import LoginRequest, TokenResponse, UsuarioItem

DEPARTAMENTO = "Departamento de Computación"

router = APIRouter(prefix="/auth", tags=["auth"])
security = HTTPBearer(auto_error=False)


def _usuario_desde_email(email: str) -> UsuarioSesion:
    """Construye el usuario de sesión a partir del correo (no hay base de usuarios)."""
    nombre = email.split("@")[0].replace(".", " ").title() or email
    return UsuarioSesion(
        id=email,
        nombre=nombre,
        email=email,
        rol="secretaria",
        departamento=DEPARTAMENTO,
    )


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Iniciar sesión",
    response_description="Token JWT para usar en el header Authorization",
    responses={
        200: {"description": "Login correcto, se devuelve el access_token"},
        422: {"description": "Correo o contraseña vacíos"},
    },
)
async def login(data: LoginRequest):
    """
    Login simulado: acepta cualquier **correo** y **contraseña** no vacíos.
    Usa el token en el header `Authorization: Bearer <access_token>` para acceder a rutas protegidas.
    """
    usuario = _usuario_desde_email(data.email)
    token = create_access_token(
        subject=usuario.email,
        extra={"nombre": usuario.nombre, "rol": usuario.rol},
    )
    return TokenResponse(access_token=token, usuario=UsuarioItem(**usuario.model_dump()))


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UsuarioSesion:
    """Dependencia: exige un JWT válido y devuelve el usuario actual. Usar en endpoints protegidos."""
    if not credentials or credentials.scheme != "Bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token de autenticación no proporcionado o inválido",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials)
    if not payload or "sub" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token inválido o expirado",
            headers={"WWW-Authenticate": "Bearer"},
        )
    usuario = _usuario_desde_email(payload["sub"])
    if payload.get("nombre"):
        usuario = usuario.model_copy(update={"nombre": payload["nombre"]})
    return usuario
