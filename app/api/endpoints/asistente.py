"""Endpoints del asistente (chat con IA que consulta los datos del sistema)."""
import base64

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from app.api.endpoints.auth import get_current_user
from app.core.store import Almacen, get_store
from app.models import UsuarioSesion
from app.schemas.asistente import (
    EnvioMensajeResponse,
    SugerenciasResponse,
    TranscripcionResponse,
)
from app.services.asistente_service import (
    SUGERENCIAS,
    TIPOS_ADJUNTO,
    Adjunto,
    AsistenteService,
    ConsultaEnCursoError,
    CredencialNoConfiguradaError,
    MensajeVacioError,
    get_asistente,
)

router = APIRouter(prefix="/asistente", tags=["asistente"])


@router.get(
    "/mensajes",
    response_model=TranscripcionResponse,
    summary="Transcripción del asistente",
    description="Mensajes en orden de envío. El primero es siempre el saludo.",
)
async def listar_mensajes(
    asistente: AsistenteService = Depends(get_asistente),
    _: UsuarioSesion = Depends(get_current_user),
):
    return TranscripcionResponse(mensajes=[m.model_dump() for m in asistente.mensajes])


@router.post(
    "/mensajes",
    response_model=EnvioMensajeResponse,
    summary="Enviar mensaje al asistente",
    description=(
        "Envía texto y/o un archivo (PDF, PNG, JPEG o WEBP). Si el asistente decide navegar, "
        "la respuesta incluye `navegacion` con la página y la ruta de destino."
    ),
    responses={
        409: {"description": "Ya hay una consulta en curso"},
        422: {"description": "Mensaje vacío"},
        503: {"description": "Clave de API no configurada"},
    },
)
async def enviar_mensaje(
    texto: str = Form("", description="Texto del mensaje"),
    archivo: UploadFile | None = File(None, description="Adjunto opcional"),
    asistente: AsistenteService = Depends(get_asistente),
    almacen: Almacen = Depends(get_store),
    _: UsuarioSesion = Depends(get_current_user),
):
    adjunto = None
    if archivo is not None and archivo.filename:
        if archivo.content_type not in TIPOS_ADJUNTO:
            raise HTTPException(
                status_code=400,
                detail="Tipo de archivo no permitido. Use PDF, PNG, JPEG o WEBP.",
            )
        contenido = await archivo.read()
        adjunto = Adjunto(
            nombre=archivo.filename,
            tipo_mime=archivo.content_type,
            datos=base64.b64encode(contenido).decode("ascii"),
        )

    try:
        resultado = await asistente.enviar(almacen, texto=texto, adjunto=adjunto)
    except MensajeVacioError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except CredencialNoConfiguradaError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except ConsultaEnCursoError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return EnvioMensajeResponse.model_validate(resultado.model_dump())


@router.delete(
    "/mensajes",
    response_model=TranscripcionResponse,
    summary="Reiniciar conversación",
    description="Descarta la transcripción y deja solo el saludo.",
)
async def reiniciar_conversacion(
    asistente: AsistenteService = Depends(get_asistente),
    _: UsuarioSesion = Depends(get_current_user),
):
    asistente.reiniciar()
    return TranscripcionResponse(mensajes=[m.model_dump() for m in asistente.mensajes])


@router.get(
    "/sugerencias",
    response_model=SugerenciasResponse,
    summary="Preguntas sugeridas",
)
async def sugerencias(_: UsuarioSesion = Depends(get_current_user)):
    return SugerenciasResponse(sugerencias=SUGERENCIAS)
