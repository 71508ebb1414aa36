"""Asistente del SIGEP: conversación con Gemini usando los datos del sistema como contexto.

Cada envío es una única consulta al modelo con:
- una instrucción de sistema que incluye un resumen en JSON del almacén,
- la transcripción previa completa (sin el saludo inicial),
- el turno actual (texto y/o un archivo adjunto en base64),
- una sola herramienta declarada: ``navigateTo(page)``.

Si el modelo invoca la herramienta con una página válida, el asistente realiza la
navegación y responde con un texto fijo de confirmación, descartando el texto
libre de ese turno. Cualquier falla de la consulta se convierte en un mensaje de
disculpa; no hay reintentos.
"""
import asyncio
import json
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Literal

from fastapi import Request
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel, ValidationError

from app.core.config import settings
from app.core.store import Almacen, generar_id
from app.models import MensajeChat, RolMensaje

logger = logging.getLogger(__name__)

ID_SALUDO = "0"
SALUDO = (
    "¡Hola! Soy la IA del SIGEP. Puedo analizar datos, responder dudas y navegar "
    "por el sistema por ti. ¿En qué puedo ayudarte?"
)
MENSAJE_ERROR = (
    "Disculpa, tuve un problema al procesar esto. Verifica la clave de API o "
    "inténtalo de nuevo."
)
MENSAJE_SIN_TEXTO = "Comando procesado."
AVISO_SIN_CREDENCIAL = "Clave de API no configurada. Configure la variable de entorno GEMINI_API_KEY."

SUGERENCIAS = [
    "¿Cuántos profesores activos hay?",
    "Lista las disciplinas sin profesor",
    "Resumen del semestre actual",
    "Llévame a los reportes",
]

TIPOS_ADJUNTO = ("application/pdf", "image/png", "image/jpeg", "image/webp")

PaginaDestino = Literal["dashboard", "professors", "disciplines", "semesters", "reports"]

RUTAS: dict[str, str] = {
    "dashboard": "/",
    "professors": "/professors",
    "disciplines": "/disciplines",
    "semesters": "/semesters",
    "reports": "/reports",
}

HERRAMIENTA_NAVEGACION = {
    "name": "navigateTo",
    "description": (
        "Navegar a una página específica del sistema. Úsala cuando el usuario pida "
        "ir, abrir o ver una pantalla."
    ),
    "parameters": {
        "type": "object",
        "properties": {
            "page": {
                "type": "string",
                "enum": list(RUTAS),
                "description": "La página de destino.",
            }
        },
        "required": ["page"],
    },
}


class AsistenteError(Exception):
    """Error base del asistente (el envío no se realizó)."""


class MensajeVacioError(AsistenteError):
    """Se intentó enviar sin texto y sin adjunto."""


class CredencialNoConfiguradaError(AsistenteError):
    """No hay clave de API configurada para el servicio externo."""


class ConsultaEnCursoError(AsistenteError):
    """Ya hay una consulta en curso; no se encolan envíos."""


class Adjunto(BaseModel):
    """Archivo adjunto al turno actual, ya codificado en base64."""

    nombre: str
    tipo_mime: str
    datos: str


class ArgumentosNavegacion(BaseModel):
    page: PaginaDestino


class LlamadaNavegacion(BaseModel):
    """Invocación de ``navigateTo`` validada antes de ejecutarla."""

    name: Literal["navigateTo"]
    args: ArgumentosNavegacion


class Navegacion(BaseModel):
    pagina: str
    ruta: str


class ResultadoEnvio(BaseModel):
    mensaje_usuario: MensajeChat
    respuesta: MensajeChat
    navegacion: Navegacion | None = None


def crear_llm(api_key: str) -> ChatGoogleGenerativeAI:
    """Cliente de Gemini configurado desde settings."""
    return ChatGoogleGenerativeAI(
        model=settings.gemini_model,
        google_api_key=api_key,
        temperature=settings.llm_temperature,
    )


# ── Armado de la consulta ─────────────────────────────────────────────

def construir_contexto(almacen: Almacen) -> dict[str, Any]:
    """Proyección compacta del almacén: conteo de documentos en lugar de documentos,
    nombres resueltos en lugar de ids dentro de las ofertas."""
    semestres = []
    for s in almacen.semestres:
        ofertas = []
        for o in s.ofertas:
            disciplina = almacen.obtener_disciplina(o.disciplina_id)
            profesor = almacen.obtener_profesor(o.profesor_id)
            ofertas.append(
                {
                    "disciplina": disciplina.nombre if disciplina else "Desconocida",
                    "profesor": profesor.nombre if profesor else "Pendiente",
                    "carga_horaria": o.carga_horaria,
                }
            )
        semestres.append(
            {
                "nombre": s.nombre,
                "estado": s.estado,
                "inicio": s.fecha_inicio.isoformat(),
                "fin": s.fecha_fin.isoformat(),
                "ofertas": ofertas,
            }
        )

    return {
        "profesores": [
            {
                "id": p.id,
                "nombre": p.nombre,
                "email": p.email,
                "titulacion": p.titulacion,
                "area": p.area,
                "carga_maxima": p.carga_maxima,
                "activo": p.activo,
                "total_documentos": len(p.documentos),
            }
            for p in almacen.profesores
        ],
        "disciplinas": [d.model_dump() for d in almacen.disciplinas],
        "semestres": semestres,
    }


def construir_instruccion_sistema(almacen: Almacen) -> str:
    datos = json.dumps(construir_contexto(almacen), ensure_ascii=False)
    return (
        "Eres el asistente inteligente del sistema SIGEP (Gestión de Profesores UEMA).\n\n"
        f"DATOS DEL SISTEMA (JSON):\n{datos}\n\n"
        "INSTRUCCIONES:\n"
        "1. Responde basándote en los DATOS DEL SISTEMA.\n"
        "2. Sé servicial y directo.\n"
        "3. Si el usuario pide ir a algún lugar, usa la herramienta 'navigateTo'.\n"
        "4. Mantén el contexto de la conversación."
    )


def construir_historial(mensajes: list[MensajeChat]) -> list[BaseMessage]:
    """Transcripción previa como turnos de LangChain, sin el saludo inicial."""
    historial: list[BaseMessage] = []
    for m in mensajes:
        if m.id == ID_SALUDO:
            continue
        texto = m.texto or (f"[Archivo adjunto: {m.adjunto}]" if m.adjunto else "")
        if m.rol == RolMensaje.USER:
            historial.append(HumanMessage(content=texto))
        else:
            historial.append(AIMessage(content=texto))
    return historial


def construir_turno_usuario(texto: str, adjunto: Adjunto | None) -> HumanMessage:
    partes: list[dict[str, Any]] = []
    if texto:
        partes.append({"type": "text", "text": texto})
    if adjunto:
        partes.append(
            {
                "type": "image" if adjunto.tipo_mime.startswith("image/") else "file",
                "source_type": "base64",
                "mime_type": adjunto.tipo_mime,
                "data": adjunto.datos,
            }
        )
    return HumanMessage(content=partes)


# ── Interpretación de la respuesta ────────────────────────────────────

def _texto_de(respuesta: AIMessage) -> str:
    contenido = respuesta.content
    if isinstance(contenido, str):
        return contenido
    partes = []
    for parte in contenido or []:
        if isinstance(parte, str):
            partes.append(parte)
        elif isinstance(parte, dict) and parte.get("type") == "text":
            partes.append(parte.get("text", ""))
    return "".join(partes)


def interpretar_respuesta(respuesta: AIMessage) -> tuple[str, Navegacion | None]:
    """Devuelve el texto visible y la navegación pedida (solo la primera válida cuenta)."""
    for llamada in respuesta.tool_calls or []:
        try:
            navegacion = LlamadaNavegacion.model_validate(llamada)
        except ValidationError:
            logger.warning("Llamada de herramienta ignorada: %s", llamada.get("name"))
            continue
        pagina = navegacion.args.page
        return f"Navegando a {pagina}... ¿Algo más?", Navegacion(pagina=pagina, ruta=RUTAS[pagina])

    return _texto_de(respuesta) or MENSAJE_SIN_TEXTO, None


# ── Servicio ──────────────────────────────────────────────────────────

class AsistenteService:
    """Transcripción del asistente (vive mientras viva el proceso) y envío de consultas."""

    def __init__(
        self,
        api_key: str | None = None,
        llm_factory: Callable[[str], Any] = crear_llm,
    ) -> None:
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self._llm_factory = llm_factory
        self._lock = asyncio.Lock()
        self.mensajes: list[MensajeChat] = [self._saludo()]

    @staticmethod
    def _saludo() -> MensajeChat:
        return MensajeChat(
            id=ID_SALUDO,
            rol=RolMensaje.ASSISTANT,
            texto=SALUDO,
            timestamp=datetime.now(timezone.utc),
        )

    @property
    def ocupado(self) -> bool:
        return self._lock.locked()

    def reiniciar(self) -> None:
        self.mensajes = [self._saludo()]

    def _nuevo_mensaje(self, rol: str, texto: str, adjunto: str | None = None) -> MensajeChat:
        mensaje = MensajeChat(
            id=generar_id(m.id for m in self.mensajes),
            rol=rol,
            texto=texto,
            timestamp=datetime.now(timezone.utc),
            adjunto=adjunto,
        )
        self.mensajes.append(mensaje)
        return mensaje

    async def enviar(
        self,
        almacen: Almacen,
        texto: str = "",
        adjunto: Adjunto | None = None,
        navegar: Callable[[str, str], None] | None = None,
    ) -> ResultadoEnvio:
        """Envía el turno al modelo y agrega a la transcripción el mensaje del usuario y la respuesta.

        ``navegar(pagina, ruta)`` se invoca una vez si el modelo pide navegar.
        """
        texto = texto or ""
        if not texto.strip() and adjunto is None:
            raise MensajeVacioError("Escriba un mensaje o adjunte un archivo")
        if not self.api_key:
            raise CredencialNoConfiguradaError(AVISO_SIN_CREDENCIAL)
        if self._lock.locked():
            raise ConsultaEnCursoError("Ya hay una consulta en curso. Espere la respuesta.")

        async with self._lock:
            historial = construir_historial(self.mensajes)
            mensaje_usuario = self._nuevo_mensaje(
                RolMensaje.USER, texto, adjunto.nombre if adjunto else None
            )
            logger.info(
                "Consulta al asistente (%d caracteres%s)",
                len(texto),
                ", con adjunto" if adjunto else "",
            )

            navegacion = None
            try:
                llm = self._llm_factory(self.api_key).bind_tools([HERRAMIENTA_NAVEGACION])
                respuesta = await llm.ainvoke(
                    [
                        SystemMessage(content=construir_instruccion_sistema(almacen)),
                        *historial,
                        construir_turno_usuario(texto, adjunto),
                    ]
                )
                texto_respuesta, navegacion = interpretar_respuesta(respuesta)
                if navegacion:
                    logger.info("Asistente navega a '%s'", navegacion.pagina)
                    if navegar:
                        navegar(navegacion.pagina, navegacion.ruta)
            except Exception:
                logger.exception("Error en la consulta al asistente")
                texto_respuesta = MENSAJE_ERROR
                navegacion = None

            respuesta_msg = self._nuevo_mensaje(RolMensaje.ASSISTANT, texto_respuesta)
            return ResultadoEnvio(
                mensaje_usuario=mensaje_usuario,
                respuesta=respuesta_msg,
                navegacion=navegacion,
            )


def get_asistente(request: Request) -> AsistenteService:
    """Dependencia: obtiene el asistente desde app.state."""
    return request.app.state.asistente
