"""Punto de entrada de la aplicación FastAPI."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.core.config import settings
from app.core.datos_iniciales import crear_almacen
from app.services.asistente_service import AsistenteService

logger = logging.getLogger(__name__)

# Documentación Swagger: disponible en /docs (OpenAPI 3.0)
OPENAPI_TAGS = [
    {
        "name": "auth",
        "description": "Autenticación simulada: cualquier correo y contraseña no vacíos. Devuelve un JWT.",
    },
    {
        "name": "api",
        "description": "Endpoints generales de la API v1. Incluye rutas protegidas que requieren JWT.",
    },
    {
        "name": "panel",
        "description": "Indicadores del dashboard: totales, semestre activo y titulaciones.",
    },
    {
        "name": "profesores",
        "description": "Plantel docente: alta, edición, documentos y exportación CSV/Excel.",
    },
    {
        "name": "disciplinas",
        "description": "Catálogo de disciplinas (nombre, código, carga horaria).",
    },
    {
        "name": "semestres",
        "description": "Planificación de semestres: estado y asignación de disciplinas a profesores.",
    },
    {
        "name": "reportes",
        "description": "Reporte de carga horaria por profesor y semestre, en JSON o PDF.",
    },
    {
        "name": "asistente",
        "description": "Asistente con IA (Gemini) que responde sobre los datos del sistema y puede navegar.",
    },
    {
        "name": "salud",
        "description": "Comprobación del estado del servicio.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestiona el ciclo de vida: crea el almacén en memoria y el asistente."""
    app.state.almacen = crear_almacen(settings.cargar_datos_iniciales)
    logger.info(
        "Almacén inicializado: %d profesores, %d disciplinas, %d semestres",
        len(app.state.almacen.profesores),
        len(app.state.almacen.disciplinas),
        len(app.state.almacen.semestres),
    )

    app.state.asistente = AsistenteService(settings.gemini_api_key)
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY no configurada: el asistente no podrá responder.")

    yield


app = FastAPI(
    title=settings.app_name,
    description="""
API REST del **SIGEP** (gestión de profesores, disciplinas, semestres y carga horaria).

Los datos viven en memoria mientras el servidor esté en ejecución.

## Autenticación (evitar 401)

1. Obtén un token con **POST /api/v1/auth/login** (cualquier correo y contraseña). Copia el `access_token`.
2. En Swagger UI, clic en **Authorize** y pega solo el token (sin escribir "Bearer").
""",
    version="0.1.0",
    debug=settings.debug,
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    swagger_ui_parameters={"persistAuthorization": True, "tryItOutEnabled": True},
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get(
    "/health",
    tags=["salud"],
    summary="Estado del servicio",
    response_description="Indica que la API está en ejecución",
)
async def health_check():
    """Comprueba que el servicio está activo. No requiere autenticación."""
    return {"status": "ok", "message": "Servicio en ejecución"}
