"""Configuración de la aplicación mediante variables de entorno."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración cargada desde .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "SIGEP API"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # JWT (sesión del login simulado)
    jwt_secret_key: str = "cambiar-en-produccion-clave-secreta-muy-segura"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 8  # una jornada

    # Asistente (Google Gemini)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.7

    # Datos de demostración al iniciar (no hay persistencia)
    cargar_datos_iniciales: bool = True


settings = Settings()
