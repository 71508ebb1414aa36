"""Base de las entidades del dominio (viven solo en memoria)."""
from pydantic import BaseModel, ConfigDict


class ModeloBase(BaseModel):
    """Base para todos los modelos del dominio: instancias inmutables.

    Las mutaciones construyen instancias nuevas con ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)
