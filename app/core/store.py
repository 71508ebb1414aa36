"""Almacén en memoria: única fuente de verdad de profesores, disciplinas y semestres.

No hay persistencia: el estado vive en el proceso y se reinicia al reiniciar la
aplicación. Cada mutación reemplaza la colección afectada por una tupla nueva
(las entidades son inmutables) y avisa a los suscriptores con el nombre de la
colección modificada.

Las operaciones son síncronas y totales respecto de los ids: un id inexistente
nunca produce error, simplemente no coincide con nada. Los datos de alta deben
llegar completos (los valida el esquema de entrada); con un dict incompleto el
modelo lanza ``pydantic.ValidationError`` y la colección no cambia.
"""
import logging
import secrets
import string
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import Any

from fastapi import Request

from app.models import Disciplina, Documento, Oferta, Profesor, Semestre

logger = logging.getLogger(__name__)

_ALFABETO_ID = string.ascii_lowercase + string.digits
_LARGO_ID = 9

PROFESORES = "profesores"
DISCIPLINAS = "disciplinas"
SEMESTRES = "semestres"

Suscriptor = Callable[[str], None]


def generar_id(existentes: Iterable[str] = ()) -> str:
    """Genera un id aleatorio base 36 que no esté en ``existentes``."""
    usados = set(existentes)
    while True:
        nuevo = "".join(secrets.choice(_ALFABETO_ID) for _ in range(_LARGO_ID))
        if nuevo not in usados:
            return nuevo


class Almacen:
    """Estado de la aplicación: colecciones raíz y sus ofertas/documentos anidados.

    Espera datos ya validados por los esquemas; no revisa el contenido de los campos.
    """

    def __init__(
        self,
        profesores: Iterable[Profesor] = (),
        disciplinas: Iterable[Disciplina] = (),
        semestres: Iterable[Semestre] = (),
    ) -> None:
        self.profesores: tuple[Profesor, ...] = tuple(profesores)
        self.disciplinas: tuple[Disciplina, ...] = tuple(disciplinas)
        self.semestres: tuple[Semestre, ...] = tuple(semestres)
        self._suscriptores: list[Suscriptor] = []

    # ── Suscripción ───────────────────────────────────────────────────

    def suscribir(self, suscriptor: Suscriptor) -> None:
        self._suscriptores.append(suscriptor)

    def desuscribir(self, suscriptor: Suscriptor) -> None:
        if suscriptor in self._suscriptores:
            self._suscriptores.remove(suscriptor)

    def _notificar(self, coleccion: str) -> None:
        logger.debug("Colección '%s' actualizada", coleccion)
        for suscriptor in list(self._suscriptores):
            suscriptor(coleccion)

    # ── Consultas ─────────────────────────────────────────────────────

    def obtener_profesor(self, profesor_id: str | None) -> Profesor | None:
        return next((p for p in self.profesores if p.id == profesor_id), None)

    def obtener_disciplina(self, disciplina_id: str | None) -> Disciplina | None:
        return next((d for d in self.disciplinas if d.id == disciplina_id), None)

    def obtener_semestre(self, semestre_id: str | None) -> Semestre | None:
        return next((s for s in self.semestres if s.id == semestre_id), None)

    def semestre_activo(self) -> Semestre | None:
        """Primer semestre con estado 'activo', si existe."""
        return next((s for s in self.semestres if s.estado == "activo"), None)

    # ── Profesores ────────────────────────────────────────────────────

    def agregar_profesor(self, datos: dict[str, Any]) -> Profesor:
        """Crea un profesor con id nuevo y sin documentos."""
        profesor = Profesor(
            **{
                **datos,
                "id": generar_id(p.id for p in self.profesores),
                "documentos": (),
            }
        )
        self.profesores = (*self.profesores, profesor)
        self._notificar(PROFESORES)
        return profesor

    def actualizar_profesor(self, profesor: Profesor) -> Profesor:
        """Reemplaza el profesor con el mismo id; el resto queda intacto."""
        self.profesores = tuple(profesor if p.id == profesor.id else p for p in self.profesores)
        self._notificar(PROFESORES)
        return profesor

    def eliminar_profesor(self, profesor_id: str) -> bool:
        """Quita el profesor (y con él sus documentos). Las ofertas que lo
        referencian se conservan y quedan huérfanas."""
        antes = len(self.profesores)
        self.profesores = tuple(p for p in self.profesores if p.id != profesor_id)
        self._notificar(PROFESORES)
        return len(self.profesores) != antes

    def agregar_documento(
        self, profesor_id: str, nombre: str, tipo: str, data_url: str
    ) -> Documento | None:
        """Agrega un documento al profesor. Si el profesor no existe no hace nada."""
        usados = (d.id for p in self.profesores for d in p.documentos)
        documento = Documento(
            id=generar_id(usados),
            nombre=nombre,
            tipo=tipo,
            fecha_subida=datetime.now(timezone.utc),
            data_url=data_url,
        )
        encontrado = False
        nuevos = []
        for p in self.profesores:
            if p.id == profesor_id:
                encontrado = True
                p = p.model_copy(update={"documentos": (*p.documentos, documento)})
            nuevos.append(p)
        self.profesores = tuple(nuevos)
        self._notificar(PROFESORES)
        return documento if encontrado else None

    def eliminar_documento(self, profesor_id: str, documento_id: str) -> None:
        """Quita el documento indicado; ids inexistentes no tienen efecto."""
        self.profesores = tuple(
            p.model_copy(
                update={"documentos": tuple(d for d in p.documentos if d.id != documento_id)}
            )
            if p.id == profesor_id
            else p
            for p in self.profesores
        )
        self._notificar(PROFESORES)

    # ── Disciplinas ───────────────────────────────────────────────────

    def agregar_disciplina(self, datos: dict[str, Any]) -> Disciplina:
        disciplina = Disciplina(**{**datos, "id": generar_id(d.id for d in self.disciplinas)})
        self.disciplinas = (*self.disciplinas, disciplina)
        self._notificar(DISCIPLINAS)
        return disciplina

    def actualizar_disciplina(self, disciplina: Disciplina) -> Disciplina:
        self.disciplinas = tuple(
            disciplina if d.id == disciplina.id else d for d in self.disciplinas
        )
        self._notificar(DISCIPLINAS)
        return disciplina

    def eliminar_disciplina(self, disciplina_id: str) -> bool:
        """Quita la disciplina del catálogo; las ofertas que la usan se conservan."""
        antes = len(self.disciplinas)
        self.disciplinas = tuple(d for d in self.disciplinas if d.id != disciplina_id)
        self._notificar(DISCIPLINAS)
        return len(self.disciplinas) != antes

    # ── Semestres y ofertas ───────────────────────────────────────────

    def agregar_semestre(self, datos: dict[str, Any]) -> Semestre:
        """Crea un semestre con id nuevo y sin ofertas."""
        semestre = Semestre(
            **{
                **datos,
                "id": generar_id(s.id for s in self.semestres),
                "ofertas": (),
            }
        )
        self.semestres = (*self.semestres, semestre)
        self._notificar(SEMESTRES)
        return semestre

    def actualizar_semestre(self, semestre: Semestre) -> Semestre:
        self.semestres = tuple(semestre if s.id == semestre.id else s for s in self.semestres)
        self._notificar(SEMESTRES)
        return semestre

    def actualizar_estado_semestre(self, semestre_id: str, estado: str) -> None:
        """Sobrescribe el estado sin validar la transición."""
        self.semestres = tuple(
            s.model_copy(update={"estado": estado}) if s.id == semestre_id else s
            for s in self.semestres
        )
        self._notificar(SEMESTRES)

    def agregar_oferta(self, semestre_id: str, datos: dict[str, Any]) -> Oferta | None:
        """Agrega una oferta al semestre. Si el semestre no existe no hace nada."""
        usados = (o.id for s in self.semestres for o in s.ofertas)
        oferta = Oferta(**{**datos, "id": generar_id(usados)})
        encontrado = False
        nuevos = []
        for s in self.semestres:
            if s.id == semestre_id:
                encontrado = True
                s = s.model_copy(update={"ofertas": (*s.ofertas, oferta)})
            nuevos.append(s)
        self.semestres = tuple(nuevos)
        self._notificar(SEMESTRES)
        return oferta if encontrado else None

    def eliminar_oferta(self, semestre_id: str, oferta_id: str) -> None:
        """Quita la oferta solo dentro del semestre indicado."""
        self.semestres = tuple(
            s.model_copy(update={"ofertas": tuple(o for o in s.ofertas if o.id != oferta_id)})
            if s.id == semestre_id
            else s
            for s in self.semestres
        )
        self._notificar(SEMESTRES)


def get_store(request: Request) -> Almacen:
    """Dependencia: obtiene el almacén desde app.state."""
    return request.app.state.almacen
