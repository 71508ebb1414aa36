"""Datos de demostración cargados en el almacén al iniciar la aplicación."""
from datetime import date

from app.core.store import Almacen
from app.models import Disciplina, EstadoSemestre, Oferta, Profesor, Semestre, Titulacion

PROFESORES = [
    Profesor(
        id="1",
        nombre="Dr. João Silva",
        email="joao@uema.br",
        documento_identidad="123.456.789-00",
        titulacion=Titulacion.DOCTOR,
        area="Computación",
        carga_maxima=40,
        activo=True,
    ),
    Profesor(
        id="2",
        nombre="Msc. Maria Santos",
        email="maria@uema.br",
        documento_identidad="987.654.321-11",
        titulacion=Titulacion.MAGISTER,
        area="Matemática",
        carga_maxima=20,
        activo=True,
    ),
]

DISCIPLINAS = [
    Disciplina(id="1", nombre="Algoritmos y Programación", codigo="COMP01", carga_horaria=60),
    Disciplina(id="2", nombre="Cálculo I", codigo="MAT01", carga_horaria=60),
    Disciplina(id="3", nombre="Ingeniería de Software", codigo="COMP02", carga_horaria=45),
]

SEMESTRES = [
    Semestre(
        id="1",
        nombre="2024.1",
        estado=EstadoSemestre.ACTIVO,
        fecha_inicio=date(2024, 2, 1),
        fecha_fin=date(2024, 6, 30),
        ofertas=(
            Oferta(id="101", disciplina_id="1", profesor_id="1", carga_horaria=60),
            Oferta(id="102", disciplina_id="2", profesor_id="2", carga_horaria=60),
        ),
    ),
]


def crear_almacen(cargar_datos_iniciales: bool = True) -> Almacen:
    """Crea el almacén de la aplicación, con o sin los datos de demostración."""
    if not cargar_datos_iniciales:
        return Almacen()
    return Almacen(profesores=PROFESORES, disciplinas=DISCIPLINAS, semestres=SEMESTRES)
