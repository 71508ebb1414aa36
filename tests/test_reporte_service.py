from datetime import date

import pytest

from app.core.store import Almacen
from app.models import Disciplina, Oferta, Profesor, Semestre
from app.services.reporte_pdf_service import generar_carga_horaria
from app.services.reporte_service import calcular_carga_horaria


def _profesor(id_, nombre):
    return Profesor(
        id=id_,
        nombre=nombre,
        email=f"{id_}@uema.br",
        documento_identidad="000",
        titulacion="Doctor",
        area="Computación",
        carga_maxima=40,
    )


@pytest.fixture
def almacen_reporte():
    return Almacen(
        profesores=[_profesor("profA", "Prof A"), _profesor("profB", "Prof B")],
        disciplinas=[
            Disciplina(id="d1", nombre="Redes", codigo="COMP10", carga_horaria=60),
            Disciplina(id="d2", nombre="Compiladores", codigo="COMP11", carga_horaria=30),
        ],
        semestres=[
            Semestre(
                id="s1",
                nombre="2025.1",
                estado="activo",
                fecha_inicio=date(2025, 2, 1),
                fecha_fin=date(2025, 6, 30),
                ofertas=(
                    Oferta(id="o1", disciplina_id="d1", profesor_id="profA", carga_horaria=60),
                    Oferta(id="o2", disciplina_id="d2", profesor_id="profA", carga_horaria=30),
                    Oferta(id="o3", disciplina_id="d1", profesor_id=None, carga_horaria=60),
                ),
            )
        ],
    )


def test_consolida_carga_por_profesor(almacen_reporte):
    reporte = calcular_carga_horaria(almacen_reporte, "s1")

    assert reporte.semestre_nombre == "2025.1"
    assert len(reporte.filas) == 1
    fila = reporte.filas[0]
    assert fila.profesor_id == "profA"
    assert fila.total_horas == 90
    assert fila.disciplinas == "Redes, Compiladores"
    assert reporte.total_horas == 90


def test_disciplina_eliminada_no_aparece_en_nombres(almacen_reporte):
    almacen_reporte.eliminar_disciplina("d2")

    fila = calcular_carga_horaria(almacen_reporte, "s1").filas[0]

    assert fila.disciplinas == "Redes"
    assert fila.total_horas == 90


def test_semestre_inexistente_devuelve_reporte_vacio(almacen_reporte):
    reporte = calcular_carga_horaria(almacen_reporte, "no-existe")
    assert reporte.filas == []
    assert reporte.total_horas == 0


def test_filas_siguen_el_orden_de_profesores(almacen):
    reporte = calcular_carga_horaria(almacen, "1")
    assert [f.profesor_id for f in reporte.filas] == ["1", "2"]
    assert [f.total_horas for f in reporte.filas] == [60, 60]


def test_pdf_generado(almacen_reporte):
    reporte = calcular_carga_horaria(almacen_reporte, "s1")
    pdf = generar_carga_horaria(reporte, "Maria Souza")
    assert pdf.startswith(b"%PDF")


def test_pdf_sin_filas(almacen_reporte):
    pdf = generar_carga_horaria(calcular_carga_horaria(almacen_reporte, "no-existe"), "Maria Souza")
    assert pdf.startswith(b"%PDF")
