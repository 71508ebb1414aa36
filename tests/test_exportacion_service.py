import csv
from io import BytesIO, StringIO

from openpyxl import load_workbook

from app.models import Profesor
from app.services.exportacion_service import COLUMNAS, exportar_csv, exportar_excel

PROFESORES = [
    Profesor(
        id="1",
        nombre="Silva, João",
        email="joao@uema.br",
        documento_identidad="123.456.789-00",
        titulacion="Doctor",
        area="Computación",
        carga_maxima=40,
    ),
    Profesor(
        id="2",
        nombre="Maria Santos",
        email="maria@uema.br",
        documento_identidad="987.654.321-00",
        titulacion="Magister",
        area="Matemática, Estadística",
        carga_maxima=20,
        activo=False,
    ),
]


def test_csv_una_linea_por_profesor_mas_encabezado():
    contenido = exportar_csv(PROFESORES)

    lineas = contenido.strip("\n").split("\n")
    assert len(lineas) == 3
    assert lineas[0] == "Nombre,Email,Documento,Titulacion,Area,Carga Maxima,Estado,Documentos"


def test_csv_campos_con_coma_quedan_bien_formados():
    filas = list(csv.reader(StringIO(exportar_csv(PROFESORES))))

    assert filas[1][0] == "Silva, João"
    assert filas[2][4] == "Matemática, Estadística"
    assert all(len(f) == len(COLUMNAS) for f in filas)


def test_csv_textos_entre_comillas_y_numeros_sin_comillas():
    linea = exportar_csv(PROFESORES).split("\n")[2]
    assert linea.startswith('"Maria Santos","maria@uema.br"')
    assert linea.endswith(',20,"Inactivo",0')


def test_csv_sin_profesores_solo_encabezado():
    assert exportar_csv([]).strip("\n") == ",".join(COLUMNAS)


def test_excel_mismo_contenido():
    wb = load_workbook(BytesIO(exportar_excel(PROFESORES)))
    hoja = wb["Profesores"]
    filas = list(hoja.iter_rows(values_only=True))

    assert list(filas[0]) == COLUMNAS
    assert filas[1][0] == "Silva, João"
    assert filas[2][6] == "Inactivo"
