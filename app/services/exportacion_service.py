"""Exportación del plantel de profesores a CSV y Excel con pandas."""
import csv
from io import BytesIO

import pandas as pd

from app.models import Profesor

COLUMNAS = [
    "Nombre",
    "Email",
    "Documento",
    "Titulacion",
    "Area",
    "Carga Maxima",
    "Estado",
    "Documentos",
]

NOMBRE_ARCHIVO = "profesores_sigep"


def _tabla_profesores(profesores: list[Profesor] | tuple[Profesor, ...]) -> pd.DataFrame:
    filas = [
        [
            p.nombre,
            p.email,
            p.documento_identidad,
            p.titulacion,
            p.area,
            p.carga_maxima,
            "Activo" if p.activo else "Inactivo",
            len(p.documentos),
        ]
        for p in profesores
    ]
    return pd.DataFrame(filas, columns=COLUMNAS)


def exportar_csv(profesores: list[Profesor] | tuple[Profesor, ...]) -> str:
    """CSV con encabezado y una fila por profesor: textos entre comillas dobles, números sin comillas."""
    filas = _tabla_profesores(profesores).to_csv(
        index=False,
        header=False,
        quoting=csv.QUOTE_NONNUMERIC,
        lineterminator="\n",
    )
    return ",".join(COLUMNAS) + "\n" + filas


def exportar_excel(profesores: list[Profesor] | tuple[Profesor, ...]) -> bytes:
    """Mismo contenido que el CSV en una hoja .xlsx."""
    buf = BytesIO()
    _tabla_profesores(profesores).to_excel(buf, index=False, sheet_name="Profesores", engine="openpyxl")
    return buf.getvalue()
