"""Servicio de generación del reporte de carga horaria en PDF con reportlab."""
from datetime import datetime, timedelta, timezone
from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.schemas.reporte import ReporteCargaHoraria

# ── Colores institucionales ───────────────────────────────────────────
NAVY = colors.HexColor("#1B2A4A")
GRAY = colors.HexColor("#6B7280")
GRAY_LIGHT = colors.HexColor("#F3F4F6")

INSTITUCION = "UNIVERSIDAD ESTADUAL DO MARANHÃO - SIGEP"
AVISO_PIE = "Este documento no sirve como comprobante de pago."

# ── Zona horaria ──────────────────────────────────────────────────────
GMT_MINUS_3 = timezone(timedelta(hours=-3))

# ── Márgenes y medidas de página ──────────────────────────────────────
_LEFT_MARGIN = 0.75 * inch
_RIGHT_MARGIN = 0.75 * inch
_BOTTOM_MARGIN = 0.75 * inch
# topMargin alto para dejar espacio al header dibujado en canvas
_TOP_MARGIN = 1.4 * inch


# ── Canvas: header + pie en cada página ──────────────────────────────

def _make_page_callback(titulo_reporte: str):
    """Retorna una función que dibuja el header institucional y el pie en cada página."""

    def _dibujar_pagina(canvas, doc):
        canvas.saveState()

        page_width, page_height = letter
        left_x = _LEFT_MARGIN
        right_x = page_width - _RIGHT_MARGIN
        top_y = page_height - 0.5 * inch

        canvas.setFont("Helvetica-Bold", 8)
        canvas.setFillColor(NAVY)
        canvas.drawRightString(right_x, top_y, INSTITUCION)

        # ── Línea separadora ──────────────────────────────────────
        sep_y = top_y - 10
        canvas.setStrokeColor(NAVY)
        canvas.setLineWidth(1.5)
        canvas.line(left_x, sep_y, right_x, sep_y)

        # ── Título del reporte (centrado, bajo la línea) ──────────
        canvas.setFont("Helvetica-Bold", 15)
        canvas.drawCentredString(page_width / 2, sep_y - 24, titulo_reporte)

        # ── Pie: aviso + número de página ─────────────────────────
        canvas.setFont("Helvetica", 7)
        canvas.setFillColor(GRAY)
        canvas.drawString(left_x, 0.45 * inch, AVISO_PIE)
        canvas.drawRightString(right_x, 0.45 * inch, f"Página {doc.page}")

        canvas.restoreState()

    return _dibujar_pagina


# ── Elementos de encabezado (flujo de texto: subtítulo + meta) ────────

def _encabezado(subtitulo: str = "", usuario_nombre: str = "") -> list:
    """Retorna los elementos de subtítulo, fecha y usuario como flowables."""
    estilos = getSampleStyleSheet()
    elementos = []

    if subtitulo:
        estilo_sub = ParagraphStyle(
            "SubtituloReporte",
            parent=estilos["Normal"],
            fontSize=10,
            leading=14,
            textColor=GRAY,
            spaceAfter=6,
        )
        elementos.append(Paragraph(subtitulo, estilo_sub))

    estilo_meta = ParagraphStyle(
        "MetaReporte",
        parent=estilos["Normal"],
        fontSize=9,
        leading=14,
        textColor=GRAY,
        spaceAfter=3,
    )
    fecha = datetime.now(GMT_MINUS_3).strftime("%d/%m/%Y %H:%M GMT-3")
    elementos.append(Paragraph(f"Generado por el sistema SIGEP: {fecha}", estilo_meta))
    if usuario_nombre:
        elementos.append(Paragraph(f"Generado por: {usuario_nombre}", estilo_meta))
    elementos.append(Spacer(1, 0.25 * inch))

    return elementos


def _tabla(headers: list[str], rows: list[list], col_widths=None, fila_total: bool = False) -> Table:
    """Crea una tabla con estilo institucional; opcionalmente resalta la última fila como total."""
    data = [headers] + rows
    table = Table(data, colWidths=col_widths, repeatRows=1)
    estilo = [
        ("BACKGROUND", (0, 0), (-1, 0), NAVY),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 9),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
        ("TOPPADDING", (0, 0), (-1, 0), 8),
        ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 1), (-1, -1), 8),
        ("BOTTOMPADDING", (0, 1), (-1, -1), 6),
        ("TOPPADDING", (0, 1), (-1, -1), 6),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#D1D5DB")),
        *[
            ("BACKGROUND", (0, i), (-1, i), GRAY_LIGHT)
            for i in range(2, len(data), 2)
        ],
        ("ALIGN", (0, 0), (-1, -1), "LEFT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    if fila_total:
        estilo += [
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
            ("LINEABOVE", (0, -1), (-1, -1), 1, NAVY),
        ]
    table.setStyle(TableStyle(estilo))
    return table


def _nuevo_doc(buf: BytesIO) -> SimpleDocTemplate:
    """Crea un SimpleDocTemplate con los márgenes institucionales."""
    return SimpleDocTemplate(
        buf,
        pagesize=letter,
        topMargin=_TOP_MARGIN,
        bottomMargin=_BOTTOM_MARGIN,
        leftMargin=_LEFT_MARGIN,
        rightMargin=_RIGHT_MARGIN,
    )


def generar_carga_horaria(reporte: ReporteCargaHoraria, usuario_nombre: str = "") -> bytes:
    """Reporte consolidado de carga horaria: una fila por profesor y total general."""
    titulo = "Reporte de Carga Horaria"
    buf = BytesIO()
    doc = _nuevo_doc(buf)
    page_cb = _make_page_callback(titulo)
    elementos = _encabezado(f"Semestre: {reporte.semestre_nombre or reporte.semestre_id}", usuario_nombre)

    if not reporte.filas:
        elementos.append(Paragraph(
            "No se encontraron registros para el semestre seleccionado.",
            getSampleStyleSheet()["Normal"],
        ))
    else:
        celda = ParagraphStyle("Celda", fontName="Helvetica", fontSize=8, leading=10)
        rows = [
            [f.profesor_nombre, f.titulacion, Paragraph(f.disciplinas, celda), f"{f.total_horas}h"]
            for f in reporte.filas
        ]
        rows.append(["Total general", "", "", f"{reporte.total_horas}h"])
        elementos.append(_tabla(
            ["Profesor", "Titulación", "Disciplinas", "Carga Total"],
            rows,
            col_widths=[2 * inch, 1.1 * inch, 2.9 * inch, 1 * inch],
            fila_total=True,
        ))

    doc.build(elementos, onFirstPage=page_cb, onLaterPages=page_cb)
    return buf.getvalue()
