"""Indicadores del panel principal."""
from app.core.store import Almacen
from app.models import Titulacion
from app.schemas.panel import PanelResponse, TitulacionConteo

# Orden en que se muestra la distribución por titulación
ORDEN_TITULACIONES = [
    Titulacion.DOCTOR,
    Titulacion.MAGISTER,
    Titulacion.ESPECIALISTA,
    Titulacion.GRADUADO,
]


def resumen_panel(almacen: Almacen) -> PanelResponse:
    activo = almacen.semestre_activo()

    conteos = {
        t: sum(1 for p in almacen.profesores if p.titulacion == t) for t in ORDEN_TITULACIONES
    }
    maximo = max(max(conteos.values()), 1)
    titulaciones = [
        TitulacionConteo(titulacion=t, cantidad=c, porcentaje=round(c / maximo * 100, 1))
        for t, c in conteos.items()
    ]

    if activo:
        mensaje = (
            f"El semestre {activo.nombre} está en curso hasta el "
            f"{activo.fecha_fin.strftime('%d/%m/%Y')}."
        )
    else:
        mensaje = "No hay semestre activo en este momento."

    return PanelResponse(
        total_profesores=len(almacen.profesores),
        total_disciplinas=len(almacen.disciplinas),
        total_semestres=len(almacen.semestres),
        semestre_activo=activo.nombre if activo else None,
        ofertas_activas=len(activo.ofertas) if activo else 0,
        titulaciones=titulaciones,
        mensaje=mensaje,
    )
