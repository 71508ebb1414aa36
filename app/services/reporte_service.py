"""Consolidación de la carga horaria por profesor en un semestre."""
from app.core.store import Almacen
from app.schemas.reporte import FilaCargaHoraria, ReporteCargaHoraria


def calcular_carga_horaria(almacen: Almacen, semestre_id: str) -> ReporteCargaHoraria:
    """Suma la carga de las ofertas de cada profesor en el semestre.

    Las filas siguen el orden de la colección de profesores; los profesores sin
    ofertas en el semestre se omiten. Se recalcula en cada llamada.
    """
    semestre = almacen.obtener_semestre(semestre_id)
    if not semestre:
        return ReporteCargaHoraria(semestre_id=semestre_id, filas=[], total_horas=0)

    filas = []
    for prof in almacen.profesores:
        ofertas = [o for o in semestre.ofertas if o.profesor_id == prof.id]
        if not ofertas:
            continue
        nombres = []
        for o in ofertas:
            disciplina = almacen.obtener_disciplina(o.disciplina_id)
            if disciplina:
                nombres.append(disciplina.nombre)
        filas.append(
            FilaCargaHoraria(
                profesor_id=prof.id,
                profesor_nombre=prof.nombre,
                titulacion=prof.titulacion,
                disciplinas=", ".join(nombres),
                total_horas=sum(o.carga_horaria for o in ofertas),
            )
        )

    return ReporteCargaHoraria(
        semestre_id=semestre.id,
        semestre_nombre=semestre.nombre,
        filas=filas,
        total_horas=sum(f.total_horas for f in filas),
    )
