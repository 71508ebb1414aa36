"""Cabecera Content-Disposition para descargas con nombres de archivo arbitrarios."""
import unicodedata
from urllib.parse import quote


def content_disposition(nombre_archivo: str) -> str:
    """``attachment`` con un nombre ASCII de respaldo y el original en ``filename*`` (RFC 6266).

    Las cabeceras HTTP se codifican en latin-1; el nombre UTF-8 va siempre
    percent-encoded.
    """
    respaldo = (
        unicodedata.normalize("NFKD", nombre_archivo)
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    respaldo = "".join("_" if c in '"\\' or not c.isprintable() else c for c in respaldo).strip()
    if not respaldo or respaldo.startswith("."):
        respaldo = f"archivo{respaldo}"
    return f"attachment; filename=\"{respaldo}\"; filename*=UTF-8''{quote(nombre_archivo, safe='')}"
