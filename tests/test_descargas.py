from app.core.descargas import content_disposition


def test_nombre_ascii():
    assert content_disposition("diploma.pdf") == (
        "attachment; filename=\"diploma.pdf\"; filename*=UTF-8''diploma.pdf"
    )


def test_nombre_con_acentos_usa_respaldo_sin_acentos():
    cabecera = content_disposition("título João.pdf")

    assert 'filename="titulo Joao.pdf"' in cabecera
    assert "filename*=UTF-8''t%C3%ADtulo%20Jo%C3%A3o.pdf" in cabecera
    cabecera.encode("latin-1")


def test_comillas_no_rompen_la_cabecera():
    cabecera = content_disposition('acta "final".pdf')

    assert 'filename="acta _final_.pdf"' in cabecera
    assert "%22final%22" in cabecera


def test_nombre_sin_caracteres_ascii():
    cabecera = content_disposition("📄")
    assert 'filename="archivo"' in cabecera
    cabecera.encode("latin-1")
