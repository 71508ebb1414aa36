NUEVO = {
    "nombre": "Ana Costa",
    "email": "ana@uema.br",
    "documento_identidad": "111.222.333-44",
    "titulacion": "Especialista",
    "area": "Física",
    "carga_maxima": 30,
}


def test_listar_profesores(client, auth_headers):
    r = client.get("/api/v1/profesores", headers=auth_headers)

    assert r.status_code == 200
    assert [p["nombre"] for p in r.json()["profesores"]] == ["Dr. João Silva", "Msc. Maria Santos"]


def test_buscar_por_area(client, auth_headers):
    r = client.get("/api/v1/profesores", params={"busqueda": "matem"}, headers=auth_headers)
    assert [p["id"] for p in r.json()["profesores"]] == ["2"]


def test_crear_y_editar_profesor(client, auth_headers, almacen):
    r = client.post("/api/v1/profesores", json=NUEVO, headers=auth_headers)
    assert r.status_code == 201
    creado = r.json()
    assert creado["id"] not in ("1", "2")
    assert creado["activo"] is True
    assert creado["total_documentos"] == 0

    r = client.put(
        f"/api/v1/profesores/{creado['id']}",
        json={**NUEVO, "activo": False},
        headers=auth_headers,
    )
    assert r.status_code == 200
    assert r.json()["activo"] is False
    assert almacen.obtener_profesor("1").activo is True


def test_titulacion_invalida(client, auth_headers):
    r = client.post("/api/v1/profesores", json={**NUEVO, "titulacion": "PhD"}, headers=auth_headers)
    assert r.status_code == 422


def test_campo_obligatorio_vacio(client, auth_headers):
    r = client.post("/api/v1/profesores", json={**NUEVO, "nombre": ""}, headers=auth_headers)
    assert r.status_code == 422


def test_profesor_inexistente(client, auth_headers):
    assert client.get("/api/v1/profesores/zzz", headers=auth_headers).status_code == 404
    assert client.delete("/api/v1/profesores/zzz", headers=auth_headers).status_code == 404


def test_eliminar_profesor(client, auth_headers, almacen):
    r = client.delete("/api/v1/profesores/2", headers=auth_headers)

    assert r.status_code == 200
    assert almacen.obtener_profesor("2") is None


def test_documentos_subir_descargar_eliminar(client, auth_headers):
    contenido = b"%PDF-1.4 contenido de prueba"
    r = client.post(
        "/api/v1/profesores/1/documentos",
        files={"archivo": ("diploma.pdf", contenido, "application/pdf")},
        headers=auth_headers,
    )
    assert r.status_code == 201
    doc = r.json()
    assert doc["nombre"] == "diploma.pdf"

    r = client.get("/api/v1/profesores/1/documentos", headers=auth_headers)
    assert [d["id"] for d in r.json()["documentos"]] == [doc["id"]]

    r = client.get(f"/api/v1/profesores/1/documentos/{doc['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert r.content == contenido
    assert 'filename="diploma.pdf"' in r.headers["content-disposition"]

    r = client.delete(f"/api/v1/profesores/1/documentos/{doc['id']}", headers=auth_headers)
    assert r.status_code == 200
    r = client.get("/api/v1/profesores/1", headers=auth_headers)
    assert r.json()["total_documentos"] == 0


def test_documento_con_nombre_no_latin1(client, auth_headers):
    r = client.post(
        "/api/v1/profesores/1/documentos",
        files={"archivo": ("диплом.pdf", b"%PDF-1.4", "application/pdf")},
        headers=auth_headers,
    )
    assert r.status_code == 201

    r = client.get(f"/api/v1/profesores/1/documentos/{r.json()['id']}", headers=auth_headers)

    assert r.status_code == 200
    assert r.content == b"%PDF-1.4"
    disposicion = r.headers["content-disposition"]
    assert 'filename="archivo.pdf"' in disposicion
    assert "filename*=UTF-8''%D0%B4%D0%B8%D0%BF%D0%BB%D0%BE%D0%BC.pdf" in disposicion


def test_documento_tipo_no_permitido(client, auth_headers):
    r = client.post(
        "/api/v1/profesores/1/documentos",
        files={"archivo": ("notas.txt", b"hola", "text/plain")},
        headers=auth_headers,
    )
    assert r.status_code == 400


def test_eliminar_documento_inexistente(client, auth_headers):
    r = client.delete("/api/v1/profesores/1/documentos/zzz", headers=auth_headers)
    assert r.status_code == 404


def test_exportar_csv(client, auth_headers):
    r = client.get("/api/v1/profesores/exportar", headers=auth_headers)

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert 'filename="profesores_sigep.csv"' in r.headers["content-disposition"]
    lineas = r.text.strip("\n").split("\n")
    assert len(lineas) == 3
    assert lineas[1].startswith('"Dr. João Silva"')


def test_exportar_excel(client, auth_headers):
    r = client.get("/api/v1/profesores/exportar", params={"formato": "xlsx"}, headers=auth_headers)

    assert r.status_code == 200
    assert 'filename="profesores_sigep.xlsx"' in r.headers["content-disposition"]
    assert r.content[:2] == b"PK"
