def test_listar_semestres_con_nombres_resueltos(client, auth_headers):
    r = client.get("/api/v1/semestres", headers=auth_headers)

    assert r.status_code == 200
    semestre = r.json()["semestres"][0]
    assert semestre["nombre"] == "2024.1"
    assert semestre["total_horas"] == 120
    assert semestre["ofertas"][0]["disciplina_nombre"] == "Algoritmos y Programación"
    assert semestre["ofertas"][0]["profesor_nombre"] == "Dr. João Silva"


def test_crear_semestre_en_planificacion(client, auth_headers):
    r = client.post(
        "/api/v1/semestres",
        json={"nombre": "2024.2", "fecha_inicio": "2024-08-01", "fecha_fin": "2024-12-15"},
        headers=auth_headers,
    )

    assert r.status_code == 201
    assert r.json()["estado"] == "planificacion"
    assert r.json()["ofertas"] == []


def test_cambiar_estado(client, auth_headers):
    r = client.patch("/api/v1/semestres/1/estado", json={"estado": "cerrado"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["estado"] == "cerrado"

    r = client.patch("/api/v1/semestres/1/estado", json={"estado": "archivado"}, headers=auth_headers)
    assert r.status_code == 422


def test_oferta_sin_carga_usa_la_de_la_disciplina(client, auth_headers):
    r = client.post(
        "/api/v1/semestres/1/ofertas",
        json={"disciplina_id": "3", "profesor_id": ""},
        headers=auth_headers,
    )

    assert r.status_code == 201
    oferta = r.json()
    assert oferta["carga_horaria"] == 45
    assert oferta["profesor_id"] is None
    assert oferta["profesor_nombre"] == "Pendiente"


def test_oferta_con_carga_explicita(client, auth_headers):
    r = client.post(
        "/api/v1/semestres/1/ofertas",
        json={"disciplina_id": "1", "profesor_id": "2", "carga_horaria": 30},
        headers=auth_headers,
    )
    assert r.json()["carga_horaria"] == 30


def test_oferta_con_disciplina_desconocida_usa_60(client, auth_headers):
    r = client.post(
        "/api/v1/semestres/1/ofertas",
        json={"disciplina_id": "zzz"},
        headers=auth_headers,
    )
    assert r.json()["carga_horaria"] == 60
    assert r.json()["disciplina_nombre"] == "Desconocida"


def test_eliminar_oferta(client, auth_headers, almacen):
    r = client.delete("/api/v1/semestres/1/ofertas/101", headers=auth_headers)
    assert r.status_code == 200
    assert [o.id for o in almacen.obtener_semestre("1").ofertas] == ["102"]

    r = client.delete("/api/v1/semestres/1/ofertas/101", headers=auth_headers)
    assert r.status_code == 404


def test_profesor_eliminado_se_muestra_desconocido(client, auth_headers):
    client.delete("/api/v1/profesores/1", headers=auth_headers)

    r = client.get("/api/v1/semestres/1", headers=auth_headers)

    assert r.json()["ofertas"][0]["profesor_nombre"] == "Desconocido"


def test_disciplinas_crud(client, auth_headers):
    r = client.post(
        "/api/v1/disciplinas",
        json={"nombre": "Bases de Datos", "codigo": "COMP03"},
        headers=auth_headers,
    )
    assert r.status_code == 201
    disciplina = r.json()
    assert disciplina["carga_horaria"] == 60

    r = client.put(
        f"/api/v1/disciplinas/{disciplina['id']}",
        json={"nombre": "Bases de Datos I", "codigo": "COMP03", "carga_horaria": 75},
        headers=auth_headers,
    )
    assert r.json()["carga_horaria"] == 75

    r = client.delete(f"/api/v1/disciplinas/{disciplina['id']}", headers=auth_headers)
    assert r.status_code == 200
    nombres = [d["nombre"] for d in client.get("/api/v1/disciplinas", headers=auth_headers).json()["disciplinas"]]
    assert "Bases de Datos I" not in nombres
