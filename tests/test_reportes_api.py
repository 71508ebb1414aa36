def test_carga_horaria_por_defecto_primer_semestre(client, auth_headers):
    r = client.get("/api/v1/reportes/carga-horaria", headers=auth_headers)

    assert r.status_code == 200
    body = r.json()
    assert body["semestre_nombre"] == "2024.1"
    assert [(f["profesor_nombre"], f["total_horas"]) for f in body["filas"]] == [
        ("Dr. João Silva", 60),
        ("Msc. Maria Santos", 60),
    ]
    assert body["total_horas"] == 120


def test_carga_horaria_semestre_inexistente(client, auth_headers):
    r = client.get("/api/v1/reportes/carga-horaria", params={"semestre_id": "zzz"}, headers=auth_headers)
    assert r.status_code == 404


def test_carga_horaria_pdf(client, auth_headers):
    r = client.get("/api/v1/reportes/carga-horaria/pdf", params={"semestre_id": "1"}, headers=auth_headers)

    assert r.status_code == 200
    assert r.headers["content-type"] == "application/pdf"
    assert r.content.startswith(b"%PDF")
    assert 'filename="carga_horaria_2024.1.pdf"' in r.headers["content-disposition"]


def test_panel(client, auth_headers):
    r = client.get("/api/v1/panel", headers=auth_headers)

    assert r.status_code == 200
    assert r.json()["total_profesores"] == 2
    assert r.json()["semestre_activo"] == "2024.1"


def test_carga_horaria_pdf_semestre_con_nombre_unicode(client, auth_headers):
    client.put(
        "/api/v1/semestres/1",
        json={"nombre": "2024–1 🎓", "fecha_inicio": "2024-02-01", "fecha_fin": "2024-06-30", "estado": "activo"},
        headers=auth_headers,
    )

    r = client.get("/api/v1/reportes/carga-horaria/pdf", params={"semestre_id": "1"}, headers=auth_headers)

    assert r.status_code == 200
    assert r.content.startswith(b"%PDF")
    assert "filename*=UTF-8''carga_horaria_2024%E2%80%931_%F0%9F%8E%93.pdf" in r.headers["content-disposition"]
