def test_login_acepta_cualquier_credencial(client):
    r = client.post("/api/v1/auth/login", json={"email": "maria.souza@uema.br", "password": "x"})

    assert r.status_code == 200
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["usuario"]["nombre"] == "Maria Souza"
    assert body["usuario"]["email"] == "maria.souza@uema.br"


def test_login_con_campos_vacios(client):
    r = client.post("/api/v1/auth/login", json={"email": "secretaria@uema.br", "password": ""})
    assert r.status_code == 422


def test_ruta_protegida_sin_token(client):
    r = client.get("/api/v1/profesores")

    assert r.status_code == 401
    assert r.headers["www-authenticate"] == "Bearer"


def test_token_invalido(client):
    r = client.get("/api/v1/me", headers={"Authorization": "Bearer no-es-un-jwt"})
    assert r.status_code == 401


def test_me(client, auth_headers):
    r = client.get("/api/v1/me", headers=auth_headers)

    assert r.status_code == 200
    assert r.json()["nombre"] == "Maria Souza"
    assert r.json()["rol"] == "secretaria"


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_login_con_espacios_en_blanco(client):
    r = client.post("/api/v1/auth/login", json={"email": "   ", "password": "1234"})
    assert r.status_code == 422


def test_login_recorta_el_correo(client):
    r = client.post("/api/v1/auth/login", json={"email": "  ana.costa@uema.br ", "password": "1234"})

    assert r.status_code == 200
    assert r.json()["usuario"]["email"] == "ana.costa@uema.br"
