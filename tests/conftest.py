import pytest
from fastapi.testclient import TestClient

from app.core.datos_iniciales import crear_almacen
from app.main import app
from app.services.asistente_service import AsistenteService
from tests.fakes import FakeLLM


@pytest.fixture
def almacen():
    return crear_almacen()


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def asistente(fake_llm):
    return AsistenteService(api_key="test-key", llm_factory=lambda api_key: fake_llm)


@pytest.fixture
def client(almacen, asistente):
    with TestClient(app) as c:
        app.state.almacen = almacen
        app.state.asistente = asistente
        yield c


@pytest.fixture
def auth_headers(client):
    r = client.post(
        "/api/v1/auth/login",
        json={"email": "maria.souza@uema.br", "password": "1234"},
    )
    return {"Authorization": f"Bearer {r.json()['access_token']}"}
