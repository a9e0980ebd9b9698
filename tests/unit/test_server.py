from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from encoder_captions.server import app


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch):
    for name in ("CAPTIONS_HOST", "CAPTIONS_PORT", "CAPTIONS_LINES", "CAPTIONS_PROTOCOL_VARIANT"):
        monkeypatch.delenv(name, raising=False)
    with TestClient(app) as test_client:
        yield test_client


def test_health_endpoints(client: TestClient) -> None:
    for path in ("/", "/health", "/healthz"):
        response = client.get(path)
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


def test_missing_host_reports_bad_config(client: TestClient) -> None:
    body = client.get("/status").json()
    assert body["status"] == "bad_config"
    assert body["message"] == "No host"
    assert body["phase"] == "bad_config"
    assert client.get("/captions").json() == {"captions": ""}


def test_variable_and_field_definitions(client: TestClient) -> None:
    assert client.get("/variables").json() == [{"variableId": "captions", "name": "Captions"}]
    fields = {field["id"]: field for field in client.get("/config/fields").json()}
    assert set(fields) == {"host", "port", "lines", "clearAfterInterval", "silenceInterval"}
    assert fields["port"]["default"] == 23
    assert fields["lines"]["max"] == 10


def test_get_config_uses_form_names(client: TestClient) -> None:
    body = client.get("/config").json()
    assert body == {
        "host": "",
        "port": 23,
        "lines": 2,
        "clearAfterInterval": True,
        "silenceInterval": 5.0,
    }


@pytest.mark.parametrize(
    "payload",
    [
        {"host": "", "port": 70000},
        {"host": "", "lines": 0},
        {"host": "", "lines": 11},
        {"host": "", "silenceInterval": 61},
    ],
)
def test_put_config_rejects_out_of_range(client: TestClient, payload: dict) -> None:
    assert client.put("/config", json=payload).status_code == 422


def test_put_config_replaces_session(client: TestClient) -> None:
    response = client.put(
        "/config",
        json={"host": "  ", "port": 2323, "lines": 4, "clearAfterInterval": False, "silenceInterval": 9},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "bad_config"

    body = client.get("/config").json()
    assert body["port"] == 2323
    assert body["lines"] == 4
    assert body["clearAfterInterval"] is False
    assert body["silenceInterval"] == 9.0


def test_out_of_range_env_config_is_served_clamped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CAPTIONS_HOST", raising=False)
    monkeypatch.delenv("CAPTIONS_PROTOCOL_VARIANT", raising=False)
    monkeypatch.setenv("CAPTIONS_LINES", "20")
    monkeypatch.setenv("CAPTIONS_PORT", "0")
    with TestClient(app) as test_client:
        response = test_client.get("/config")
    assert response.status_code == 200
    assert response.json()["lines"] == 10
    assert response.json()["port"] == 1
