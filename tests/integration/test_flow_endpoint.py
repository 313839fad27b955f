"""Testes de integração do endpoint de Flow via ASGI (TestClient)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from config.settings import FlowRelaySettings
from tests.fakes.flow_envelopes import default_key_pair, encrypt_payload


@pytest.fixture
def client() -> Iterator[TestClient]:
    settings = FlowRelaySettings(private_key_pem=default_key_pair().private_pem)
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def test_get_liveness(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_put_is_not_allowed(client: TestClient) -> None:
    response = client.put("/", json={"a": 1})

    assert response.status_code == 405
    assert response.text == "Method Not Allowed"


def test_challenge_round_trip(client: TestClient) -> None:
    response = client.post("/", json={"challenge": "handshake-123"})

    assert response.status_code == 200
    assert response.json() == {"challenge": "handshake-123"}


def test_health_check(client: TestClient) -> None:
    response = client.post("/", json={}, headers={"X-Meta-Health-Check": "1"})

    assert response.status_code == 200
    assert response.text == "b2s="


def test_encrypted_event_without_destination_acks_empty(client: TestClient) -> None:
    envelope = encrypt_payload({"action": "ping"}, default_key_pair().public_jwk)

    response = client.post("/", json={"encrypted_flow_data": envelope})

    assert response.status_code == 200
    assert response.content == b""


def test_malformed_body_acks_empty(client: TestClient) -> None:
    response = client.post(
        "/", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 200
    assert response.content == b""


def test_lifespan_injects_use_case(client: TestClient) -> None:
    state = client.app.state
    assert state.flow_settings.decryption_enabled is True
    assert state.flow_event_use_case is not None


@pytest.mark.parametrize("method", ["TRACE", "PROPFIND", "MKCOL"])
def test_unlisted_method_gets_plain_text_405(client: TestClient, method: str) -> None:
    response = client.request(method, "/")

    assert response.status_code == 405
    assert response.text == "Method Not Allowed"
    assert response.headers["content-type"].startswith("text/plain")
    assert response.headers["allow"] == "GET, POST"


def test_unknown_path_keeps_default_404(client: TestClient) -> None:
    response = client.get("/missing")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}
