from __future__ import annotations

import time

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.domain.entities.errors import FetchFailure
from src.domain.entities.forecast import EventRecord
from src.main.app import create_app
from src.main.container import get_container
from tests.conftest import StubGateway, ms


def _events():
    return [
        EventRecord(timestamp=ms(100_000), duration=10),
        EventRecord(timestamp=ms(70_000), duration=12),
        EventRecord(timestamp=ms(40_000), duration=15),
    ]


def _wait_for_history(client: TestClient, count: int) -> dict:
    body: dict = {}
    for _ in range(200):
        body = client.get("/predictions").json()
        if len(body["items"]) >= count:
            break
        time.sleep(0.01)
    return body


@pytest.fixture()
def gateway() -> StubGateway:
    return StubGateway(_events())


@pytest.fixture()
def client(gateway):
    app = create_app()
    container = get_container()
    container.recent_games_gateway.override(providers.Object(gateway))

    with TestClient(app) as test_client:
        yield test_client

    container.recent_games_gateway.reset_override()


def test_first_cycle_publishes_live_prediction(client):
    body = _wait_for_history(client, 1)

    assert body["limit"] == 10
    latest = body["items"][0]
    assert latest["source"] == "API"
    assert latest["predicted_duration"] == 12

    forecast = client.get("/forecast").json()
    assert forecast["flight_duration"] == 12
    assert forecast["duration_label"] == "12 seconds"
    assert forecast["error"] is None


def test_manual_trigger_adds_prediction(client, gateway):
    _wait_for_history(client, 1)

    response = client.post("/predictions")
    assert response.status_code == 202
    assert response.json()["accepted"] is True

    body = _wait_for_history(client, 2)
    ids = [item["id"] for item in body["items"]]
    assert ids == sorted(ids, reverse=True)
    assert gateway.calls >= 2


def test_failed_fetch_records_fallback(client, gateway):
    _wait_for_history(client, 1)
    gateway.error = FetchFailure("upstream down")

    client.post("/predictions")
    body = _wait_for_history(client, 2)

    assert body["items"][0]["source"] == "Fallback"
    forecast = client.get("/forecast").json()
    assert forecast["error"] == (
        "Failed to fetch game data. Using fallback prediction."
    )
    assert client.get("/health").json()["status"] == "degraded"


def test_health_and_info(client):
    _wait_for_history(client, 1)

    health = client.get("/health").json()
    names = {dep["name"] for dep in health["dependencies"]}
    assert names == {"poller", "recent_games_api"}
    assert health["status"] == "up"

    info = client.get("/info").json()
    assert info["name"] == "Flight Predictor"
    assert info["extras"]["history_limit"] == 10
    assert info["extras"]["polling_interval_seconds"] == 30.0
