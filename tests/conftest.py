"""Shared fixtures: explicit settings and a counting mock transport."""

import json

import httpx
import pandas as pd
import pytest

from econ_series.config import Settings


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def call_count(self) -> int:
        return len(self.requests)


def fred_payload(observations: list[dict]) -> dict:
    return {"observations": observations}


@pytest.fixture
def settings(tmp_path):
    return Settings(
        fred_api_key="fred-test-key",
        bls_api_key="bls-test-key",
        bea_api_key="bea-test-key",
        cache_dir=tmp_path / "cache",
    )


@pytest.fixture
def make_client():
    """Build an httpx.Client around a handler; returns (client, transport)."""
    clients = []

    def factory(handler):
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport)
        clients.append(client)
        return client, transport

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def fred_handler():
    """Handler serving canned FRED observations keyed by series_id."""

    def build(responses: dict[str, list[dict]]):
        def handler(request: httpx.Request) -> httpx.Response:
            series_id = request.url.params["series_id"]
            if series_id not in responses:
                return httpx.Response(400, json={"error_message": "Bad series"})
            return httpx.Response(200, content=json.dumps(fred_payload(responses[series_id])))

        return handler

    return build


@pytest.fixture
def rates_snapshot_frame():
    """Raw bundle rows spanning 2020-2023, deliberately out of order."""
    rows = [
        ("DGS10", "2023-06-01", 3.69),
        ("DFF", "2020-01-02", 1.55),
        ("DGS2", "2021-03-01", 0.13),
        ("DFF", "2023-06-01", 5.08),
        ("DGS10", "2020-01-02", 1.88),
        ("DGS2", "2022-09-30", 4.22),
        ("DGS10", "2022-09-30", None),
    ]
    df = pd.DataFrame(rows, columns=["series_id", "date", "value"])
    df["date"] = pd.to_datetime(df["date"], format="%Y-%m-%d")
    df["value"] = df["value"].astype("float64")
    return df
