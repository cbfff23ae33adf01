"""Shared test fixtures: canned OneMap payloads and a fake HTTP session."""

from __future__ import annotations

import copy

import pytest
import requests

from sglocate import SearchGateway

API_URL = "https://onemap.test/api/common/elastic/search"

GRACEHAVEN_PAYLOAD = {
    "found": 1,
    "totalNumPages": 1,
    "pageNum": 1,
    "results": [
        {
            "SEARCHVAL": "GRACEHAVEN",
            "BLK_NO": "1",
            "ROAD_NAME": "LORONG LEW LIAN",
            "BUILDING": "GRACEHAVEN",
            "ADDRESS": "1 LORONG LEW LIAN GRACEHAVEN SINGAPORE 547528",
            "POSTAL": "547528",
            "X": "33462.1930898614",
            "Y": "37839.1290542837",
            "LATITUDE": "1.35766685839907",
            "LONGITUDE": "103.877432811443",
        }
    ],
}

PLAZA_PAYLOAD = {
    "found": 3,
    "totalNumPages": 2,
    "pageNum": 1,
    "results": [
        {
            "SEARCHVAL": "PLAZA SINGAPURA",
            "BLK_NO": "68",
            "ROAD_NAME": "ORCHARD ROAD",
            "BUILDING": "PLAZA SINGAPURA",
            "ADDRESS": "68 ORCHARD ROAD PLAZA SINGAPURA SINGAPORE 238839",
            "POSTAL": "238839",
            "LATITUDE": "1.30080282653968",
            "LONGITUDE": "103.845170035093",
        },
        {
            "SEARCHVAL": "PLAZA SINGAPURA CARPARK",
            "BLK_NO": "68",
            "ROAD_NAME": "ORCHARD ROAD",
            "BUILDING": "NIL",
            "ADDRESS": "68 ORCHARD ROAD PLAZA SINGAPURA CARPARK SINGAPORE 238839",
            "POSTAL": "238839",
            "LATITUDE": "1.30101210416578",
            "LONGITUDE": "103.845260710564",
        },
    ],
}

EMPTY_PAYLOAD = {"found": 0, "totalNumPages": 0, "pageNum": 1, "results": []}


class FakeResponse:
    def __init__(self, payload, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return copy.deepcopy(self._payload)


class FakeSession:
    """Stands in for requests.Session; records every GET it receives."""

    def __init__(self, payload=None, status_code: int = 200, error: Exception | None = None):
        self.payload = payload
        self.status_code = status_code
        self.error = error
        self.calls: list[dict] = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append(
            {"url": url, "params": params, "headers": headers, "timeout": timeout}
        )
        if self.error is not None:
            raise self.error
        return FakeResponse(self.payload, self.status_code)


@pytest.fixture()
def api_url() -> str:
    return API_URL


@pytest.fixture()
def gracehaven_payload() -> dict:
    return copy.deepcopy(GRACEHAVEN_PAYLOAD)


@pytest.fixture()
def plaza_payload() -> dict:
    return copy.deepcopy(PLAZA_PAYLOAD)


@pytest.fixture()
def fake_session():
    """Factory: build a FakeSession with a payload, status code or error."""

    def _make(payload=None, **kwargs) -> FakeSession:
        return FakeSession(payload, **kwargs)

    return _make


@pytest.fixture()
def make_gateway(fake_session):
    """Factory: build a SearchGateway backed by a FakeSession."""

    def _make(
        payload=None, api_key: str | None = None, **session_kwargs
    ) -> tuple[SearchGateway, FakeSession]:
        session = fake_session(payload, **session_kwargs)
        gateway = SearchGateway(api_url=API_URL, api_key=api_key, session=session)
        return gateway, session

    return _make


@pytest.fixture()
def gracehaven_gateway(make_gateway):
    gateway, _ = make_gateway(GRACEHAVEN_PAYLOAD)
    return gateway


@pytest.fixture()
def plaza_gateway(make_gateway):
    gateway, _ = make_gateway(PLAZA_PAYLOAD)
    return gateway


@pytest.fixture()
def empty_gateway(make_gateway):
    gateway, _ = make_gateway(EMPTY_PAYLOAD)
    return gateway
