"""Shared fixtures: settings and a fake engine behind `httpx.MockTransport`."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from recengclient.adapters.gravity_client import GravityClient
from recengclient.core.config import ClientSettings

ENDPOINT = "https://rec.example.com/grrec-test-war/WebshopServlet"


class FakeEngine:
    """Records every request and answers with the configured response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.content = b""

    def respond(self, status_code: int = 200, *, json_body: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        if text is not None:
            self.content = text.encode("utf-8")
        elif json_body is not None:
            self.content = json.dumps(json_body).encode("utf-8")
        else:
            self.content = b""

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the engine"
        return self.requests[-1]

    def last_body(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GRAVITY_ENDPOINT_URL",
        "GRAVITY_USERNAME",
        "GRAVITY_PASSWORD",
        "GRAVITY_READ_TIMEOUT_MILLIS",
        "GRAVITY_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(
        _env_file=None,
        endpoint_url=ENDPOINT,
        username="sampleUser",
        password="samplePasswd",
    )


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def client(settings: ClientSettings, engine: FakeEngine) -> GravityClient:
    return GravityClient(settings, transport=httpx.MockTransport(engine))
