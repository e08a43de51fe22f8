"""
Pytest configuration and shared fixtures for Keyword Relay tests.

The upstream chat-completions API is simulated with httpx.MockTransport, so
no test ever reaches the network.
"""
import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from keyword_relay.config.settings import Settings, get_settings
from keyword_relay.controllers.keyword_controller import KeywordController, create_openai_client

UPSTREAM_BASE_URL = "https://upstream.test/v1"


class FakeUpstream:
    """Records every upstream request and answers with a configurable handler."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"choices": [{"message": {"content": "東京 - Tokyo"}}]}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)

    def reply_json(self, payload, status_code: int = 200):
        self.responder = lambda request: httpx.Response(status_code, json=payload)

    def reply_text(self, text: str, status_code: int = 200):
        self.responder = lambda request: httpx.Response(status_code, text=text)

    def fail_with(self, exc_type, description: str):
        def _raise(request):
            raise exc_type(description, request=request)
        self.responder = _raise


@pytest.fixture
def settings():
    """Settings with a test key and no .env lookup."""
    return Settings(
        openai_api_key="sk-test",
        openai_model="gpt-5-mini",
        openai_base_url=UPSTREAM_BASE_URL,
        _env_file=None,
    )


@pytest.fixture
def settings_without_key():
    return Settings(openai_api_key="", openai_base_url=UPSTREAM_BASE_URL, _env_file=None)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def make_controller(upstream):
    """Build a KeywordController whose client talks to the fake upstream."""
    def _make(settings: Settings) -> KeywordController:
        if not settings.has_api_key:
            return KeywordController(settings=settings)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
        return KeywordController(settings=settings, client=create_openai_client(settings, http_client))
    return _make


@pytest.fixture
def controller(make_controller, settings):
    return make_controller(settings)


@pytest.fixture
def app(monkeypatch):
    """The real app, with the settings its lifespan reads pinned to test values."""
    from main import app as fastapi_app

    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_BASE_URL", UPSTREAM_BASE_URL)
    monkeypatch.setenv("SYSTEM_ENVIRONMENT", "local")
    get_settings.cache_clear()
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
def client(app, make_controller, settings):
    """TestClient with the relay wired to the fake upstream."""
    from keyword_relay.api.endpoints.relay import get_keyword_controller

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_keyword_controller] = lambda: make_controller(settings)
    with TestClient(app) as test_client:
        yield test_client
