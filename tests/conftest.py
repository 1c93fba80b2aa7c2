"""Root conftest: shared test configuration."""

import json
import logging
import os

import httpx
import pytest

from arkrpc.core.config import AppSettings

BASE_URL = "https://api.example.test"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Tests never read the developer's ARKRPC_* variables or user .env."""
    for key in list(os.environ):
        if key.upper().startswith("ARKRPC_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))

    yield

    logger = logging.getLogger("arkrpc")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def make_settings(**overrides) -> AppSettings:
    return AppSettings(_env_file=None, **overrides)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def echo_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=json.loads(request.content or b"null"))


def json_response(status_code: int, payload=None):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler
