import json

import pytest
import requests


class DummyResponse:
    def __init__(self, status_code, json_data=None, text=None):
        self.status_code = status_code
        self._json = json_data
        self.reason = "OK" if 200 <= status_code < 300 else "Error"
        self.headers = {"Content-Type": "application/json"}
        if text is not None:
            self.content = text.encode("utf-8")
        elif json_data is not None:
            self.content = json.dumps(json_data).encode("utf-8")
        else:
            self.content = b""

    def json(self):
        if self._json is None:
            return json.loads(self.content.decode("utf-8"))
        return self._json


class DummySession:
    def __init__(self, responses=None, error=None):
        # responses: dict of (method, url) -> DummyResponse
        self.responses = responses or {}
        self.error = error
        self.headers = {}
        self.sent = []

    def prepare_request(self, request):
        request.headers = {**self.headers, **request.headers}
        return request.prepare()

    def send(self, prepared, timeout=None):
        self.sent.append(prepared)
        if self.error is not None:
            raise self.error
        return self.responses.get((prepared.method, prepared.url), DummyResponse(404, {"error": "no such index"}))


@pytest.fixture
def make_session():
    return DummySession


@pytest.fixture
def make_response():
    return DummyResponse


@pytest.fixture(autouse=True)
def clean_search_env(monkeypatch):
    for key in ("SEARCH_API_ROOT", "SEARCH_API_TOKEN", "SEARCH_API_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
