"""Pytest bootstrap configuration.

Isolate every test from EDGE_STORE_* variables exported in the shell and
provide a recording httpx transport instead of the network.
"""
import json

import httpx
import pytest


@pytest.fixture(autouse=True)
def _clean_edgestore_env(monkeypatch):
    for name in ("EDGE_STORE_API_ENDPOINT", "EDGE_STORE_ACCESS_KEY", "EDGE_STORE_SECRET_KEY", "EDGE_STORE_DEBUG"):
        monkeypatch.delenv(name, raising=False)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request and answers from a fixed reply."""

    def __init__(self, status_code: int = 200, payload=None, text=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.payload = {} if payload is None else payload
        self.text = text
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_transport():
    def _make(status_code: int = 200, payload=None, text=None) -> RecordingTransport:
        return RecordingTransport(status_code=status_code, payload=payload, text=text)
    return _make
