"""Shared fixtures: a fake catalog server behind httpx.MockTransport."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from backstage_client import Client

BASE_URL = "https://foo:1234/api"
TESTDATA = Path(__file__).parent / "testdata"


def load_testdata(name: str):
    """Load a JSON fixture from tests/testdata."""
    return json.loads((TESTDATA / name).read_text(encoding="utf-8"))


class FakeCatalog:
    """Replies per (method, path) and records every request it receives."""

    def __init__(self):
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    def reply(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json_body=None,
        content: bytes | None = None,
    ) -> None:
        if json_body is not None:
            response = httpx.Response(status_code, json=json_body)
        else:
            response = httpx.Response(status_code, content=content or b"")
        self.routes[(method, path)] = response

    def reply_file(self, method: str, path: str, name: str) -> None:
        self.reply(method, path, json_body=load_testdata(name))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(
                404,
                json={"error": {"name": "NotFoundError", "message": "not found"}},
            )
        return httpx.Response(
            route.status_code, headers=route.headers, content=route.content
        )


@pytest.fixture
def catalog_server() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def http_client(catalog_server):
    with httpx.Client(transport=httpx.MockTransport(catalog_server.handler)) as c:
        yield c


@pytest.fixture
def client(http_client) -> Client:
    return Client(BASE_URL, "", http_client)
