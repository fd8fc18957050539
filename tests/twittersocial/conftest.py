"""Shared fixtures for twittersocial tests.

No network access: every test talks to :class:`MockTwitterApi`, a scripted
stand-in served through ``httpx.MockTransport``.  Requests must arrive in
the order they were expected, and any expectation left unconsumed fails the
test at teardown.
"""

from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx
import pytest

from twittersocial.auth import OAuthCredentials
from twittersocial.client import TwitterClient

FIXTURES = Path(__file__).parent / "fixtures"

CREDENTIALS = OAuthCredentials(
    consumer_key="consumer-key",
    consumer_secret="consumer-secret",
    access_token="access-token",
    access_token_secret="access-token-secret",
)


def _load_json_resource(name: str) -> Any:
    return json.loads((FIXTURES / f"{name}.json").read_text())


@dataclass
class _Expectation:
    method: str
    url: str
    params: dict[str, str]
    body: bytes | None
    response: httpx.Response


class MockTwitterApi:
    def __init__(self) -> None:
        self._expected: deque[_Expectation] = deque()
        self.requests: list[httpx.Request] = []

    def expect(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        body: bytes | None = None,
        status: int = 200,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._expected.append(
            _Expectation(
                method=method,
                url=url,
                params=params or {},
                body=body,
                response=httpx.Response(status, json=json, headers=headers),
            )
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        assert self._expected, f"unexpected request: {request.method} {request.url}"
        exp = self._expected.popleft()
        assert request.method == exp.method
        assert str(request.url).split("?", 1)[0] == exp.url
        assert dict(request.url.params) == exp.params
        if exp.body is not None:
            assert request.content == exp.body
        return exp.response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def verify(self) -> None:
        assert not self._expected, f"{len(self._expected)} expected request(s) never sent"


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def json_resource():
    """Load a JSON body from tests/twittersocial/fixtures by file stem."""
    return _load_json_resource


@pytest.fixture
def api():
    mock = MockTwitterApi()
    yield mock
    mock.verify()


@pytest.fixture
def credentials() -> OAuthCredentials:
    return CREDENTIALS


@pytest.fixture
async def twitter(api, credentials):
    client = TwitterClient(credentials, transport=api.transport)
    yield client
    await client.close()


@pytest.fixture
async def unauthorized_twitter(api):
    client = TwitterClient(transport=api.transport)
    yield client
    await client.close()
