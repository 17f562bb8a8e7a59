"""Shared fixtures: a mock wiki served through httpx.MockTransport."""

import json
from typing import Any

import httpx
import pytest

from mediawiki_rest_api import RestApi, RestApiBuilder

API_URL = "https://wiki.example.org/w/rest.php"


class MockWiki:
    """Mock transport handler answering from a route table.

    Routes are keyed by (method, decoded URL path). Every request is
    recorded so tests can inspect headers, query strings and bodies.
    Unknown routes answer 404.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], tuple[int, dict[str, Any]]] = {}

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        *,
        json: Any = None,
        text: str | None = None,
    ) -> None:
        """Register a response for ``method`` on ``path`` (below the host)."""
        kwargs: dict[str, Any] = {}
        if text is not None:
            kwargs["text"] = text
        else:
            kwargs["json"] = json
        self._routes[(method, path)] = (status, kwargs)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"errorKey": "rest-nonexistent-route"})
        status, kwargs = route
        return httpx.Response(status, **kwargs)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json_body(self) -> Any:
        return json.loads(self.last_request.content)


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def wiki() -> MockWiki:
    return MockWiki()


@pytest.fixture
def api(wiki: MockWiki) -> RestApi:
    """Anonymous session talking to the mock wiki."""
    return RestApiBuilder(API_URL).with_client(mock_client(wiki)).build()


@pytest.fixture
def authed_api(wiki: MockWiki) -> RestApi:
    """Session holding an access token, talking to the mock wiki."""
    return (
        RestApiBuilder(API_URL)
        .with_client(mock_client(wiki))
        .with_access_token("secret-token")
        .build()
    )


# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------

PAGE_INFO = {
    "id": 29414838,
    "key": "Rust_(programming_language)",
    "title": "Rust (programming language)",
    "latest": {"id": 1316925953, "timestamp": "2025-10-08T12:00:00Z"},
    "content_model": "wikitext",
    "license": {
        "url": "https://creativecommons.org/licenses/by-sa/4.0/",
        "title": "Creative Commons Attribution-Share Alike 4.0",
    },
}

REVISION_INFO = {
    "id": 1316925953,
    "size": 114334,
    "minor": False,
    "timestamp": "2025-10-08T12:00:00Z",
    "content_model": "wikitext",
    "page": {
        "id": 29414838,
        "key": "Rust_(programming_language)",
        "title": "Rust (programming language)",
    },
    "license": PAGE_INFO["license"],
    "user": {"id": 42, "name": "Example"},
    "comment": "copyedit",
    "delta": -12,
}

LINTS = [
    {
        "type": "duplicate-ids",
        "dsr": [100, 200, None, None],
        "params": {"id": "CITEREFSmith2020"},
        "templateInfo": {"name": "Template:Cite_book"},
    },
    {
        "type": "missing-end-tag",
        "dsr": [300, 320, 7, 0],
        "params": {"name": "table", "inTable": True},
    },
]
