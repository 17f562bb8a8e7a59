"""MediaWiki REST API session.

Provides the shared endpoint object used by all resource accessors: it
builds requests against the versioned REST root, attaches the user agent
and bearer token, renews the token when due and executes requests over a
shared ``httpx.AsyncClient``.
"""

import re
import time
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from .credential import BearerToken
from .errors import (
    AccessTokenRequiredError,
    DecodeError,
    HeaderConstructionError,
    RestApiError,
    TransportError,
    UnsupportedMethodError,
)

if TYPE_CHECKING:
    from .builder import RestApiBuilder

logger = structlog.get_logger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

WRITE_METHODS = SUPPORTED_METHODS - {"GET"}

# Paths containing this segment address old, unversioned endpoints verbatim.
UNVERSIONED_SEGMENT = "/v0/"

JSON_CONTENT_TYPE = "application/json"
JSON_PATCH_CONTENT_TYPE = "application/json-patch+json"

_HEADER_VALUE = re.compile(r"[\t\x20-\x7e]*")

__all__ = ["RestApi"]


def _header_value(name: str, value: str) -> str:
    if not _HEADER_VALUE.fullmatch(value):
        msg = f"Invalid characters in {name} header value"
        raise HeaderConstructionError(msg)
    return value


class RestApi:
    """Session object for a MediaWiki REST API endpoint.

    Immutable once built; create instances with :meth:`builder`. The
    session can be shared by any number of concurrent accessor calls. The
    bearer token it holds is the only mutable state and guards itself.

    Can be used as an async context manager to close the HTTP client.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        user_agent: str,
        api_url: str,
        api_version: int,
        token: BearerToken,
    ):
        """Initialize the session. Use :meth:`builder` instead.

        Args:
            client: Shared HTTP client.
            user_agent: Value of the ``User-Agent`` header.
            api_url: Validated API URL ending in ``/rest.php``.
            api_version: REST API version used to prefix paths.
            token: Shared bearer token holder.
        """
        self._client = client
        self._user_agent = user_agent
        self._api_url = api_url
        self._api_version = api_version
        self._token = token

    @staticmethod
    def builder(api_url: str) -> "RestApiBuilder":
        """Return a builder for ``api_url``, the URL ending in ``rest.php``."""
        from .builder import RestApiBuilder

        return RestApiBuilder(api_url)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def api_version(self) -> int:
        return self._api_version

    @property
    def token(self) -> BearerToken:
        return self._token

    def __repr__(self) -> str:
        return f"RestApi(api_url={self._api_url!r}, api_version={self._api_version})"

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager and close the HTTP client."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if open."""
        if not self._client.is_closed:
            await self._client.aclose()

    def get_edit_token(self) -> str | None:
        """Return the access token used for edits, if any."""
        return self._token.get()

    def require_edit_token(self) -> str:
        """Return the access token used for edits.

        Raises:
            AccessTokenRequiredError: If no access token is held. No request
                is made in that case.
        """
        token = self.get_edit_token()
        if token is None:
            msg = "An access token is required for this operation"
            raise AccessTokenRequiredError(msg)
        return token

    def build_request(
        self,
        path: str,
        params: dict[str, str] | None = None,
        method: str = "GET",
        *,
        json: Any = None,
    ) -> httpx.Request:
        """Build a request for a REST API path.

        The path is prefixed with the API version (e.g. ``/v1``) unless it
        addresses an unversioned ``/v0/`` endpoint.

        Args:
            path: Endpoint path (e.g., "/page/Foo").
            params: Optional query parameters.
            method: HTTP method.
            json: Optional JSON body.

        Returns:
            Unsent httpx.Request.

        Raises:
            UnsupportedMethodError: If the method is not supported.
            HeaderConstructionError: If the user agent or token contain
                characters illegal in header values.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            msg = f"Unsupported HTTP method: {method}"
            raise UnsupportedMethodError(msg)

        headers = {
            "User-Agent": _header_value("User-Agent", self._user_agent),
            "Accept": JSON_CONTENT_TYPE,
        }
        if method == "PATCH":
            headers["Content-Type"] = JSON_PATCH_CONTENT_TYPE
        elif method != "GET":
            headers["Content-Type"] = JSON_CONTENT_TYPE
        if (access_token := self._token.get()) is not None:
            headers["Authorization"] = _header_value(
                "Authorization",
                f"Bearer {access_token}",
            )

        if UNVERSIONED_SEGMENT not in path:
            path = f"/v{self._api_version}{path}"

        return self._client.build_request(
            method,
            f"{self._api_url}{path}",
            params=params or None,
            headers=headers,
            json=json,
        )

    async def execute(self, request: httpx.Request) -> httpx.Response:
        """Execute a request built by :meth:`build_request`.

        Renews the access token first if it is due, then sends the request
        with the current token. A failed renewal only aborts write requests;
        reads are sent with the token held before the renewal.

        Raises:
            TransportError: If the request fails or the server answers with
                an error status.
            RestApiError: If a write request triggers a renewal that fails.
        """
        try:
            await self._token.check_and_refresh(self)
        except RestApiError as exc:
            if request.method in WRITE_METHODS:
                raise
            logger.warning(
                "Sending read request with current token after failed renewal",
                method=request.method,
                url=str(request.url),
                error=str(exc),
            )
        if (access_token := self._token.get()) is not None:
            request.headers["Authorization"] = _header_value(
                "Authorization",
                f"Bearer {access_token}",
            )

        start_time = time.time()
        try:
            logger.debug(
                "Making API request",
                method=request.method,
                url=str(request.url),
            )
            response = await self._client.send(request)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            duration = time.time() - start_time
            logger.exception(
                "API request failed",
                method=request.method,
                url=str(request.url),
                duration_seconds=round(duration, 3),
            )
            msg = f"{request.method} {request.url} failed: {exc}"
            raise TransportError(msg) from exc

        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            status_code=response.status_code,
            duration_seconds=round(duration, 3),
        )
        return response

    async def _send(
        self,
        path: str,
        params: dict[str, str] | None,
        method: str,
        json: Any,
        accept: str | None,
    ) -> httpx.Response:
        request = self.build_request(path, params, method, json=json)
        if accept == "":
            del request.headers["Accept"]
        elif accept is not None:
            request.headers["Accept"] = accept
        return await self.execute(request)

    async def fetch_json(
        self,
        path: str,
        params: dict[str, str] | None = None,
        method: str = "GET",
        *,
        json: Any = None,
        accept: str | None = None,
    ) -> Any:
        """Build and execute a request and return the decoded JSON body.

        Args:
            path: Endpoint path.
            params: Optional query parameters.
            method: HTTP method.
            json: Optional JSON body.
            accept: ``Accept`` header override; ``""`` drops the header.

        Raises:
            TransportError: If the request fails.
            DecodeError: If the body is not JSON.
        """
        response = await self._send(path, params, method, json, accept)
        try:
            return response.json()
        except ValueError as exc:
            msg = f"Response from {response.request.url} is not JSON"
            raise DecodeError(msg) from exc

    async def fetch_text(
        self,
        path: str,
        params: dict[str, str] | None = None,
        method: str = "GET",
        *,
        json: Any = None,
        accept: str | None = None,
    ) -> str:
        """Build and execute a request and return the body as text."""
        response = await self._send(path, params, method, json, accept)
        return response.text
