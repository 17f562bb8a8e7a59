"""Bearer token holder with scheduled OAuth2 renewal.

Holds the access token attached to authenticated requests and, when a
renewal interval is configured, replaces it through the OAuth2 client
credentials grant before it goes stale. At most one renewal is in flight
per token holder; callers that arrive during a renewal wait for it.
"""

import asyncio
import enum
import time
from threading import Lock
from typing import TYPE_CHECKING

import httpx
import structlog

from .decoding import extract_text
from .errors import AccessTokenRequiredError, DecodeError, TransportError

if TYPE_CHECKING:
    from .session import RestApi

logger = structlog.get_logger(__name__)

TOKEN_ENDPOINT = "/oauth2/access_token"


class CredentialState(enum.Enum):
    ABSENT = "absent"
    CONFIGURED = "configured"
    RENEWABLE = "renewable"


class BearerToken:
    """Thread-safe holder for an OAuth2 bearer token.

    The token and its renewal timestamp are read and swapped under a lock;
    the network exchange for a new token runs outside of it, so readers are
    never blocked by a slow renewal.
    """

    def __init__(self):
        self._lock = Lock()
        self._token: str | None = None
        self._client_id: str | None = None
        self._client_secret: str | None = None
        self._renewal_interval: float | None = None
        self._renewed_at: float | None = None
        self._pending: asyncio.Event | None = None

    @property
    def state(self) -> CredentialState:
        with self._lock:
            if self._renewal_interval is not None:
                return CredentialState.RENEWABLE
            if self._token is not None or self._client_id is not None:
                return CredentialState.CONFIGURED
            return CredentialState.ABSENT

    @property
    def renewal_interval(self) -> float | None:
        return self._renewal_interval

    def get(self) -> str | None:
        """Return the current token, or None if no token is held."""
        with self._lock:
            return self._token

    get_token = get

    def set_access_token(self, token: str) -> None:
        with self._lock:
            self._token = token
            self._renewed_at = time.monotonic()

    def set_oauth_info(self, client_id: str, client_secret: str) -> None:
        """Store the OAuth2 client credentials used for renewal."""
        with self._lock:
            self._client_id = client_id
            self._client_secret = client_secret

    def set_renewal_interval(self, seconds: float) -> None:
        """Renew the token every ``seconds`` seconds.

        Raises:
            ValueError: If ``seconds`` is not positive, or no token or OAuth2
                client credentials are configured yet.
        """
        if seconds <= 0:
            msg = "renewal interval must be positive"
            raise ValueError(msg)
        if self.state is CredentialState.ABSENT:
            msg = "renewal interval requires an access token or OAuth2 client info"
            raise ValueError(msg)
        with self._lock:
            self._renewal_interval = seconds

    def is_due(self) -> bool:
        """Return True if a renewal is configured and the interval has elapsed."""
        with self._lock:
            if self._renewal_interval is None:
                return False
            if self._renewed_at is None:
                return True
            return time.monotonic() - self._renewed_at >= self._renewal_interval

    async def check_and_refresh(self, api: "RestApi") -> None:
        """Renew the token if the renewal interval has elapsed.

        Called before every request. The caller that finds the token due
        performs the exchange and receives any error it raises; the stale
        token is kept in that case. Callers arriving while the exchange is
        in flight wait for it to finish and then continue with whatever
        token is held, without starting another exchange.

        Raises:
            AccessTokenRequiredError: If no OAuth2 client info is configured.
            TransportError: If the token endpoint cannot be reached or
                answers with an error status.
            MissingResultsError: If the reply has no ``access_token``.
            DecodeError: If the reply is not JSON.
        """
        if not self.is_due():
            return

        pending = self._pending
        if pending is not None:
            logger.debug("Waiting for in-flight token renewal")
            await pending.wait()
            return

        self._pending = pending = asyncio.Event()
        try:
            token = await self._request_token(api)
            with self._lock:
                self._token = token
                self._renewed_at = time.monotonic()
            logger.info("Access token renewed")
        except Exception:
            logger.warning("Access token renewal failed, keeping current token")
            raise
        finally:
            self._pending = None
            pending.set()

    async def _request_token(self, api: "RestApi") -> str:
        with self._lock:
            client_id = self._client_id
            client_secret = self._client_secret
        if client_id is None or client_secret is None:
            msg = "OAuth2 client info is required to renew the access token"
            raise AccessTokenRequiredError(msg)

        url = f"{api.api_url}{TOKEN_ENDPOINT}"
        logger.info("Renewing access token", url=url)
        try:
            response = await api.client.post(
                url,
                data={
                    "grant_type": "client_credentials",
                    "client_id": client_id,
                    "client_secret": client_secret,
                },
                headers={"User-Agent": api.user_agent},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            msg = f"Token renewal request failed: {exc}"
            raise TransportError(msg) from exc

        try:
            data = response.json()
        except ValueError as exc:
            msg = "Token endpoint returned a non-JSON body"
            raise DecodeError(msg) from exc
        return extract_text(data, "access_token")
