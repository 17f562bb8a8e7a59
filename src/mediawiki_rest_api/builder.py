"""Builder for :class:`~mediawiki_rest_api.session.RestApi` sessions."""

import dataclasses
from typing import TYPE_CHECKING

import httpx
import structlog

from . import __version__
from .credential import BearerToken
from .errors import UrlInvalidError
from .session import RestApi

if TYPE_CHECKING:
    from .config import RestApiConfig

logger = structlog.get_logger(__name__)

REST_ENTRY_POINT = "/rest.php"

DEFAULT_USER_AGENT = "Python MediaWiki REST API client"

DEFAULT_API_VERSION = 1

DEFAULT_TIMEOUT = 30.0


def validate_api_url(api_url: str) -> str:
    """Return ``api_url`` truncated right after ``/rest.php``.

    Raises:
        UrlInvalidError: If the URL does not contain ``/rest.php``.
    """
    base, sep, _rest = api_url.partition(REST_ENTRY_POINT)
    if not sep:
        msg = f"REST API URL must contain {REST_ENTRY_POINT!r}: {api_url!r}"
        raise UrlInvalidError(msg)
    return f"{base}{REST_ENTRY_POINT}"


def default_user_agent() -> str:
    return f"{DEFAULT_USER_AGENT}; mediawiki-rest-api/{__version__}"


@dataclasses.dataclass(frozen=True)
class RestApiBuilder:
    """Consuming builder for :class:`RestApi`.

    The API URL is validated on construction; every ``with_*`` method
    returns a new builder and leaves the original untouched. :meth:`build`
    fills in defaults for everything left unset.

    Example:
        ```python
        api = (
            RestApiBuilder.wikipedia("en")
            .with_user_agent("MyBot/1.0 (bot@example.org)")
            .with_access_token(token)
            .build()
        )
        ```
    """

    api_url: str
    client: httpx.AsyncClient | None = None
    user_agent: str | None = None
    api_version: int | None = None
    timeout: float | None = None
    access_token: str | None = None
    oauth2_info: tuple[str, str] | None = None
    renewal_interval: float | None = None

    def __post_init__(self):
        object.__setattr__(self, "api_url", validate_api_url(self.api_url))

    @classmethod
    def _wiki_group(cls, group: str, language: str) -> "RestApiBuilder":
        return cls(f"https://{language}.{group}.org/w/rest.php")

    @classmethod
    def wikipedia(cls, language: str) -> "RestApiBuilder":
        return cls._wiki_group("wikipedia", language)

    @classmethod
    def wiktionary(cls, language: str) -> "RestApiBuilder":
        return cls._wiki_group("wiktionary", language)

    @classmethod
    def wikivoyage(cls, language: str) -> "RestApiBuilder":
        return cls._wiki_group("wikivoyage", language)

    @classmethod
    def wikibooks(cls, language: str) -> "RestApiBuilder":
        return cls._wiki_group("wikibooks", language)

    @classmethod
    def wikinews(cls, language: str) -> "RestApiBuilder":
        return cls._wiki_group("wikinews", language)

    @classmethod
    def wikisource(cls, language: str) -> "RestApiBuilder":
        return cls._wiki_group("wikisource", language)

    @classmethod
    def wikiversity(cls, language: str) -> "RestApiBuilder":
        return cls._wiki_group("wikiversity", language)

    @classmethod
    def wikiquote(cls, language: str) -> "RestApiBuilder":
        return cls._wiki_group("wikiquote", language)

    @classmethod
    def commons(cls) -> "RestApiBuilder":
        return cls("https://commons.wikimedia.org/w/rest.php")

    @classmethod
    def wikidata(cls) -> "RestApiBuilder":
        return cls("https://www.wikidata.org/w/rest.php")

    @classmethod
    def wikispecies(cls) -> "RestApiBuilder":
        return cls("https://species.wikimedia.org/w/rest.php")

    @classmethod
    def meta(cls) -> "RestApiBuilder":
        return cls("https://meta.wikimedia.org/w/rest.php")

    @classmethod
    def from_config(cls, config: "RestApiConfig") -> "RestApiBuilder":
        """Create a builder from a validated configuration."""
        builder = cls(config.api_url).with_api_version(config.api_version)
        builder = builder.with_timeout(config.timeout)
        if config.user_agent is not None:
            builder = builder.with_user_agent(config.user_agent)
        if config.access_token is not None:
            builder = builder.with_access_token(config.access_token)
        if config.oauth2_client_id and config.oauth2_client_secret:
            builder = builder.with_oauth2_info(
                config.oauth2_client_id,
                config.oauth2_client_secret,
            )
        if config.renewal_interval is not None:
            builder = builder.with_access_token_renewal(config.renewal_interval)
        return builder

    def with_user_agent(self, user_agent: str) -> "RestApiBuilder":
        return dataclasses.replace(self, user_agent=user_agent)

    def with_client(self, client: httpx.AsyncClient) -> "RestApiBuilder":
        """Use ``client`` instead of a freshly created ``httpx.AsyncClient``."""
        return dataclasses.replace(self, client=client)

    def with_api_version(self, api_version: int) -> "RestApiBuilder":
        return dataclasses.replace(self, api_version=api_version)

    def with_timeout(self, timeout: float) -> "RestApiBuilder":
        """Set the timeout of the default client. Ignored with :meth:`with_client`."""
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        return dataclasses.replace(self, timeout=timeout)

    def with_access_token(self, access_token: str) -> "RestApiBuilder":
        return dataclasses.replace(self, access_token=access_token)

    def with_oauth2_info(self, client_id: str, client_secret: str) -> "RestApiBuilder":
        """Set the OAuth2 client credentials used to renew the access token."""
        return dataclasses.replace(self, oauth2_info=(client_id, client_secret))

    def with_access_token_renewal(self, interval: float) -> "RestApiBuilder":
        """Renew the access token every ``interval`` seconds.

        Renewal needs OAuth2 client info (:meth:`with_oauth2_info`); without
        it :meth:`build` ignores the interval and logs a warning.
        """
        if interval <= 0:
            msg = "renewal interval must be positive"
            raise ValueError(msg)
        return dataclasses.replace(self, renewal_interval=interval)

    def build(self) -> RestApi:
        """Build the session, applying defaults for unset fields."""
        token = BearerToken()
        if self.access_token is not None:
            token.set_access_token(self.access_token)
        if self.oauth2_info is not None:
            token.set_oauth_info(*self.oauth2_info)
        if self.renewal_interval is not None:
            if self.oauth2_info is None:
                logger.warning(
                    "Ignoring token renewal interval, no OAuth2 client info",
                    renewal_interval=self.renewal_interval,
                )
            else:
                token.set_renewal_interval(self.renewal_interval)

        client = self.client
        if client is None:
            timeout = DEFAULT_TIMEOUT if self.timeout is None else self.timeout
            client = httpx.AsyncClient(timeout=timeout)
        user_agent = self.user_agent
        if user_agent is None:
            user_agent = default_user_agent()
        api_version = self.api_version
        if api_version is None:
            api_version = DEFAULT_API_VERSION
        api = RestApi(
            client=client,
            user_agent=user_agent,
            api_url=self.api_url,
            api_version=api_version,
            token=token,
        )
        logger.debug("Built REST API session", api_url=self.api_url)
        return api
