"""MediaWiki REST API client.

Async client for the MediaWiki REST API (``rest.php``) with typed
responses for page, revision, file, search, math and transform endpoints,
and bearer token handling with optional OAuth2 renewal.

Exports:
    RestApi: Session shared by all resource accessors.
    RestApiBuilder: Builder validating the API URL and applying defaults.
    Page, Revision, File: Resource accessors wrapping an identifier.
    search, math, transform: Modules with stateless resource operations.
    types: Module containing enums and Pydantic models for API responses.
"""

__version__ = "0.1.0"

from . import types
from .builder import RestApiBuilder
from .config import RestApiConfig, load_config
from .credential import BearerToken, CredentialState
from .errors import (
    AccessTokenRequiredError,
    DecodeError,
    HeaderConstructionError,
    MissingResultsError,
    RestApiError,
    TransportError,
    UnsupportedMethodError,
    UrlInvalidError,
)
from .logging_config import configure_logging
from .resources import math, search, transform
from .resources.file import File
from .resources.page import Page
from .resources.revision import Revision
from .session import RestApi
from .types import HistoryFilter, HistoryFilterExtended, HtmlFlavor

__all__ = [
    "AccessTokenRequiredError",
    "BearerToken",
    "CredentialState",
    "DecodeError",
    "File",
    "HeaderConstructionError",
    "HistoryFilter",
    "HistoryFilterExtended",
    "HtmlFlavor",
    "MissingResultsError",
    "Page",
    "RestApi",
    "RestApiBuilder",
    "RestApiConfig",
    "RestApiError",
    "Revision",
    "TransportError",
    "UnsupportedMethodError",
    "UrlInvalidError",
    "configure_logging",
    "load_config",
    "math",
    "search",
    "transform",
    "types",
]
