"""Exception types for the MediaWiki REST API client."""


class RestApiError(Exception):
    """Base exception for all MediaWiki REST API client errors."""


class UrlInvalidError(RestApiError):
    """The REST API URL does not contain the ``/rest.php`` entry point."""


class UnsupportedMethodError(RestApiError):
    """The HTTP method is not one of GET, POST, PUT, PATCH or DELETE."""


class HeaderConstructionError(RestApiError):
    """A header value contains characters that are illegal in HTTP headers."""


class AccessTokenRequiredError(RestApiError):
    """An operation needs an access token, but none is configured."""


class MissingResultsError(RestApiError):
    """An expected key is absent from an otherwise successful response."""


class TransportError(RestApiError):
    """The HTTP exchange failed (connection, TLS, timeout or error status)."""


class DecodeError(RestApiError):
    """The response body did not match the expected shape."""
