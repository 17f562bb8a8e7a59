"""Configuration for MediaWiki REST API sessions."""

import logging
import pathlib

import pydantic

from .builder import DEFAULT_API_VERSION, DEFAULT_TIMEOUT


class RestApiConfig(pydantic.BaseModel):
    """Configuration for a MediaWiki REST API session."""

    api_url: str = pydantic.Field(description="REST API URL ending in rest.php")
    user_agent: str | None = pydantic.Field(
        None,
        description="User-Agent header value, library default if unset",
    )
    api_version: int = pydantic.Field(
        DEFAULT_API_VERSION,
        description="REST API version",
        ge=1,
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    access_token: str | None = pydantic.Field(
        None,
        description="OAuth2 bearer token for authenticated requests",
    )
    oauth2_client_id: str | None = pydantic.Field(
        None,
        description="OAuth2 client ID used for token renewal",
    )
    oauth2_client_secret: str | None = pydantic.Field(
        None,
        description="OAuth2 client secret used for token renewal",
    )
    renewal_interval: float | None = pydantic.Field(
        None,
        description="Seconds between access token renewals",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level name")

    @pydantic.field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"unknown log level: {value}"
            raise ValueError(msg)
        return level


def load_config(config_path: str | pathlib.Path) -> RestApiConfig:
    """Read a session configuration from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file is not JSON or a field is
            missing or out of range.
    """
    path = pathlib.Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)
    return RestApiConfig.model_validate_json(path.read_text())
