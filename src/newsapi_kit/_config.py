import os
from threading import Lock
from typing import Dict, Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils.constants import (
    DEFAULT_BASE_URL,
    DOTENV_FILE,
    ENV_API_KEY,
    ENV_AUTH_MODE,
    ENV_BASE_URL,
    HEADER_ACCEPT,
    HEADER_API_KEY,
    QUERY_API_KEY,
)
from ._utils._request_spec import freeze_map
from .models.errors import ConfigurationError

AuthMode = Literal["header", "query"]


class NetworkConfig(BaseModel):
    """Environment defaults applied to every request.

    The base URL is kept exactly as authored; the request builder normalizes
    it and reports malformed values as ``InvalidURLError``.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    query_parameters: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("headers", "query_parameters", mode="after")
    @classmethod
    def read_only_maps(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return freeze_map(value)

    @classmethod
    def for_news_api(
        cls,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        auth: AuthMode = "header",
    ) -> "NetworkConfig":
        """Build the configuration for newsapi.org style services.

        Args:
            api_key: The API key.
            base_url: API root, e.g. ``https://newsapi.org/v2/``.
            auth: Send the key as the ``X-Api-Key`` header or as the
                ``apiKey`` query parameter.
        """
        if not api_key:
            raise ConfigurationError()

        headers = {HEADER_ACCEPT: "application/json"}
        query_parameters: Dict[str, str] = {}
        if auth == "header":
            headers[HEADER_API_KEY] = api_key
        elif auth == "query":
            query_parameters[QUERY_API_KEY] = api_key
        else:
            raise ConfigurationError(f"Unknown auth mode '{auth}'. Use 'header' or 'query'.")

        return cls(
            base_url=base_url,
            headers=headers,
            query_parameters=query_parameters,
        )


def load_config_from_env(
    *,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    auth: Optional[AuthMode] = None,
) -> NetworkConfig:
    """Read the configuration from arguments, falling back to the environment.

    Values from a ``.env`` file in the working directory are loaded first,
    without overriding variables already set.
    """
    load_dotenv(DOTENV_FILE)

    api_key_value = api_key or os.environ.get(ENV_API_KEY)
    base_url_value = base_url or os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL
    auth_value = auth or os.environ.get(ENV_AUTH_MODE) or "header"

    if not api_key_value:
        raise ConfigurationError()

    return NetworkConfig.for_news_api(
        api_key_value,
        base_url=base_url_value,
        auth=auth_value,  # type: ignore[arg-type]
    )


class ConfigurationManager:
    """Holds the process-wide configuration.

    The configuration is never changed in place. Rotating a key means building
    a new ``NetworkConfig`` and swapping it in; requests already being built
    keep the snapshot they started with.
    """

    def __init__(self, config: NetworkConfig) -> None:
        self._lock = Lock()
        self._config = config

    @property
    def current(self) -> NetworkConfig:
        with self._lock:
            return self._config

    def swap(self, config: NetworkConfig) -> NetworkConfig:
        """Replace the active configuration and return the previous one."""
        with self._lock:
            previous, self._config = self._config, config
        return previous
