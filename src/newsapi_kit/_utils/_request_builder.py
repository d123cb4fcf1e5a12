from dataclasses import dataclass, field
from logging import Logger, getLogger
from typing import TYPE_CHECKING, Mapping, Optional

import httpx

from ..models.errors import BodyEncodingError, InvalidURLError
from ._request_spec import HTTPHeaders, HttpMethod, RequestSpec, freeze_map
from ._sanitize import mask_headers, mask_url
from .constants import LOGGER_NAME

if TYPE_CHECKING:
    from .._config import NetworkConfig

_ALLOWED_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class PreparedRequest:
    """A fully resolved, transport-ready request.

    Produced by :func:`build_request`; never mutated afterwards.
    """

    url: httpx.URL
    method: HttpMethod
    headers: Mapping[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", freeze_map(self.headers))

    def to_httpx(self) -> httpx.Request:
        return httpx.Request(
            self.method.value,
            self.url,
            headers=self.headers,
            content=self.content,
        )

    def __repr__(self) -> str:
        return (
            f"PreparedRequest(method={self.method.value!r}, "
            f"url={mask_url(self.url)!r}, "
            f"headers={mask_headers(self.headers)!r}, "
            f"content={'None' if self.content is None else f'<{len(self.content)} bytes>'})"
        )


def normalize_base_url(base_url: str) -> str:
    """Make sure the base URL ends with exactly the separator a path needs."""
    return base_url if base_url.endswith("/") else base_url + "/"


def merge_headers(
    defaults: Mapping[str, str], overrides: Mapping[str, str]
) -> HTTPHeaders:
    """Overlay ``overrides`` on ``defaults``.

    Header names compare case-insensitively; on a collision the override's
    name and value replace the default.
    """
    merged: HTTPHeaders = dict(defaults)
    for name, value in overrides.items():
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def _parse_url(endpoint: str) -> httpx.URL:
    if not endpoint or any(ch.isspace() or not ch.isprintable() for ch in endpoint):
        raise InvalidURLError(endpoint)

    # The host is IDNA-decoded on access, so malformed punycode fails here.
    try:
        url = httpx.URL(endpoint)
        is_absolute = url.scheme in _ALLOWED_SCHEMES and bool(url.host)
    except (httpx.InvalidURL, UnicodeError) as e:
        raise InvalidURLError(endpoint) from e

    if not is_absolute:
        raise InvalidURLError(endpoint)
    return url


def build_request(
    spec: RequestSpec,
    config: "NetworkConfig",
    *,
    logger: Optional[Logger] = None,
) -> PreparedRequest:
    """Combine a request spec with the environment configuration.

    The result depends only on ``spec`` and ``config``: the base URL gets a
    trailing ``/`` if missing, the request spec's headers override the configured
    ones, query items are the request spec's followed by the configured ones (no
    de-duplication), and the body is encoded only when the request spec has body
    parameters.

    Args:
        spec: Description of the call.
        config: Environment configuration snapshot.
        logger: Optional logger for debug output. Defaults to the package logger.

    Returns:
        PreparedRequest: The request ready to hand over to the transport.

    Raises:
        InvalidURLError: If base URL and path do not form an absolute URL.
        BodyEncodingError: If the request spec's body encoder fails.

    Examples:
        ```python
        spec = RequestSpec(path="top-headlines", query_parameters={"category": "business"})
        config = NetworkConfig(
            base_url="https://newsapi.org/v2/",
            headers={"Accept": "application/json"},
            query_parameters={"apiKey": "XYZ"},
        )
        build_request(spec, config).url
        # https://newsapi.org/v2/top-headlines?category=business&apiKey=XYZ
        ```
    """
    logger = logger or getLogger(LOGGER_NAME)

    url = _parse_url(normalize_base_url(config.base_url) + spec.path)
    logger.debug(f"REQUEST URL: {mask_url(url)}")

    headers = merge_headers(config.headers, spec.headers)
    logger.debug(f"HEADERS: {mask_headers(headers)}")

    query_items = [
        *url.params.multi_items(),
        *spec.query_parameters.items(),
        *config.query_parameters.items(),
    ]
    if query_items:
        url = url.copy_with(params=query_items)
    else:
        # drops a bare trailing "?" from the path
        url = url.copy_with(query=None)

    content: Optional[bytes] = None
    if spec.body_parameters:
        try:
            content = spec.body_encoder.encode(spec.body_parameters)
        except Exception as e:
            raise BodyEncodingError(str(e) or type(e).__name__) from e

    request = PreparedRequest(
        url=url,
        method=spec.method,
        headers=headers,
        content=content,
    )
    logger.debug(f"FINAL REQUEST: {request!r}")
    return request
