from ._config import ConfigurationManager, NetworkConfig
from ._news_client import NewsClient
from ._services import NewsService
from ._utils import (
    BodyEncoder,
    FormURLEncodedBodyEncoder,
    HttpMethod,
    JSONBodyEncoder,
    PreparedRequest,
    RequestSpec,
    build_request,
)
from .models import (
    APIError,
    Article,
    ArticlesPage,
    BodyEncodingError,
    Category,
    InvalidURLError,
    NewsKitError,
    SortBy,
)

__all__ = [
    "APIError",
    "Article",
    "ArticlesPage",
    "BodyEncoder",
    "BodyEncodingError",
    "Category",
    "ConfigurationManager",
    "FormURLEncodedBodyEncoder",
    "HttpMethod",
    "InvalidURLError",
    "JSONBodyEncoder",
    "NetworkConfig",
    "NewsClient",
    "NewsKitError",
    "NewsService",
    "PreparedRequest",
    "RequestSpec",
    "SortBy",
    "build_request",
]
