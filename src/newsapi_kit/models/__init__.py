from .articles import Article, ArticleSource, ArticlesPage
from .enums import Category, SortBy
from .errors import (
    APIError,
    BodyEncodingError,
    ConfigurationError,
    InvalidURLError,
    NewsKitError,
    RequestBuildError,
    ResponseDecodingError,
    TransportError,
)
from .sources import NewsSource, SourcesPage

__all__ = [
    "APIError",
    "Article",
    "ArticleSource",
    "ArticlesPage",
    "BodyEncodingError",
    "Category",
    "ConfigurationError",
    "InvalidURLError",
    "NewsKitError",
    "NewsSource",
    "RequestBuildError",
    "ResponseDecodingError",
    "SortBy",
    "SourcesPage",
    "TransportError",
]
