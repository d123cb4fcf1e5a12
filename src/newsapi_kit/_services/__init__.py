from ._base_service import BaseService
from .news_service import NewsService

__all__ = [
    "BaseService",
    "NewsService",
]
