from typing import Iterable, Optional, Union

from ..models import ArticlesPage, Category, SortBy, SourcesPage
from ._base_service import BaseService
from .endpoints import DateLike, everything_spec, sources_spec, top_headlines_spec


class NewsService(BaseService):
    """Service for reading news articles.

    Top headlines can be filtered by category, country or source; the
    ``everything`` search covers every indexed article.
    """

    def top_headlines(
        self,
        *,
        category: Optional[Union[Category, str]] = None,
        country: Optional[str] = None,
        sources: Optional[Iterable[str]] = None,
        query: Optional[str] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
    ) -> ArticlesPage:
        """Fetch the current top headlines.

        Args:
            category (Optional[Category | str]): Restrict to one category.
            country (Optional[str]): Two-letter country code.
            sources (Optional[Iterable[str]]): Source ids. Cannot be combined
                with ``category`` or ``country``.
            query (Optional[str]): Keywords to look for.
            page_size (Optional[int]): Results per page, 1 to 100.
            page (Optional[int]): Page to fetch, starting at 1.

        Returns:
            ArticlesPage: The matching articles and the total count.

        Examples:
            ```python
            from newsapi_kit import NewsClient, Category

            client = NewsClient()

            client.news.top_headlines(category=Category.BUSINESS)
            ```
        """
        spec = top_headlines_spec(
            category=category,
            country=country,
            sources=sources,
            query=query,
            page_size=page_size,
            page=page,
        )
        return self.request_model(spec, ArticlesPage)

    async def top_headlines_async(
        self,
        *,
        category: Optional[Union[Category, str]] = None,
        country: Optional[str] = None,
        sources: Optional[Iterable[str]] = None,
        query: Optional[str] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
    ) -> ArticlesPage:
        """Asynchronously fetch the current top headlines."""
        spec = top_headlines_spec(
            category=category,
            country=country,
            sources=sources,
            query=query,
            page_size=page_size,
            page=page,
        )
        return await self.request_model_async(spec, ArticlesPage)

    def everything(
        self,
        query: str,
        *,
        sources: Optional[Iterable[str]] = None,
        domains: Optional[Iterable[str]] = None,
        language: Optional[str] = None,
        sort_by: Optional[Union[SortBy, str]] = None,
        from_date: Optional[DateLike] = None,
        to_date: Optional[DateLike] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
    ) -> ArticlesPage:
        """Search all articles.

        Args:
            query (str): Keywords or phrase to search for.
            sources (Optional[Iterable[str]]): Source ids to restrict to.
            domains (Optional[Iterable[str]]): Domains to restrict to.
            language (Optional[str]): Two-letter language code.
            sort_by (Optional[SortBy | str]): Ordering of the results.
            from_date (Optional[date | datetime | str]): Oldest article date.
            to_date (Optional[date | datetime | str]): Newest article date.
            page_size (Optional[int]): Results per page, 1 to 100.
            page (Optional[int]): Page to fetch, starting at 1.

        Returns:
            ArticlesPage: The matching articles and the total count.
        """
        spec = everything_spec(
            query,
            sources=sources,
            domains=domains,
            language=language,
            sort_by=sort_by,
            from_date=from_date,
            to_date=to_date,
            page_size=page_size,
            page=page,
        )
        return self.request_model(spec, ArticlesPage)

    async def everything_async(
        self,
        query: str,
        *,
        sources: Optional[Iterable[str]] = None,
        domains: Optional[Iterable[str]] = None,
        language: Optional[str] = None,
        sort_by: Optional[Union[SortBy, str]] = None,
        from_date: Optional[DateLike] = None,
        to_date: Optional[DateLike] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
    ) -> ArticlesPage:
        """Asynchronously search all articles."""
        spec = everything_spec(
            query,
            sources=sources,
            domains=domains,
            language=language,
            sort_by=sort_by,
            from_date=from_date,
            to_date=to_date,
            page_size=page_size,
            page=page,
        )
        return await self.request_model_async(spec, ArticlesPage)

    def sources(
        self,
        *,
        category: Optional[Union[Category, str]] = None,
        language: Optional[str] = None,
        country: Optional[str] = None,
    ) -> SourcesPage:
        """List the publishers available for top headlines."""
        spec = sources_spec(category=category, language=language, country=country)
        return self.request_model(spec, SourcesPage)

    async def sources_async(
        self,
        *,
        category: Optional[Union[Category, str]] = None,
        language: Optional[str] = None,
        country: Optional[str] = None,
    ) -> SourcesPage:
        spec = sources_spec(category=category, language=language, country=country)
        return await self.request_model_async(spec, SourcesPage)
