from datetime import date, datetime, timezone

import pytest
from pytest_httpx import HTTPXMock

from newsapi_kit import ArticlesPage, Category, NetworkConfig, NewsService, SortBy
from newsapi_kit.models import SourcesPage

ARTICLE = {
    "source": {"id": "bbc-news", "name": "BBC News"},
    "author": "BBC",
    "title": "Markets rally",
    "description": "Stocks rose on Tuesday.",
    "url": "https://www.bbc.co.uk/news/business-1",
    "urlToImage": "https://ichef.bbci.co.uk/1.jpg",
    "publishedAt": "2025-01-07T10:15:00Z",
    "content": "Stocks rose...",
}


@pytest.fixture
def service(config: NetworkConfig) -> NewsService:
    return NewsService(config)


class TestNewsService:
    class TestTopHeadlines:
        def test_by_category(
            self, httpx_mock: HTTPXMock, service: NewsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}top-headlines?category=business&pageSize=10",
                json={"status": "ok", "totalResults": 1, "articles": [ARTICLE]},
            )

            page = service.top_headlines(category=Category.BUSINESS, page_size=10)

            assert isinstance(page, ArticlesPage)
            assert page.total_results == 1
            article = page.articles[0]
            assert article.title == "Markets rally"
            assert article.source_name == "BBC News"
            assert article.url_to_image == "https://ichef.bbci.co.uk/1.jpg"
            assert article.published_at == datetime(2025, 1, 7, 10, 15, tzinfo=timezone.utc)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.method == "GET"

        def test_category_as_string(
            self, httpx_mock: HTTPXMock, service: NewsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}top-headlines?category=sports&country=us",
                json={"status": "ok", "totalResults": 0, "articles": []},
            )

            page = service.top_headlines(category="sports", country="US")

            assert page.articles == []

        def test_api_key_as_query_parameter(
            self, httpx_mock: HTTPXMock, base_url: str, api_key: str
        ):
            service = NewsService(
                NetworkConfig.for_news_api(api_key, base_url=base_url, auth="query")
            )
            httpx_mock.add_response(
                url=f"{base_url}top-headlines?category=business&apiKey={api_key}",
                json={"status": "ok", "totalResults": 0, "articles": []},
            )

            service.top_headlines(category=Category.BUSINESS)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert str(sent_request.url).endswith(
                f"top-headlines?category=business&apiKey={api_key}"
            )
            assert "X-Api-Key" not in sent_request.headers

        def test_sources_with_category_is_rejected(
            self, httpx_mock: HTTPXMock, service: NewsService
        ):
            with pytest.raises(ValueError):
                service.top_headlines(category=Category.HEALTH, sources=["bbc-news"])

            assert httpx_mock.get_requests() == []

        def test_unknown_category_is_rejected(self, service: NewsService):
            with pytest.raises(ValueError):
                service.top_headlines(category="weather")

        @pytest.mark.anyio
        async def test_top_headlines_async(
            self, httpx_mock: HTTPXMock, service: NewsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}top-headlines?sources=bbc-news%2Ccnn",
                json={"status": "ok", "totalResults": 1, "articles": [ARTICLE]},
            )

            page = await service.top_headlines_async(sources=["bbc-news", "cnn"])

            assert page.articles[0].source.id == "bbc-news"

    class TestEverything:
        def test_search(
            self, httpx_mock: HTTPXMock, service: NewsService, base_url: str
        ):
            httpx_mock.add_response(
                url=(
                    f"{base_url}everything?q=climate&language=en&sortBy=publishedAt"
                    "&from=2025-01-01&to=2025-01-07&page=2"
                ),
                json={"status": "ok", "totalResults": 1, "articles": [ARTICLE]},
            )

            page = service.everything(
                "climate",
                language="en",
                sort_by=SortBy.PUBLISHED_AT,
                from_date=date(2025, 1, 1),
                to_date="2025-01-07",
                page=2,
            )

            assert page.total_results == 1

        def test_empty_query_is_rejected(self, service: NewsService):
            with pytest.raises(ValueError):
                service.everything("  ")

        @pytest.mark.anyio
        async def test_search_async(
            self, httpx_mock: HTTPXMock, service: NewsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}everything?q=mars&domains=nasa.gov",
                json={"status": "ok", "totalResults": 0, "articles": []},
            )

            page = await service.everything_async("mars", domains=["nasa.gov"])

            assert page.total_results == 0

    class TestSources:
        def test_sources(
            self, httpx_mock: HTTPXMock, service: NewsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}top-headlines/sources?category=technology&language=en",
                json={
                    "status": "ok",
                    "sources": [
                        {
                            "id": "ars-technica",
                            "name": "Ars Technica",
                            "description": "Original news and reviews.",
                            "url": "https://arstechnica.com",
                            "category": "technology",
                            "language": "en",
                            "country": "us",
                        }
                    ],
                },
            )

            page = service.sources(category=Category.TECHNOLOGY, language="en")

            assert isinstance(page, SourcesPage)
            assert page.sources[0].summary() == {
                "id": "ars-technica",
                "name": "Ars Technica",
                "category": "technology",
                "language": "en",
                "country": "us",
            }

        @pytest.mark.anyio
        async def test_sources_async(
            self, httpx_mock: HTTPXMock, service: NewsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}top-headlines/sources",
                json={"status": "ok", "sources": []},
            )

            page = await service.sources_async()

            assert page.sources == []
