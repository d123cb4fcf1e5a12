import json

from click.testing import CliRunner
from pytest_httpx import HTTPXMock

from newsapi_kit._cli import cli

ENV = {"NEWSAPI_KEY": "cli-key"}
BASE_URL = "https://newsapi.org/v2/"

ARTICLES = {
    "status": "ok",
    "totalResults": 1,
    "articles": [
        {
            "source": {"id": None, "name": "Reuters"},
            "title": "Rates unchanged",
            "url": "https://www.reuters.com/markets/rates",
            "publishedAt": "2025-01-07T09:00:00Z",
        }
    ],
}


class TestHeadlines:
    def test_table_output(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=f"{BASE_URL}top-headlines?category=business&pageSize=20",
            json=ARTICLES,
        )

        result = runner.invoke(
            cli, ["headlines", "--category", "business", "--no-color"], env=ENV
        )

        assert result.exit_code == 0, result.output
        assert "Rates unchanged" in result.output
        assert "Reuters" in result.output

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["X-Api-Key"] == "cli-key"

    def test_json_output(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=f"{BASE_URL}top-headlines?pageSize=5", json=ARTICLES
        )

        result = runner.invoke(
            cli, ["headlines", "--page-size", "5", "--format", "json"], env=ENV
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["totalResults"] == 1
        assert data["articles"][0]["title"] == "Rates unchanged"

    def test_invalid_category(self, runner: CliRunner):
        result = runner.invoke(cli, ["headlines", "--category", "weather"], env=ENV)

        assert result.exit_code == 2

    def test_missing_api_key(self, runner: CliRunner):
        result = runner.invoke(cli, ["headlines"])

        assert result.exit_code == 1
        assert "NEWSAPI_KEY" in result.output

    def test_api_error(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=f"{BASE_URL}top-headlines?pageSize=20",
            status_code=401,
            json={"status": "error", "code": "apiKeyInvalid", "message": "Bad key"},
        )

        result = runner.invoke(cli, ["headlines"], env=ENV)

        assert result.exit_code == 1
        assert "Bad key" in result.output


class TestSearch:
    def test_search(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=f"{BASE_URL}everything?q=rates&sortBy=relevancy&pageSize=20",
            json=ARTICLES,
        )

        result = runner.invoke(
            cli, ["search", "rates", "--sort-by", "relevancy", "--no-color"], env=ENV
        )

        assert result.exit_code == 0, result.output
        assert "Rates unchanged" in result.output


class TestSources:
    def test_sources_json(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=f"{BASE_URL}top-headlines/sources?language=en",
            json={
                "status": "ok",
                "sources": [{"id": "reuters", "name": "Reuters", "language": "en"}],
            },
        )

        result = runner.invoke(
            cli, ["sources", "--language", "en", "--format", "json"], env=ENV
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["sources"][0]["id"] == "reuters"


def test_help(runner: CliRunner):
    result = runner.invoke(cli, [])

    assert result.exit_code == 0
    assert "headlines" in result.output
