from typing import Optional

import click

from .._news_client import NewsClient
from ..models import Category, SortBy
from ._utils._common import handle_cli_errors, output_options
from ._utils._formatters import format_output

_CATEGORIES = [c.value for c in Category]
_SORT_ORDERS = [s.value for s in SortBy]


def _client(ctx: click.Context) -> NewsClient:
    return NewsClient(debug=ctx.obj.get("debug", False))


@click.command()
@click.option("--category", "-c", type=click.Choice(_CATEGORIES), help="News category")
@click.option("--country", help="Two-letter country code, e.g. us")
@click.option("--query", "-q", help="Keywords to look for")
@click.option(
    "--page-size",
    type=click.IntRange(min=1, max=100),
    default=20,
    show_default=True,
    help="Number of articles to return",
)
@output_options
@click.pass_context
@handle_cli_errors
def headlines(
    ctx: click.Context,
    category: Optional[str],
    country: Optional[str],
    query: Optional[str],
    page_size: int,
    fmt: str,
    no_color: bool,
) -> None:
    """Show the current top headlines."""
    with _client(ctx).news as news:
        page = news.top_headlines(
            category=category, country=country, query=query, page_size=page_size
        )
    if fmt == "json":
        format_output(page, fmt)
    else:
        format_output([a.summary() for a in page.articles], fmt, no_color)


@click.command()
@click.argument("query")
@click.option("--language", "-l", help="Two-letter language code, e.g. en")
@click.option("--sort-by", type=click.Choice(_SORT_ORDERS), help="Result ordering")
@click.option(
    "--page-size",
    type=click.IntRange(min=1, max=100),
    default=20,
    show_default=True,
    help="Number of articles to return",
)
@output_options
@click.pass_context
@handle_cli_errors
def search(
    ctx: click.Context,
    query: str,
    language: Optional[str],
    sort_by: Optional[str],
    page_size: int,
    fmt: str,
    no_color: bool,
) -> None:
    """Search all articles for QUERY."""
    with _client(ctx).news as news:
        page = news.everything(
            query, language=language, sort_by=sort_by, page_size=page_size
        )
    if fmt == "json":
        format_output(page, fmt)
    else:
        format_output([a.summary() for a in page.articles], fmt, no_color)


@click.command()
@click.option("--category", "-c", type=click.Choice(_CATEGORIES), help="News category")
@click.option("--language", "-l", help="Two-letter language code, e.g. en")
@click.option("--country", help="Two-letter country code, e.g. us")
@output_options
@click.pass_context
@handle_cli_errors
def sources(
    ctx: click.Context,
    category: Optional[str],
    language: Optional[str],
    country: Optional[str],
    fmt: str,
    no_color: bool,
) -> None:
    """List the available news sources."""
    with _client(ctx).news as news:
        page = news.sources(category=category, language=language, country=country)
    if fmt == "json":
        format_output(page, fmt)
    else:
        format_output([s.summary() for s in page.sources], fmt, no_color)
