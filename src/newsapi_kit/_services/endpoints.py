"""Request specs for the news API endpoints.

Every endpoint is a ``RequestSpec`` value built by a factory function; the
shared request builder turns it into a concrete request.
"""

from datetime import date, datetime
from typing import Iterable, Optional, Union

from .._utils import HttpMethod, Parameters, RequestSpec
from ..models import Category, SortBy

TOP_HEADLINES_PATH = "top-headlines"
EVERYTHING_PATH = "everything"
SOURCES_PATH = "top-headlines/sources"

MAX_PAGE_SIZE = 100

DateLike = Union[date, datetime, str]


def _join(values: Optional[Iterable[str]]) -> Optional[str]:
    if values is None:
        return None
    if isinstance(values, str):
        return values
    joined = ",".join(v.strip() for v in values if v and v.strip())
    return joined or None


def _date_value(value: Optional[DateLike]) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return value.isoformat()


def _enum_value(value) -> Optional[str]:
    if value is None:
        return None
    return getattr(value, "value", value)


def _page_params(page_size: Optional[int], page: Optional[int]) -> Parameters:
    params: Parameters = {}
    if page_size is not None:
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")
        params["pageSize"] = str(page_size)
    if page is not None:
        if page < 1:
            raise ValueError("page must be 1 or greater")
        params["page"] = str(page)
    return params


def _compact(**values: Optional[str]) -> Parameters:
    return {key: value for key, value in values.items() if value}


def top_headlines_spec(
    *,
    category: Optional[Union[Category, str]] = None,
    country: Optional[str] = None,
    sources: Optional[Iterable[str]] = None,
    query: Optional[str] = None,
    page_size: Optional[int] = None,
    page: Optional[int] = None,
) -> RequestSpec:
    """Live top and breaking headlines, optionally filtered by category."""
    if sources is not None and (category is not None or country is not None):
        raise ValueError("sources cannot be combined with country or category")
    if category is not None:
        category = Category(_enum_value(category))

    return RequestSpec(
        path=TOP_HEADLINES_PATH,
        method=HttpMethod.GET,
        query_parameters={
            **_compact(
                category=_enum_value(category),
                country=country.lower() if country else None,
                sources=_join(sources),
                q=query,
            ),
            **_page_params(page_size, page),
        },
    )


def everything_spec(
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
) -> RequestSpec:
    """Search every article the API has indexed."""
    if not query or not query.strip():
        raise ValueError("query must not be empty")
    if sort_by is not None:
        sort_by = SortBy(_enum_value(sort_by))

    return RequestSpec(
        path=EVERYTHING_PATH,
        method=HttpMethod.GET,
        query_parameters={
            **_compact(
                q=query.strip(),
                sources=_join(sources),
                domains=_join(domains),
                language=language,
                sortBy=_enum_value(sort_by),
            ),
            **_compact(**{"from": _date_value(from_date), "to": _date_value(to_date)}),
            **_page_params(page_size, page),
        },
    )


def sources_spec(
    *,
    category: Optional[Union[Category, str]] = None,
    language: Optional[str] = None,
    country: Optional[str] = None,
) -> RequestSpec:
    """Publishers available for top headlines."""
    if category is not None:
        category = Category(_enum_value(category))

    return RequestSpec(
        path=SOURCES_PATH,
        method=HttpMethod.GET,
        query_parameters=_compact(
            category=_enum_value(category),
            language=language,
            country=country.lower() if country else None,
        ),
    )
