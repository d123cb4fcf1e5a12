from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleSource(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = Field(default=None, alias="id")
    name: Optional[str] = Field(default=None, alias="name")


class Article(BaseModel):
    """A single news article as returned by the API."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    source: ArticleSource = Field(default_factory=ArticleSource, alias="source")
    author: Optional[str] = Field(default=None, alias="author")
    title: str = Field(alias="title")
    description: Optional[str] = Field(default=None, alias="description")
    url: str = Field(alias="url")
    url_to_image: Optional[str] = Field(default=None, alias="urlToImage")
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    content: Optional[str] = Field(default=None, alias="content")

    @property
    def source_name(self) -> str:
        return self.source.name or ""

    def summary(self) -> dict[str, str]:
        """Flat view used by table output."""
        return {
            "published": self.published_at.strftime("%Y-%m-%d %H:%M")
            if self.published_at
            else "",
            "source": self.source_name,
            "title": self.title,
            "url": self.url,
        }


class ArticlesPage(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    status: str = Field(alias="status")
    total_results: int = Field(default=0, alias="totalResults")
    articles: List[Article] = Field(default_factory=list, alias="articles")
