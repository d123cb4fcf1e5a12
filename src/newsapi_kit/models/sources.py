from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NewsSource(BaseModel):
    """A publisher known to the API."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = Field(default=None, alias="id")
    name: str = Field(alias="name")
    description: Optional[str] = Field(default=None, alias="description")
    url: Optional[str] = Field(default=None, alias="url")
    category: Optional[str] = Field(default=None, alias="category")
    language: Optional[str] = Field(default=None, alias="language")
    country: Optional[str] = Field(default=None, alias="country")

    def summary(self) -> dict[str, str]:
        return {
            "id": self.id or "",
            "name": self.name,
            "category": self.category or "",
            "language": self.language or "",
            "country": self.country or "",
        }


class SourcesPage(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    status: str = Field(alias="status")
    sources: List[NewsSource] = Field(default_factory=list, alias="sources")
