from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from drupal_jekyll.utils.tags import normalize_tags

PUBLISHED = 1
BLOG_TYPES = frozenset({"blog", "story"})
PAGE_TYPE = "page"


class DrupalPost(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    nid: int
    title: str = ""
    body: str = ""
    created: int
    status: int = 0
    node_type: str = Field(..., alias="type")
    format_name: Optional[str] = None
    author: Optional[str] = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("title", "body", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any):
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, v: Any):
        return normalize_tags(v)

    @property
    def is_published(self) -> bool:
        return self.status == PUBLISHED

    @property
    def is_blog(self) -> bool:
        return self.node_type in BLOG_TYPES

    @property
    def is_page(self) -> bool:
        return self.node_type == PAGE_TYPE

    @property
    def created_at(self) -> datetime:
        """Creation time in the local timezone."""
        return datetime.fromtimestamp(self.created)

    def report_fields(self) -> dict[str, Any]:
        return {"nid": self.nid, "title": self.title}
