"""
Post schemas for django-blog-cms.

Documents in the posts collection are validated against these pydantic
models at the repository boundary. The content field holds author-trusted
HTML and is stored verbatim.
"""
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
SLUG_RE = re.compile(r"^[-a-zA-Z0-9_]+\Z")


def format_timestamp(value: datetime) -> str:
    """Serialize a datetime as fixed-width UTC text that sorts chronologically."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


class PostStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class PostFields(BaseModel):
    """
    Author-editable post fields.

    Collection name: "blogs" (configurable)
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, description="Post title")
    slug: str = Field("", description="URL token, unique by convention only")
    content: str = Field("", description="Rich text HTML, author-trusted and unsanitized")
    meta_title: str = Field("", description="SEO title; falls back to title")
    meta_description: str = Field("", description="SEO description")
    cover_image: str = Field("", description="Cover image URL")
    status: PostStatus = Field(PostStatus.DRAFT, description="draft or published")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        if not value.strip():
            raise ValueError("Title is required")
        return value


class PostCreate(PostFields):
    """Payload accepted by PostRepository.create()."""

    @field_validator("slug")
    @classmethod
    def slug_required(cls, value):
        if not value.strip():
            raise ValueError("Slug is required")
        if not SLUG_RE.match(value):
            raise ValueError("Slug may contain only letters, numbers, underscores or hyphens")
        return value


class PostUpdate(BaseModel):
    """Partial payload accepted by PostRepository.update()."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    slug: Optional[str] = None
    content: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    cover_image: Optional[str] = None
    status: Optional[PostStatus] = None

    @model_validator(mode="after")
    def supplied_fields_not_null(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        if "title" in self.model_fields_set and not self.title.strip():
            raise ValueError("Title is required")
        if "slug" in self.model_fields_set:
            if not self.slug.strip():
                raise ValueError("Slug is required")
            if not SLUG_RE.match(self.slug):
                raise ValueError("Slug may contain only letters, numbers, underscores or hyphens")
        return self

    def changes(self):
        """Return only the supplied fields, JSON-ready."""
        return self.model_dump(mode="json", exclude_unset=True)


class Post(PostFields):
    """A stored post as read back from the document store."""

    model_config = ConfigDict(extra="ignore")

    id: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def timezone_aware(cls, value):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_serializer("created_at", "updated_at", when_used="json")
    def serialize_timestamp(self, value):
        return format_timestamp(value)

    @classmethod
    def from_document(cls, key, data):
        return cls.model_validate({**data, "id": key})

    @property
    def is_published(self):
        return self.status == PostStatus.PUBLISHED
