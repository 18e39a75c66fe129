"""
Pydantic schemas for posts and their comments.

Request payloads declare every field as optional: presence is checked
by the service with truthiness rules, so a missing field produces the
service's own 400 answer instead of FastAPI's 422 validation error.
Falsy scalars (``""``, ``0``, ``false``) are turned into ``None`` before
type validation for the same reason.  Response models are strict and
describe what the store actually holds.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class Comment(BaseModel):
    """A comment attached to a post.  Comments have no id."""

    author: str
    content: str


class Post(BaseModel):
    """A post as held in the store and returned by the API."""

    id: str
    title: str
    image: str
    description: str
    category: str
    comments: List[Comment] = Field(default_factory=list)


class RequestPayload(BaseModel):
    """Base for request bodies whose fields are checked for presence."""

    @field_validator("*", mode="before")
    @classmethod
    def falsy_to_none(cls, v: Any) -> Any:
        # Lists count as present even when empty.
        if isinstance(v, (list, dict)):
            return v
        return v if v else None


class PostCreate(RequestPayload):
    """Schema for creating a post.  All five fields are required."""

    title: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    comments: Optional[List[Comment]] = None


class PostUpdate(RequestPayload):
    """Schema for partially updating a post.

    Any subset of fields may be sent; missing or falsy values leave the
    stored value untouched.
    """

    title: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    comments: Optional[List[Comment]] = None


class CommentCreate(RequestPayload):
    author: Optional[str] = None
    content: Optional[str] = None
