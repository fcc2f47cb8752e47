"""Schemas for article listing and detail endpoints."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class ArticleAuthor(BaseModel):
    name: str = Field(..., description="Display name of the author")
    username: str = Field(..., description="Author handle on the source site")
    profile_image: Optional[str] = Field(default=None, description="Avatar URL")


class Article(BaseModel):
    id: str = Field(..., description="Composite identifier, e.g. 'devto-123'")
    source: Literal["devto"] = Field(default="devto", description="Content provider")
    source_id: str = Field(..., description="Identifier on the content provider")
    title: str = Field(..., description="Article title")
    description: str = Field(default="", description="Short summary provided by the author")
    content: str = Field(default="", description="Article body as HTML")
    author: ArticleAuthor
    published_at: Optional[str] = Field(default=None, description="Publication timestamp (ISO 8601)")
    reading_time: int = Field(default=0, description="Estimated reading time in minutes")
    tags: List[str] = Field(default_factory=list, description="Article tags")
    url: str = Field(default="", description="Canonical article URL")
    cover_image: Optional[str] = Field(default=None, description="Cover image URL")


class ArticleListResponse(BaseModel):
    articles: List[Article] = Field(default_factory=list)


class ArticleResponse(BaseModel):
    article: Article
