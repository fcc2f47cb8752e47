"""Schemas for the reading endpoints built on the HTML segmentation helpers."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class HtmlRequest(BaseModel):
    html: str = Field(default="", description="Article body as HTML")


class AnnotateRequest(HtmlRequest):
    selected: Optional[str] = Field(
        default=None,
        description="Text of the currently selected block, matched exactly",
    )


class TextResponse(BaseModel):
    text: str


class SentenceSchema(BaseModel):
    id: str = Field(..., description="'<article_id>-<position>' or the position alone")
    text: str
    position: int = Field(..., description="Ordinal position in reading order")
    article_id: Optional[str] = None


class SentenceListResponse(BaseModel):
    article_id: Optional[str] = None
    sentences: List[SentenceSchema] = Field(default_factory=list)


class BlockSchema(BaseModel):
    kind: str = Field(..., description="Tag name of the block")
    text: str = Field(..., description="Trimmed block text, sent as 'data-sentence'")
    selected: bool = False


class AnnotateResponse(BaseModel):
    html: str = Field(..., description="HTML with clickable blocks marked")
    blocks: List[BlockSchema] = Field(default_factory=list)


class AnnotatedArticleResponse(AnnotateResponse):
    article_id: str
