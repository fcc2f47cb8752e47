"""Endpoints that list articles and expose their reading views."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from devreader.api.deps import get_app_settings, get_devto_client
from devreader.clickable_blocks import mark_clickable_blocks
from devreader.core.config import Settings
from devreader.schemas.article import Article, ArticleListResponse, ArticleResponse
from devreader.schemas.reading import (
    AnnotatedArticleResponse,
    BlockSchema,
    SentenceListResponse,
    SentenceSchema,
)
from devreader.sentence_splitter import segment_sentences
from devreader.services.devto_client import ArticleNotFoundError, DevToClient, DevToError

logger = logging.getLogger("devreader.backend.articles")

router = APIRouter(prefix="/articles", tags=["articles"])


async def _fetch_article(client: DevToClient, article_id: str) -> Article:
    try:
        return await client.get_article(article_id)
    except ArticleNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Article not found") from exc
    except DevToError as exc:
        logger.error("Error fetching article %s: %s", article_id, exc)
        raise HTTPException(status_code=502, detail="Failed to fetch article") from exc


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    page: int = Query(default=1, ge=1),
    per_page: Optional[int] = Query(default=None, ge=1, le=1000),
    tag: Optional[str] = Query(default=None),
    client: DevToClient = Depends(get_devto_client),
    settings: Settings = Depends(get_app_settings),
) -> ArticleListResponse:
    try:
        articles = await client.list_articles(page=page, per_page=per_page or settings.articles_per_page, tag=tag)
    except DevToError as exc:
        logger.error("Error fetching articles: %s", exc)
        raise HTTPException(status_code=502, detail="Failed to fetch articles") from exc
    return ArticleListResponse(articles=articles)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    client: DevToClient = Depends(get_devto_client),
) -> ArticleResponse:
    return ArticleResponse(article=await _fetch_article(client, article_id))


@router.get("/{article_id}/sentences", response_model=SentenceListResponse)
async def get_article_sentences(
    article_id: str,
    client: DevToClient = Depends(get_devto_client),
) -> SentenceListResponse:
    """Return the article body split into sentences in reading order."""

    article = await _fetch_article(client, article_id)
    sentences = [
        SentenceSchema(
            id=f"{article.id}-{sentence.position}",
            text=sentence.text,
            position=sentence.position,
            article_id=article.id,
        )
        for sentence in segment_sentences(article.content)
    ]
    return SentenceListResponse(article_id=article.id, sentences=sentences)


@router.get("/{article_id}/annotated", response_model=AnnotatedArticleResponse)
async def get_annotated_article(
    article_id: str,
    selected: Optional[str] = Query(default=None, description="Text of the selected block"),
    client: DevToClient = Depends(get_devto_client),
) -> AnnotatedArticleResponse:
    """Return the article body with clickable blocks marked."""

    article = await _fetch_article(client, article_id)
    annotated = mark_clickable_blocks(article.content, selected)
    return AnnotatedArticleResponse(
        article_id=article.id,
        html=annotated.html,
        blocks=[BlockSchema(kind=block.kind, text=block.text, selected=block.selected) for block in annotated.blocks],
    )
