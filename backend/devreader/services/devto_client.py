"""Client wrapper around the dev.to public REST API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..schemas.article import Article, ArticleAuthor

logger = logging.getLogger(__name__)

ARTICLE_ID_PREFIX = "devto-"


class DevToError(RuntimeError):
    """Raised when the dev.to API fails or returns an unexpected response."""


class ArticleNotFoundError(DevToError):
    """Raised when dev.to does not know the requested article."""


def to_source_id(article_id: str) -> str:
    """Turn a composite id such as ``devto-123`` into the dev.to id ``123``."""

    return article_id.replace(ARTICLE_ID_PREFIX, "")


def transform_article(data: Dict[str, Any], *, allow_markdown: bool = False) -> Article:
    """Convert a dev.to article payload into an :class:`Article`."""

    if not isinstance(data, dict) or data.get("id") is None:
        raise DevToError("Article payload has no 'id'")
    content = data.get("body_html") or ""
    if not content and allow_markdown:
        content = data.get("body_markdown") or ""
    user = data.get("user")
    if not isinstance(user, dict):
        user = {}
    source_id = str(data["id"])
    try:
        return _build_article(data, source_id, content, user)
    except ValidationError as exc:
        raise DevToError(f"Article payload {source_id} is malformed: {exc}") from exc


def _build_article(data: Dict[str, Any], source_id: str, content: str, user: Dict[str, Any]) -> Article:
    return Article(
        id=f"{ARTICLE_ID_PREFIX}{source_id}",
        source="devto",
        source_id=source_id,
        title=data.get("title") or "",
        description=data.get("description") or "",
        content=content,
        author=ArticleAuthor(
            name=user.get("name") or "",
            username=user.get("username") or "",
            profile_image=user.get("profile_image"),
        ),
        published_at=data.get("published_at"),
        reading_time=data.get("reading_time_minutes") or 0,
        tags=_tag_list(data),
        url=data.get("url") or "",
        cover_image=data.get("cover_image") or None,
    )


def _tag_list(data: Dict[str, Any]) -> List[str]:
    # the listing endpoint sends a list, the detail endpoint a comma separated string
    tags = data.get("tag_list")
    if isinstance(tags, str):
        return [tag.strip() for tag in tags.split(",") if tag.strip()]
    if isinstance(tags, list):
        return [str(tag) for tag in tags]
    return []


class DevToClient:
    """Asynchronous HTTP client for dev.to article endpoints."""

    def __init__(
        self,
        base_url: str = "https://dev.to/api",
        *,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(url, params=params, headers={"Accept": "application/json"})
            except httpx.HTTPError as exc:
                raise DevToError(f"Failed to connect to dev.to at {url}: {exc}") from exc
        if response.status_code == 404:
            raise ArticleNotFoundError(f"Article not found: {url}")
        if response.status_code != 200:
            raise DevToError(f"dev.to GET {url} failed with status {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise DevToError(f"dev.to GET {url} returned invalid JSON: {exc}") from exc

    async def list_articles(self, page: int = 1, per_page: int = 20, tag: Optional[str] = None) -> List[Article]:
        """Return one page of the latest articles, optionally filtered by tag."""

        params: Dict[str, Any] = {"page": page, "per_page": per_page}
        if tag:
            params["tag"] = tag
        data = await self._get("/articles", params)
        if not isinstance(data, list):
            raise DevToError(f"Unexpected article list payload: {type(data).__name__}")
        logger.debug("Fetched %s articles (page=%s, tag=%s)", len(data), page, tag)
        return [transform_article(item) for item in data]

    async def get_article(self, article_id: str) -> Article:
        """Return a single article including its HTML body."""

        data = await self._get(f"/articles/{to_source_id(article_id)}")
        if not isinstance(data, dict):
            raise DevToError(f"Unexpected article payload: {type(data).__name__}")
        return transform_article(data, allow_markdown=True)
