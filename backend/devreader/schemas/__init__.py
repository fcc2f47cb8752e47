"""Pydantic schemas exposed by the HTTP API."""

from .analysis import AnalysisResult, AnalyzeRequest, AnalyzeResponse, LlmDebugInfo, PhraseItem, VocabItem
from .article import Article, ArticleAuthor, ArticleListResponse, ArticleResponse
from .reading import (
    AnnotatedArticleResponse,
    AnnotateRequest,
    AnnotateResponse,
    BlockSchema,
    HtmlRequest,
    SentenceListResponse,
    SentenceSchema,
    TextResponse,
)
from .system import HealthResponse, SpeechRequest

__all__ = [
    "AnalysisResult",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "AnnotateRequest",
    "AnnotateResponse",
    "AnnotatedArticleResponse",
    "Article",
    "ArticleAuthor",
    "ArticleListResponse",
    "ArticleResponse",
    "BlockSchema",
    "HealthResponse",
    "HtmlRequest",
    "LlmDebugInfo",
    "PhraseItem",
    "SentenceListResponse",
    "SentenceSchema",
    "SpeechRequest",
    "TextResponse",
    "VocabItem",
]
