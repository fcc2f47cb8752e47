"""Service layer for the application."""

from .completion_client import CompletionClient, CompletionError
from .devto_client import ArticleNotFoundError, DevToClient, DevToError
from .paragraph_analyzer import AnalysisFormatError, AnalysisOutcome, ParagraphAnalyzer
from .speech_client import SpeechAudio, SpeechClient, SpeechError

__all__ = [
    "AnalysisFormatError",
    "AnalysisOutcome",
    "ArticleNotFoundError",
    "CompletionClient",
    "CompletionError",
    "DevToClient",
    "DevToError",
    "ParagraphAnalyzer",
    "SpeechAudio",
    "SpeechClient",
    "SpeechError",
]
