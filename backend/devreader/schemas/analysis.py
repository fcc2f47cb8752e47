"""Schemas for the paragraph analysis endpoint."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class LlmDebugInfo(BaseModel):
    """Diagnostic information about an LLM interaction."""

    prompt: list[dict[str, str]] = Field(..., description="Messages sent to the model")
    prompt_formatted: str = Field(..., description="Indented JSON of the messages")
    response: dict[str, Any] = Field(..., description="Full completion payload")
    response_formatted: str = Field(..., description="Indented JSON of the completion payload")


class VocabItem(BaseModel):
    term: str
    meaning: str
    type: str = ""


class PhraseItem(BaseModel):
    phrase: str
    meaning: str
    note: Optional[str] = None


class AnalysisResult(BaseModel):
    translation: str = Field(default="", description="Natural translation of the whole paragraph")
    vocab: List[VocabItem] = Field(default_factory=list, description="Important non-technical words")
    phrases: List[PhraseItem] = Field(
        default_factory=list,
        description="Phrasal verbs, idioms, collocations and discourse markers",
    )
    entities: List[str] = Field(
        default_factory=list,
        description="Technical terms, product names and abbreviations, left untranslated",
    )
    explanation: str = Field(default="", description="Gist of the paragraph and reading tips")


class AnalyzeRequest(BaseModel):
    paragraph: Optional[str] = Field(default=None, description="Paragraph to analyse")
    sentence: Optional[str] = Field(
        default=None,
        description="Legacy name for 'paragraph', used when 'paragraph' is missing",
    )

    def text(self) -> str:
        return (self.paragraph or self.sentence or "").strip()


class AnalyzeResponse(BaseModel):
    analysis: AnalysisResult
    debug: Optional[LlmDebugInfo] = Field(
        default=None,
        description="Prompt and raw reply, only when LLM debugging is enabled",
    )
