"""Endpoint that breaks a selected paragraph down with the language model."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from devreader.api.deps import get_app_settings, get_paragraph_analyzer
from devreader.core.config import Settings
from devreader.schemas.analysis import AnalyzeRequest, AnalyzeResponse, LlmDebugInfo
from devreader.services.completion_client import CompletionError
from devreader.services.paragraph_analyzer import AnalysisFormatError, ParagraphAnalyzer

logger = logging.getLogger("devreader.backend.analyze")

router = APIRouter(tags=["analysis"])


def _perform_debug_logging(debug: LlmDebugInfo) -> None:
    logger.info("LLM prompt: %s", debug.prompt_formatted)
    logger.info("LLM response: %s", debug.response_formatted)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    payload: AnalyzeRequest,
    analyzer: ParagraphAnalyzer = Depends(get_paragraph_analyzer),
    settings: Settings = Depends(get_app_settings),
) -> AnalyzeResponse:
    paragraph = payload.text()
    if not paragraph:
        raise HTTPException(status_code=400, detail="Paragraph is required")

    try:
        outcome = await analyzer.analyze(paragraph)
    except CompletionError as exc:
        logger.error("Completion API returned an error (status %s): %s", exc.status_code, exc)
        raise HTTPException(status_code=502, detail="Failed to reach the analysis model") from exc
    except AnalysisFormatError as exc:
        logger.error("Error analyzing paragraph: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to analyze paragraph") from exc

    if not settings.llm_debug:
        return AnalyzeResponse(analysis=outcome.result)
    _perform_debug_logging(outcome.debug)
    return AnalyzeResponse(analysis=outcome.result, debug=outcome.debug)
