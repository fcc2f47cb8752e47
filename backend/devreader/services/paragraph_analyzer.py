"""Service that asks the language model to break a paragraph down for a learner."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..llm_utils import build_debug_info, extract_reply, strip_code_fences
from ..schemas.analysis import AnalysisResult, LlmDebugInfo
from .completion_client import CompletionClient

logger = logging.getLogger(__name__)


class AnalysisFormatError(RuntimeError):
    """Raised when the model reply is not a usable analysis object."""


@dataclass
class AnalysisOutcome:
    """Parsed analysis together with the exchange that produced it."""

    result: AnalysisResult
    debug: LlmDebugInfo


class ParagraphAnalyzer:
    """Build the prompt for a paragraph and parse the structured reply."""

    def __init__(
        self,
        client: CompletionClient,
        *,
        model: str,
        system_prompt: str,
        user_prompt_template: str,
        temperature: float = 0.1,
    ) -> None:
        self._client = client
        self._model = model
        self._system_prompt = system_prompt
        self._user_prompt_template = user_prompt_template
        self._temperature = temperature

    def build_messages(self, paragraph: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self._system_prompt},
            {"role": "user", "content": self._user_prompt_template.replace("{paragraph}", paragraph)},
        ]

    async def analyze(self, paragraph: str) -> AnalysisOutcome:
        """Analyse ``paragraph`` and return the validated result."""

        paragraph = paragraph.strip()
        if not paragraph:
            raise ValueError("Paragraph is required")

        messages = self.build_messages(paragraph)
        logger.debug("Sending paragraph of %s characters to model '%s'", len(paragraph), self._model)
        raw = await self._client.chat(
            messages,
            model=self._model,
            temperature=self._temperature,
            response_format={"type": "json_object"},
        )
        debug = build_debug_info(messages, raw)
        result = self._parse_reply(extract_reply(raw))
        return AnalysisOutcome(result=result, debug=debug)

    @staticmethod
    def _parse_reply(reply: str) -> AnalysisResult:
        text = strip_code_fences(reply)
        if not text:
            raise AnalysisFormatError("Model returned an empty reply")
        try:
            parsed: Optional[Any] = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.debug("Model reply is not valid JSON: %s", text)
            raise AnalysisFormatError(f"Model reply is not valid JSON: {exc}") from exc
        if not isinstance(parsed, dict):
            raise AnalysisFormatError("Model reply is not a JSON object")
        try:
            return AnalysisResult.model_validate(parsed)
        except ValidationError as exc:
            raise AnalysisFormatError(f"Model reply does not match the analysis format: {exc}") from exc
