"""Helper utilities for working with chat completion responses."""
from __future__ import annotations

import json
import re
from typing import Any

from .schemas.analysis import LlmDebugInfo


def extract_reply(data: dict[str, Any]) -> str:
    """Return the assistant text from a chat completion payload."""

    choices = data.get("choices") if isinstance(data, dict) else None
    if isinstance(choices, list) and choices:
        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        if isinstance(message, dict):
            content = message.get("content")
            if isinstance(content, str):
                return content.strip()
            if isinstance(content, list):
                joined = "".join(
                    str(part.get("text", "")) if isinstance(part, dict) else str(part) for part in content
                )
                return joined.strip()
    return ""


def strip_code_fences(text: str) -> str:
    """Remove a leading ```` ``` ```` / ```` ```json ```` fence and a trailing fence."""

    text = re.sub(r"^\s*```(?:json)?\s*", "", text, flags=re.IGNORECASE)
    text = re.sub(r"\s*```\s*$", "", text, flags=re.IGNORECASE)
    return text.strip()


def build_debug_info(messages: list[dict[str, str]], raw: dict[str, Any]) -> LlmDebugInfo:
    """Return a :class:`LlmDebugInfo` instance for logging and responses."""

    prompt_pretty = json.dumps(messages, ensure_ascii=False, indent=2)
    response_pretty = json.dumps(raw, ensure_ascii=False, indent=2)
    return LlmDebugInfo(
        prompt=messages,
        prompt_formatted=prompt_pretty,
        response=raw,
        response_formatted=response_pretty,
    )
