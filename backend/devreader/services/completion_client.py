"""Client for OpenAI-compatible chat completion endpoints."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import httpx


class CompletionError(RuntimeError):
    """Raised when the completion API cannot be reached or rejects a request."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CompletionClient:
    """Minimal asynchronous client for ``/chat/completions``."""

    def __init__(
        self,
        base_url: str = "https://api.openai.com/v1",
        api_key: str = "",
        *,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def chat(
        self,
        messages: Iterable[dict[str, str]],
        *,
        model: str,
        temperature: float = 0.1,
        response_format: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": model,
            "messages": list(messages),
            "temperature": temperature,
        }
        if response_format:
            payload["response_format"] = response_format

        url = f"{self.base_url}/chat/completions"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(url, json=payload, headers=self._headers())
            except httpx.HTTPError as exc:
                raise CompletionError(f"Failed to connect to completion API at {url}: {exc}") from exc
        if response.status_code != 200:
            raise CompletionError(
                f"Completion POST {url} failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise CompletionError(f"Completion POST {url} returned invalid JSON: {exc}") from exc
