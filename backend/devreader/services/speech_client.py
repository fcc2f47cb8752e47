"""Client for OpenAI-compatible text-to-speech endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

_MEDIA_TYPES = {
    "mp3": "audio/mpeg",
    "opus": "audio/ogg",
    "aac": "audio/aac",
    "flac": "audio/flac",
    "wav": "audio/wav",
}


class SpeechError(RuntimeError):
    """Raised when speech synthesis fails."""


@dataclass
class SpeechAudio:
    """Synthesized audio returned by the speech API."""

    content: bytes
    media_type: str


class SpeechClient:
    """Asynchronous client for ``/audio/speech``."""

    def __init__(
        self,
        base_url: str = "https://api.openai.com/v1",
        api_key: str = "",
        *,
        model: str = "tts-1",
        voice: str = "alloy",
        audio_format: str = "mp3",
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.voice = voice
        self.audio_format = audio_format
        self.timeout = timeout
        self._transport = transport

    async def synthesize(self, text: str) -> SpeechAudio:
        """Read ``text`` aloud and return the encoded audio."""

        payload = {
            "model": self.model,
            "voice": self.voice,
            "input": text,
            "response_format": self.audio_format,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        url = f"{self.base_url}/audio/speech"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(url, json=payload, headers=headers)
            except httpx.HTTPError as exc:
                raise SpeechError(f"Failed to connect to speech API at {url}: {exc}") from exc
        if response.status_code != 200:
            raise SpeechError(f"Speech POST {url} failed with status {response.status_code}: {response.text}")
        media_type = response.headers.get("Content-Type") or _MEDIA_TYPES.get(self.audio_format, "audio/mpeg")
        return SpeechAudio(content=response.content, media_type=media_type)
