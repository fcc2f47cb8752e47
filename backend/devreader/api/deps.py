"""Common dependency functions for API routes."""

from functools import lru_cache

from fastapi import Depends

from devreader.core.config import Settings, get_settings
from devreader.services.completion_client import CompletionClient
from devreader.services.devto_client import DevToClient
from devreader.services.paragraph_analyzer import ParagraphAnalyzer
from devreader.services.speech_client import SpeechClient


def get_app_settings() -> Settings:
    return get_settings()


@lru_cache
def get_devto_client() -> DevToClient:
    settings = get_settings()
    return DevToClient(base_url=settings.devto_base_url, timeout=settings.devto_timeout)


@lru_cache
def get_completion_client() -> CompletionClient:
    settings = get_settings()
    return CompletionClient(
        base_url=settings.openai_base_url,
        api_key=settings.openai_api_key,
        timeout=settings.openai_timeout,
    )


def get_paragraph_analyzer(
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_app_settings),
) -> ParagraphAnalyzer:
    return ParagraphAnalyzer(
        client,
        model=settings.analysis_model,
        system_prompt=settings.analysis_system_prompt,
        user_prompt_template=settings.analysis_user_prompt_template,
        temperature=settings.analysis_temperature,
    )


@lru_cache
def get_speech_client() -> SpeechClient:
    settings = get_settings()
    return SpeechClient(
        base_url=settings.openai_base_url,
        api_key=settings.openai_api_key,
        model=settings.tts_model,
        voice=settings.tts_voice,
        audio_format=settings.tts_format,
        timeout=settings.openai_timeout,
    )
