"""Application configuration and settings management."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ANALYSIS_SYSTEM_PROMPT = """
あなたは技術英語の読解アシスタント。入力は技術ブログの1段落。
出力は必ず JSON オブジェクトのみ（前置き・コードフェンス・コメントは禁止）。

目的：
- 学習者が段落を正しく理解するために必要な「知識の壁」になり得る表現を漏れなく抽出する。

方針：
- 専門用語（製品名・フレームワーク名・API名・プロトコル・略語など）は訳さない。vocab から除外し、"entities" に列挙のみ。
- vocab は非専門の重要語に限定する。基礎語（get/make/use/do など）は除外。
- phrases は句動詞・慣用句・コロケーション・談話標識など理解に必要な表現を重要度順に多めに列挙する。
- translation は段落全体の自然な和訳。
- explanation は段落の要旨や読み解きのコツを1–2文。

厳守：
- JSONのみ。末尾カンマ禁止。
""".strip()

DEFAULT_ANALYSIS_USER_PROMPT_TEMPLATE = """
段落:
{paragraph}

出力フォーマット:
{
  "translation": "...",
  "vocab": [
    { "term": "...", "meaning": "...", "type": "名詞|動詞|形容詞 等" }
  ],
  "phrases": [
    { "phrase": "...", "meaning": "...", "note": "..." }
  ],
  "entities": ["...", "..."],
  "explanation": "..."
}
""".strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="DEVREADER_", extra="ignore", populate_by_name=True
    )

    app_name: str = Field(default="Dev Reader API", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO",
        description="Root logging level.",
    )

    devto_base_url: str = Field(
        default="https://dev.to/api",
        description="Base URL of the dev.to public API.",
    )
    devto_timeout: float = Field(default=15.0, description="Timeout in seconds for dev.to requests.")
    articles_per_page: int = Field(default=20, ge=1, le=1000, description="Default article page size.")

    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL of the OpenAI-compatible API.",
    )
    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("DEVREADER_OPENAI_API_KEY", "OPENAI_API_KEY"),
        description="Bearer token for the OpenAI-compatible API.",
    )
    openai_timeout: float = Field(default=60.0, description="Timeout in seconds for completion and speech calls.")

    analysis_model: str = Field(default="gpt-4o-mini", description="Model used to analyse paragraphs.")
    analysis_temperature: float = Field(default=0.1, description="Sampling temperature for analysis.")
    analysis_system_prompt: str = Field(
        default=DEFAULT_ANALYSIS_SYSTEM_PROMPT,
        description="System prompt sent with every analysis request.",
    )
    analysis_user_prompt_template: str = Field(
        default=DEFAULT_ANALYSIS_USER_PROMPT_TEMPLATE,
        description="User prompt template; '{paragraph}' is replaced with the selected text.",
    )

    tts_model: str = Field(default="tts-1", description="Text-to-speech model.")
    tts_voice: str = Field(default="alloy", description="Text-to-speech voice.")
    tts_format: Literal["mp3", "opus", "aac", "flac", "wav"] = Field(
        default="mp3",
        description="Audio container returned by the speech endpoint.",
    )

    llm_debug: bool = Field(
        default=False,
        description="Log prompts and replies and return them with analysis responses.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()
