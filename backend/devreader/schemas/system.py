"""Schemas for health and speech endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(..., description="Current API state")
    environment: str = Field(..., description="Deployment environment name")
    analysis_model: str = Field(..., description="Model used for paragraph analysis")
    tts_model: str = Field(..., description="Model used for speech synthesis")
    articles_api: str = Field(..., description="Base URL of the article provider")


class SpeechRequest(BaseModel):
    text: str = Field(default="", description="Text to read aloud")
