"""Health check endpoints."""

from fastapi import APIRouter, Depends

from devreader.api.deps import get_app_settings
from devreader.core.config import Settings
from devreader.schemas.system import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["system"])
def healthcheck(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Simple readiness probe."""

    return HealthResponse(
        status="ok",
        environment=settings.environment,
        analysis_model=settings.analysis_model,
        tts_model=settings.tts_model,
        articles_api=settings.devto_base_url,
    )
