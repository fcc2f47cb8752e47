from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import analyze, articles, health, reading, speech
from .core.config import settings

logger = logging.getLogger("devreader.backend")
logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")

app = FastAPI(title=settings.app_name)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (health, articles, reading, analyze, speech):
    app.include_router(module.router, prefix="/api")

logger.info("%s started in %s environment", settings.app_name, settings.environment)


__all__ = ["app"]
