from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from logging_config import configure_logging
from services.alerts import build_default_alert_service
from services.device_secrets import build_default_secret_validator


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    build_default_alert_service()
    build_default_secret_validator()
    try:
        yield
    finally:
        build_default_alert_service.cache_clear()
        build_default_secret_validator.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Climate Monitor",
        description="Evaluates device sensor readings and reports out-of-range values.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app

app = create_app()
