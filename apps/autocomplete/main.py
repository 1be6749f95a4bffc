"""Autocomplete API - FastAPI application entry point.

광고 등록 화면(입력 4종 + location 자동완성)을 HTTP로 노출합니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from autocomplete.presentation.http.controllers import health_router, screen_router
from autocomplete.presentation.http.errors import register_exception_handlers
from autocomplete.setup.config import get_settings
from autocomplete.setup.dependencies import shutdown_dependencies
from autocomplete.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging()
    logger.info(f"Starting {settings.service_name}")

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await shutdown_dependencies()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="Autocomplete API",
        description="Ad form with location autocomplete",
        version=settings.service_version,
        docs_url="/api/v1/ad-form/docs",
        openapi_url="/api/v1/ad-form/openapi.json",
        redoc_url="/api/v1/ad-form/redoc",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(screen_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "autocomplete.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
