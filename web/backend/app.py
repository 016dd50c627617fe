#!/usr/bin/env python3
"""
Liftout Matching API - FastAPI Application

Team/opportunity compatibility search and dashboard recommendations.

Usage:
    uv run python main.py serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from typing import Optional

from fastapi import FastAPI

from core.config_loader import WebConfig, get_config
from .exceptions import register_exception_handlers
from .models.responses import HealthResponse
from .routers import matching_router, recommendations_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application with routers and error handlers."""
    app = FastAPI(
        title="Liftout Matching API",
        description="Compatibility scoring between teams and opportunities",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    register_exception_handlers(app)

    app.include_router(matching_router)
    app.include_router(recommendations_router)

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        """Health check endpoint."""
        return HealthResponse(status="healthy", service="liftout-matching")

    return app


app = create_app()


def main(web_config: Optional[WebConfig] = None):
    """Run the web server, on the given host/port or the configured ones."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    web_config = web_config or get_config().web

    logger.info(f"Starting Liftout Matching API on {web_config.host}:{web_config.port}")
    logger.info(f"API Docs: http://{web_config.host}:{web_config.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=web_config.host,
        port=web_config.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
