"""
FastAPI application factory and API package.

Run with:
    uvicorn proposal_pricing.api:app --reload --port 8000

Or via main.py:
    python -m proposal_pricing --serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from proposal_pricing.config import get_settings
from proposal_pricing.api.routes import pricing_router, health_router
from proposal_pricing.exceptions import PricingEngineError, StorageError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory — create and configure the FastAPI instance."""
    settings = get_settings()

    application = FastAPI(
        title="Proposal Pricing API",
        description="Pricing engine for multi-service commercial proposals",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS: allow the proposal builder frontend (adjust origins in production)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router, tags=["Health"])
    application.include_router(pricing_router, prefix="/api/pricing", tags=["Pricing"])

    @application.exception_handler(PricingEngineError)
    async def pricing_error_handler(request: Request, exc: PricingEngineError):
        status_code = 503 if isinstance(exc, StorageError) else 400
        logger.warning(f"{request.method} {request.url.path} → {status_code} {exc.error_code}: {exc.message}")
        return JSONResponse(status_code=status_code, content=jsonable_encoder(exc.to_dict()))

    logger.info(f"Created {settings.app_name} API")
    return application


# Module-level instance for `uvicorn proposal_pricing.api:app`
app = create_app()
