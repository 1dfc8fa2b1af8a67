# ============================================================================
# Creation Hub - FastAPI Application Entry Point
# ============================================================================
"""
Main FastAPI application module for the Creation Hub content service.

This module sets up the FastAPI application with:
- Logging configuration
- CORS middleware for the web front end
- Error handling for validation, HTTP and domain errors
- API router integration

Usage:
    Direct: python -m creation_hub.main
    Server: uvicorn creation_hub.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from datetime import datetime
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .api.v1 import api_router
from .config import settings
from .models import ErrorResponse
from .services.request_state import SubmissionInProgressError

# ============================================================================
# LOGGING
# ============================================================================

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("creation_hub.main")

# ============================================================================
# APPLICATION INITIALIZATION
# ============================================================================

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    debug=settings.debug,
    description=(
        "Creation Hub content service\n\n"
        "Aggregates marketing content from several tables for the Content "
        "Repository and backs the LinkedIn post wizard's preview step."
    ),
    openapi_url="/api/v1/openapi.json",
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

# ============================================================================
# ERROR HANDLERS
# ============================================================================


@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Pydantic validation errors raised inside endpoints, e.g. a bad form_data part."""
    error_response = ErrorResponse(error="Validation Error", detail=str(exc), timestamp=datetime.now())
    return JSONResponse(status_code=422, content=error_response.to_content())


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bad query, header or body values rejected before the endpoint runs."""
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in exc.errors()
    )
    error_response = ErrorResponse(error="Validation Error", detail=detail, timestamp=datetime.now())
    return JSONResponse(status_code=422, content=error_response.to_content())


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    error_response = ErrorResponse(
        error=f"HTTP {exc.status_code}",
        detail=str(exc.detail),
        timestamp=datetime.now(),
    )
    return JSONResponse(status_code=exc.status_code, content=error_response.to_content())


@app.exception_handler(SubmissionInProgressError)
async def in_progress_exception_handler(request: Request, exc: SubmissionInProgressError) -> JSONResponse:
    logger.info(f"Rejected duplicate '{exc.action}' for session '{exc.session_id}'")
    error_response = ErrorResponse(error="Request In Progress", detail=str(exc), timestamp=datetime.now())
    return JSONResponse(status_code=exc.status_code, content=error_response.to_content())


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected errors; details are only exposed in debug mode."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    error_response = ErrorResponse(
        error="Internal Server Error",
        detail=str(exc) if settings.debug else "An unexpected error occurred",
        timestamp=datetime.now(),
    )
    return JSONResponse(status_code=500, content=error_response.to_content())


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================

app.include_router(api_router, prefix="/api/v1")


@app.get("/", tags=["root"])
async def root() -> Dict[str, Any]:
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "status": "running",
        "docs_url": "/api/v1/docs",
        "health_check": "/api/v1/system/health",
        "timestamp": datetime.now(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("creation_hub.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
