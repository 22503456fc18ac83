"""Gift catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from giftshop.api.categories import router as categories_router
from giftshop.api.health import router as health_router
from giftshop.api.middleware import setup_middleware
from giftshop.api.products import router as products_router
from giftshop.domain.exceptions import CatalogError
from giftshop.infrastructure import database
from giftshop.infrastructure.config import settings
from giftshop.infrastructure.logging import configure_logging

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting gift catalog API",
        version=settings.api_version,
        debug=settings.debug,
    )

    if settings.create_schema_on_startup:
        await database.create_schema()
        logger.info("Database schema ready")

    yield

    logger.info("Shutting down gift catalog API")
    await database.engine.dispose()


app = FastAPI(
    title="Gift Catalog API",
    description="Products, options and categories for the gift shop",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, API key auth, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)
app.include_router(categories_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def _error_body(
    request: Request,
    error_code: str,
    message: str,
    details: list[dict] | None = None,
) -> dict:
    return {
        "error_code": error_code,
        "message": message,
        "details": details or [],
        "request_id": getattr(request.state, "request_id", None),
    }


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Translate catalog rule violations into error responses."""
    logger.info(
        "Catalog request rejected",
        error_code=exc.code.value,
        path=request.url.path,
        **exc.details,
    )
    details = [{"field": key, "message": str(value)} for key, value in exc.details.items()]
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.code.value, exc.message, details),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request validation failures in the standard format."""
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", "Invalid value"),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content=_error_body(request, "VALIDATION_ERROR", "Request validation failed", details),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, error_code, message, details),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return JSONResponse(
        status_code=500,
        content=_error_body(request, "INTERNAL_ERROR", "An internal error occurred"),
    )
