# main.py

"""
FastAPI application for the news portal gateway.
Entry point for the web tier sitting between the browser and the backend API.
"""

import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from common.logger import LoggerFactory, LoggerType, LogLevel

from . import __version__
from .core.config import settings
from .routers import (
    admin_router,
    articles_router,
    categories_router,
    comments_router,
    contact_router,
    feeds_router,
    metadata_router,
    rss_feeds_router,
    sitemap_router,
)
from .utils.dependencies import cleanup_services, get_auth_state_store, initialize_services
from .utils.errors import GatewayError, INTERNAL_SERVER_ERROR
from .utils.response_converters import error_response

# Setup application logger
logger = LoggerFactory.get_logger(
    name="news-portal",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.from_string(settings.log_level),
    use_colors=True,
    log_file=f"{settings.log_file_path}news_portal_main.log",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared backend client on startup and close it on shutdown."""
    logger.info(f"🚀 Starting {settings.app_name} v{__version__}")
    logger.info(f"📊 Environment: {settings.environment}")
    logger.info(f"🌐 FastAPI Host: {settings.host}:{settings.port}")
    logger.info(f"🔗 Backend API: {settings.api_base_url}")
    logger.info(f"💾 Auth storage: {settings.auth_storage_backend}")

    await initialize_services()

    yield

    logger.info("🛑 Shutting down services...")
    await cleanup_services()
    logger.info(f"👋 {settings.app_name} shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="News Portal Gateway",
    description="Web tier for the news site: API proxy, sitemap and RSS feeds",
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start_time = time.time()
    response = await call_next(request)
    process_time = (time.time() - start_time) * 1000

    logger.debug(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({process_time:.2f} ms)"
    )
    return response


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request body"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": INTERNAL_SERVER_ERROR},
    )


# Include routers
app.include_router(articles_router.router)
app.include_router(categories_router.router)
app.include_router(comments_router.router)
app.include_router(contact_router.router)
app.include_router(admin_router.router)
app.include_router(rss_feeds_router.router)
app.include_router(sitemap_router.router)
app.include_router(feeds_router.router)
app.include_router(metadata_router.router)


@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": settings.app_name,
        "status": "running",
        "version": __version__,
        "environment": settings.environment,
        "description": "News portal web tier",
        "docs_url": "/docs" if settings.debug else "disabled",
        "backend": settings.api_base_url,
        "site_url": settings.site_url,
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    health_status = {
        "status": "healthy",
        "service": settings.app_name,
        "version": __version__,
        "components": {"backend_api": settings.api_base_url},
    }

    try:
        auth_state = get_auth_state_store()
        health_status["components"]["auth_storage"] = {
            "backend": settings.auth_storage_backend,
            "stats": auth_state.storage.get_stats().to_dict(),
        }
    except Exception as e:
        logger.warning(f"⚠️ Auth storage unavailable: {e}")
        health_status["status"] = "degraded"
        health_status["components"]["auth_storage"] = "unhealthy"

    return health_status


def main():
    """Run the gateway with uvicorn."""
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    uvicorn.run(
        "news_portal.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
