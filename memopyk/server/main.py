"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware
(request timing, CORS), registers the exception handlers and includes all
API routers. It serves as the root of the MEMOPYK web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from memopyk.core.database import init_db
from memopyk.core.logging_config import get_logger, setup_logging
from memopyk.core.monitoring import initialize_logfire

from .api.v1 import (
    auth,
    contacts,
    deployments,
    faqs,
    gallery,
    health,
    hero_videos,
    legal_content,
    seo_settings,
    seo_tools,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestTimingMiddleware

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates the database schema on startup when auto-create is enabled. A
    failing database does not stop the server; ``/api/health`` reports it.
    """
    try:
        logger.info("Starting up MEMOPYK Site API...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down MEMOPYK Site API...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    MEMOPYK Site API

    Backend of the bilingual (English/French) MEMOPYK marketing site: contact
    requests, hero videos, gallery, FAQs, per-page SEO settings, sitemap and
    robots.txt, legal content and the deployment log.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app)

app.add_middleware(RequestTimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=f"{constant.API_PREFIX}/auth")
app.include_router(contacts.router, prefix=constant.API_PREFIX)
app.include_router(hero_videos.router, prefix=f"{constant.API_PREFIX}/hero-videos")
app.include_router(gallery.router, prefix=f"{constant.API_PREFIX}/gallery")
app.include_router(faqs.router, prefix=f"{constant.API_PREFIX}/faqs")
app.include_router(seo_settings.router, prefix=f"{constant.API_PREFIX}/seo-settings")
app.include_router(seo_tools.router, prefix=constant.API_PREFIX)
app.include_router(legal_content.router, prefix=f"{constant.API_PREFIX}/legal-content")
app.include_router(deployments.router, prefix=f"{constant.API_PREFIX}/deploy")
