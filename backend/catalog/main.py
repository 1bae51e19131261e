"""Catalog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The catalog source is built in the lifespan, stored on app.state, and
      closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import register_error_handlers
from catalog.api.routes import health, listings
from catalog.config import Settings, get_settings
from catalog.core.repository_protocols import CatalogSource
from catalog.infrastructure.catalog_client import HttpCatalogClient
from catalog.infrastructure.observability import setup_logging
from catalog.infrastructure.static_catalog import StaticCatalogSource

logger = logging.getLogger(__name__)


def build_catalog_source(
    settings: Settings, client: HttpCatalogClient,
) -> CatalogSource:
    """Pick the school source; courses always come from the HTTP client."""
    if settings.school_source == "static":
        return StaticCatalogSource(courses_source=client)
    return client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    client = HttpCatalogClient(
        settings.catalog_api_url,
        timeout_seconds=settings.catalog_timeout_seconds,
    )
    app.state.catalog_source = build_catalog_source(settings, client)
    logger.info(
        f"Catalog API started (schools from {settings.school_source} source)",
    )
    yield
    logger.info("Catalog API shutting down")
    app.state.catalog_source = None
    await client.aclose()


app = FastAPI(
    title="Education Catalog API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(listings.router)

register_error_handlers(app)


def serve() -> None:
    """Console entry point: run the API under uvicorn."""
    import uvicorn

    uvicorn.run("catalog.main:app", host="0.0.0.0", port=8000, reload=False)
