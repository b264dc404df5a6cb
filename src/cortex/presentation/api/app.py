"""Cortex HTTP application.

``create_app`` wires settings, storage, the completion chain and the rate
limiter onto ``app.state`` and mounts the versioned routers under
``/api/v1``. ``/health`` and ``/`` stay unversioned for probes.

Run with ``uvicorn --factory cortex.presentation.api.app:create_app``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

import httpx
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cortex.infrastructure.integration.ai import create_completion_chain
from cortex.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
    ensure_sqlite_directory,
)
from cortex.infrastructure.rate_limiting import InMemoryRateLimiter
from cortex.presentation.api.exception_handlers import setup_exception_handlers
from cortex.presentation.api.routers import notes_router, public_router, query_router
from cortex.presentation.api.schemas.common import HealthResponse
from cortex_config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Log to stdout once per process; third-party chatter only from WARNING."""
    level = getattr(logging, log_level_str.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("cortex").setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Notes",
        "description": """Capture and manage notes.

**Capture:**
- Free text, links (`source_url`) or file references (`file_name`)
- Every capture is analyzed for title, summary, tags, type and priority
- Falls back to keyword scoring when no language model is configured
""",
    },
    {
        "name": "Query",
        "description": "Ask natural-language questions about your notes.",
    },
    {
        "name": "Public",
        "description": """The public brain: notes marked public, open to any origin.

Responses are cacheable by shared caches for 60 seconds.
""",
    },
    {
        "name": "Health",
        "description": "Service health and configuration.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    chain = app.state.completion_chain
    logger.info("Starting %s API v%s", settings.app_name, API_VERSION)

    ensure_sqlite_directory(settings.database_url)
    await create_tables(app.state.engine)

    if settings.rate_limit_enabled:
        app.state.rate_limiter.start()

    if chain.is_configured:
        logger.info("AI analysis enabled (%s)", ", ".join(chain.model_names))
    else:
        logger.info("AI analysis disabled, using keyword scoring")

    try:
        yield
    finally:
        logger.info("Shutting down %s API", settings.app_name)
        await app.state.rate_limiter.stop()
        await app.state.http_client.aclose()
        await app.state.engine.dispose()


def create_v1_router() -> APIRouter:
    router = APIRouter()
    router.include_router(notes_router, prefix="/notes", tags=["Notes"])
    router.include_router(query_router, prefix="/query", tags=["Query"])
    router.include_router(public_router, prefix="/public", tags=["Public"])
    return router


def _init_state(app: FastAPI, settings: Settings) -> None:
    """Long-lived components shared by all requests; closed in ``lifespan``."""
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_maker = create_session_maker(app.state.engine)
    app.state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(connect=5.0, read=settings.ai_timeout, write=10.0, pool=5.0),
    )
    app.state.completion_chain = create_completion_chain(settings, app.state.http_client)
    app.state.rate_limiter = InMemoryRateLimiter(
        sweep_interval=settings.rate_limit_sweep_interval,
    )


def _add_service_routes(app: FastAPI, settings: Settings) -> None:
    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        chain = app.state.completion_chain
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            ai_enabled=chain.is_configured,
            models=chain.model_names,
        )

    @app.get("/", tags=["Health"])
    async def root() -> dict:
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "notes": f"{API_V1_PREFIX}/notes",
                "query": f"{API_V1_PREFIX}/query",
                "public": f"{API_V1_PREFIX}/public/brain",
            },
        }


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Parameters
    ----------
    settings
        Defaults to the cached environment settings; tests pass their own.

    Returns
    -------
    A ready-to-serve FastAPI instance. Storage and the rate-limit sweeper
    start in its lifespan.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    # Interactive docs only in debug mode
    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "An **AI second brain**: capture thoughts, links and files, "
            "and ask questions about them."
        ),
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    _init_state(app, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)
    _add_service_routes(app, settings)
    return app
