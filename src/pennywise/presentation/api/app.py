"""Pennywise HTTP API.

``create_app`` builds the application: routers under ``/api/v1``, the
error envelope handlers, CORS and an unversioned ``/health`` probe.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pennywise import __version__
from pennywise.infrastructure.persistence.sqlalchemy import create_tables
from pennywise.presentation.api.dependencies import get_engine
from pennywise.presentation.api.exception_handlers import setup_exception_handlers
from pennywise.presentation.api.routers import (
    auth_router,
    budgets_router,
    categories_router,
    expenses_router,
    users_router,
)
from pennywise.presentation.api.schemas.common import HealthResponse
from pennywise_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Send log records to stdout; third-party chatter is capped at WARNING."""
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in ("pennywise", "pennywise_auth"):
        logging.getLogger(name).setLevel(log_level)

    for name in ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite"):
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login and token refresh.

- Passwords are hashed with argon2id
- Access tokens are short-lived; refresh tokens obtain new ones
- Tokens are stateless and cannot be revoked before they expire
""",
    },
    {"name": "Profile", "description": "The authenticated user's account."},
    {"name": "Categories", "description": "Shared spending categories."},
    {
        "name": "Budgets",
        "description": """One budget per category and user.

The `alert` threshold is always 80% of `amount`, rounded.
""",
    },
    {"name": "Expenses", "description": "Individual spending entries."},
    {"name": "Health", "description": "Service health monitoring endpoints."},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup; release the pool on shutdown."""
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
    engine = get_engine(settings.database_url)
    await create_tables(engine)
    yield

    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database pool disposed")


def create_v1_router() -> APIRouter:
    """Collect the versioned routers."""
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(users_router, prefix="/me", tags=["Profile"])
    v1_router.include_router(
        categories_router,
        prefix="/categories",
        tags=["Categories"],
    )
    v1_router.include_router(budgets_router, prefix="/budgets", tags=["Budgets"])
    v1_router.include_router(expenses_router, prefix="/expenses", tags=["Expenses"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Parameters
    ----------
    settings
        Settings to run with; ``get_settings()`` when omitted. Dependencies
        read them back from ``app.state.settings``.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Personal finance tracking: categories, budgets and expenses.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Liveness probe."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app
