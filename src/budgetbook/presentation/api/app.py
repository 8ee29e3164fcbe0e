"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Run with ``budgetbook serve`` or
``uvicorn --factory budgetbook.presentation.api.app:create_app``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from budgetbook.infrastructure.messaging import InMemoryChangeFeed
from budgetbook.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
)
from budgetbook.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from budgetbook.presentation.api.routers import (
    accounts_router,
    auth_router,
    budgets_router,
    changes_router,
    dashboard_router,
    transactions_router,
)
from budgetbook.presentation.api.schemas.common import HealthResponse
from budgetbook_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_name: str) -> None:
    """Configure application logging.

    Sets up logging for the budgetbook application with:
    - Console output with timestamps and module names
    - Configurable log level for budgetbook modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("budgetbook").setLevel(log_level)
    logging.getLogger("budgetbook_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """User authentication and session management.

- Register with email/password, login to obtain JWT tokens
- Refresh tokens before expiry
- Passwords are hashed with bcrypt
""",
    },
    {
        "name": "Accounts",
        "description": """Money accounts (bank, cash, savings, credit).

Balances change only by posting transactions. Deleting an account keeps
the transactions that reference it.
""",
    },
    {
        "name": "Transactions",
        "description": """Income, expenses and transfers.

Posting a transaction updates the affected balances and stores the record
in one atomic step. Transfers may carry a service fee that is charged to
the source account only.
""",
    },
    {
        "name": "Budgets",
        "description": "Monthly spending limits per category.",
    },
    {
        "name": "Dashboard",
        "description": """Monthly summaries: net worth, income, expenses,
spending per category, daily trend and the calendar view.
""",
    },
    {
        "name": "Changes",
        "description": "WebSocket stream of committed changes for live views.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the database and the change feed for the app's lifetime."""
    settings: Settings = app.state.settings

    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
    engine = create_engine(settings.database_url, echo=settings.database_echo)
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)
    app.state.change_feed = InMemoryChangeFeed()
    yield

    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(accounts_router, prefix="/accounts", tags=["Accounts"])
    v1_router.include_router(
        transactions_router,
        prefix="/transactions",
        tags=["Transactions"],
    )
    v1_router.include_router(budgets_router, prefix="/budgets", tags=["Budgets"])
    v1_router.include_router(dashboard_router, tags=["Dashboard"])
    v1_router.include_router(changes_router, tags=["Changes"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Personal finance tracker with an atomic transaction ledger.",
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

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Unversioned for load balancer/monitoring compatibility."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app
