"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context, plus health and debug)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Application-owned resources: the ledger HTTP client, the ledger
  token factory and the legacy proposal store

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings as default_settings
from app.infrastructure.tokenization.ledger_auth import LedgerTokenFactory
from app.infrastructure.tokenization.legacy_proposal_repository import (
    InMemoryLegacyProposalRepository,
)
from app.interfaces.debug import router as debug_router
from app.interfaces.health import router as health_router
from app.interfaces.tokenization.router import router as transfer_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open and close the ledger HTTP client."""
    config: Settings = app.state.settings
    config.check_ledger_secret()
    app.state.ledger_client = httpx.AsyncClient(
        base_url=config.ledger_http_url,
        timeout=config.ledger_timeout_seconds,
    )
    logger.info("DAML JSON API client initialised for %s", config.ledger_http_url)

    yield

    await app.state.ledger_client.aclose()


def create_app(config: Settings = default_settings) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        config: Settings to build the application from.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=config.log_level)

    app = FastAPI(
        title=config.project_name,
        version=config.version,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
        lifespan=lifespan,
    )

    # --- Owned resources ---
    app.state.settings = config
    app.state.legacy_proposals = InMemoryLegacyProposalRepository()
    app.state.ledger_tokens = LedgerTokenFactory(
        secret=config.ledger_jwt_secret,
        ledger_id=config.ledger_id,
        participant_id=config.ledger_participant_id,
        application_id=config.ledger_application_id,
        ttl_seconds=config.ledger_token_ttl_seconds,
        admin_party=config.ledger_admin_party,
    )

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(config.rate_limit_default, enabled=config.rate_limit_enabled)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api")
    app.include_router(transfer_router, prefix="/api")
    if config.enable_debug_routes:
        app.include_router(debug_router, prefix="/api")

    return app


app = create_app()
