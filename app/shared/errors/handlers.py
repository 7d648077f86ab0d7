"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses through the tokenization
response envelopes. No stack traces or internal details are exposed to
clients: only domain errors surface their message.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.tokenization.errors import (
    LedgerRequestError,
    LedgerUnavailableError,
    StaleProposalError,
    TokenizationDomainError,
    ValidationError,
)
from app.interfaces.tokenization.envelope import build_failure

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(
        _request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle missing or malformed caller input."""
        logger.warning("Validation failed: %s", exc.message)
        return build_failure(exc).to_response()

    @app.exception_handler(StaleProposalError)
    async def handle_stale_proposal(
        _request: Request, exc: StaleProposalError
    ) -> JSONResponse:
        """Handle proposals whose contract is gone from the ledger."""
        logger.warning("Stale proposal: %s", exc.proposal_id)
        return build_failure(exc).to_response()

    @app.exception_handler(LedgerUnavailableError)
    async def handle_ledger_unavailable(
        _request: Request, exc: LedgerUnavailableError
    ) -> JSONResponse:
        """Handle an unreachable ledger."""
        logger.error("Ledger unavailable: %s", exc.reason)
        return build_failure(exc).to_response()

    @app.exception_handler(LedgerRequestError)
    async def handle_ledger_request(
        _request: Request, exc: LedgerRequestError
    ) -> JSONResponse:
        """Handle requests the ledger refused."""
        logger.error("Ledger refused request with status %d", exc.status_code)
        return build_failure(exc).to_response()

    @app.exception_handler(TokenizationDomainError)
    async def handle_tokenization_domain(
        _request: Request, exc: TokenizationDomainError
    ) -> JSONResponse:
        """Catch-all for other tokenization domain errors."""
        logger.warning("Tokenization domain error: %s", exc.message or type(exc).__name__)
        return build_failure(exc).to_response()

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return build_failure(exc).to_response()
