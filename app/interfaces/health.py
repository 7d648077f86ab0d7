"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and whether the
ledger answers a trivial query.
"""

from fastapi import APIRouter, Depends, Request

from app.domain.tokenization.ports import LedgerQueryPort
from app.interfaces.tokenization.dependencies import get_ledger_port
from app.interfaces.tokenization.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    response_model_by_alias=True,
    summary="Health check",
    description="Returns application health status, version and ledger reachability.",
)
async def health_check(
    request: Request,
    ledger_port: LedgerQueryPort = Depends(get_ledger_port),
) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=request.app.state.settings.version,
        ledger_available=await ledger_port.is_available(),
    )
