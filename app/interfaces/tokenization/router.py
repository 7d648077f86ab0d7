"""
FastAPI router for the tokenization bounded context.

All routes delegate to use cases. No business logic here.
Success bodies are built by the envelope module; failures propagate to
the centralized error handlers, which use the same envelopes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.application.tokenization.accept_transfer_proposal import (
    AcceptTransferProposalUseCase,
)
from app.application.tokenization.create_transfer_proposal import (
    CreateTransferProposalUseCase,
)
from app.application.tokenization.dtos import (
    CreateTransferCommand,
    GetPendingProposalsQuery,
    ProposalDecisionCommand,
)
from app.application.tokenization.get_pending_proposals import (
    GetPendingProposalsUseCase,
)
from app.application.tokenization.reject_transfer_proposal import (
    RejectTransferProposalUseCase,
)
from app.interfaces.tokenization.dependencies import (
    get_accept_transfer_use_case,
    get_create_transfer_use_case,
    get_pending_proposals_use_case,
    get_reject_transfer_use_case,
)
from app.interfaces.tokenization.envelope import HTTP_422, build_success
from app.interfaces.tokenization.schemas import (
    AcceptProposalResponse,
    CreateTransferRequest,
    CreateTransferResponse,
    ErrorResponse,
    PendingProposalsResponse,
    ProposalDecisionRequest,
    RejectProposalResponse,
    StaleProposalResponse,
    TransactionItem,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transfer", tags=["transfer"])

ACCEPTANCE_URL = "/api/transfer/accept"
STALE_ACCEPT_RECOMMENDATION = (
    "Please ask the sender to create a new transfer proposal with the updated contract."
)


@router.post(
    "",
    response_model=CreateTransferResponse,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Propose a token transfer",
    description="Open a transfer proposal that the recipient must accept or reject.",
)
async def create_transfer(
    request: CreateTransferRequest,
    use_case: CreateTransferProposalUseCase = Depends(get_create_transfer_use_case),
) -> CreateTransferResponse:
    """Open a transfer proposal from sender to recipient."""
    result = await use_case.execute(
        CreateTransferCommand(
            sender_party_id=request.sender_party_id,
            recipient_party_id=request.recipient_party_id,
            token_name=request.token_name,
            amount=request.amount,
        )
    )
    return CreateTransferResponse(
        success=True,
        requires_acceptance=True,
        proposal_id=result.proposal_id,
        transaction=TransactionItem(
            transaction_hash=result.proposal_id, status="pending_acceptance"
        ),
        message=(
            "Transfer proposal created successfully. "
            "Recipient needs to accept the transfer."
        ),
        acceptance_url=ACCEPTANCE_URL,
    )


@router.get(
    "/proposals",
    response_model=PendingProposalsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="List pending transfer proposals",
    description="List the transfer proposals awaiting a decision by the given party.",
)
async def list_pending_proposals(
    party_id: Optional[str] = Query(None, alias="partyId", description="Recipient party"),
    use_case: GetPendingProposalsUseCase = Depends(get_pending_proposals_use_case),
) -> JSONResponse:
    """List pending transfer proposals addressed to a party."""
    result = await use_case.execute(GetPendingProposalsQuery(party_id=party_id))
    return build_success(result.proposals, result.party_id).to_response()


@router.post(
    "/accept",
    response_model=AcceptProposalResponse,
    response_model_by_alias=True,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": StaleProposalResponse},
        500: {"model": ErrorResponse},
    },
    summary="Accept a transfer proposal",
    description="Exercise AcceptTransfer on a pending proposal as its recipient.",
)
async def accept_proposal(
    request: ProposalDecisionRequest,
    use_case: AcceptTransferProposalUseCase = Depends(get_accept_transfer_use_case),
):
    """Accept a pending transfer proposal."""
    result = await use_case.execute(
        ProposalDecisionCommand(
            proposal_id=request.proposal_id,
            recipient_party_id=request.recipient_party_id,
        )
    )
    if result.is_stale:
        body = StaleProposalResponse(
            message=result.message,
            recommendation=STALE_ACCEPT_RECOMMENDATION,
        )
        return JSONResponse(
            status_code=HTTP_422,
            content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
        )

    return AcceptProposalResponse(
        success=True,
        transaction=TransactionItem(transaction_hash=result.transaction_id, status="confirmed"),
        message=result.message,
        method=result.method,
    )


@router.post(
    "/reject",
    response_model=RejectProposalResponse,
    response_model_by_alias=True,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": StaleProposalResponse},
        500: {"model": ErrorResponse},
    },
    summary="Reject a transfer proposal",
    description="Exercise RejectTransfer on a pending proposal; the tokens return to the sender.",
)
async def reject_proposal(
    request: ProposalDecisionRequest,
    use_case: RejectTransferProposalUseCase = Depends(get_reject_transfer_use_case),
) -> RejectProposalResponse:
    """Reject a pending transfer proposal."""
    result = await use_case.execute(
        ProposalDecisionCommand(
            proposal_id=request.proposal_id,
            recipient_party_id=request.recipient_party_id,
        )
    )
    return RejectProposalResponse(
        success=True,
        transaction=TransactionItem(transaction_hash=result.transaction_id, status="rejected"),
        message=result.message,
        tokens_returned=True,
    )
