"""
Debug router.

Read-only inspection of in-process state. Mounted only when
``settings.enable_debug_routes`` is set.
"""

import logging

from fastapi import APIRouter, Depends

from app.domain.tokenization.ports import LegacyProposalRepository
from app.interfaces.tokenization.dependencies import get_legacy_proposal_repo
from app.interfaces.tokenization.schemas import (
    LegacyProposalItem,
    LegacyProposalsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/debug", tags=["debug"])


@router.get(
    "/legacy-proposals",
    response_model=LegacyProposalsResponse,
    response_model_by_alias=True,
    summary="Inspect legacy proposals",
    description="List every legacy (off-ledger) transfer proposal held by this process.",
)
def list_legacy_proposals(
    repo: LegacyProposalRepository = Depends(get_legacy_proposal_repo),
) -> LegacyProposalsResponse:
    proposals = repo.list_all()
    logger.debug("Legacy proposal store holds %d proposals", len(proposals))
    return LegacyProposalsResponse(
        success=True,
        proposals=[
            LegacyProposalItem(
                proposal_id=p.proposal_id,
                from_party_id=p.from_party_id,
                to_party_id=p.to_party_id,
                token_name=p.token_name,
                amount=p.amount,
                issuer_party_id=p.issuer_party_id,
                holding_contract_id=p.holding_contract_id,
                status=p.status.value,
                created_at=p.created_at,
                accepted_at=p.accepted_at,
                rejected_at=p.rejected_at,
            )
            for p in proposals
        ],
        store_size=len(proposals),
    )
