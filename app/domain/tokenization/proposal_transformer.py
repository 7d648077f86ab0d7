"""
Proposal transformer.

Maps raw TransferProposal contracts into the UI-facing ProposalView.
Pure and total over well-formed input: one view per contract, in input
order, no filtering and no deduplication.

The ``created_at`` timestamp is sampled once per call, so every view in
one response shares it. It reflects query time; contract creation time is
not available from the ledger query.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

from app.domain.tokenization.entities import (
    PENDING_STATUS,
    ProposalView,
    RawLedgerContract,
)


def to_proposal_view(contract: RawLedgerContract, created_at: datetime) -> ProposalView:
    """Build the view for a single contract."""
    payload = contract.proposal
    return ProposalView(
        id=contract.contract_id,
        proposal_id=contract.contract_id,
        from_party_id=payload.current_owner,
        to_party_id=payload.new_owner,
        token_name=payload.token_name,
        amount=payload.transfer_amount,
        issuer=payload.issuer,
        status=PENDING_STATUS,
        created_at=created_at,
        contract_address=contract.contract_id,
    )


def transform_proposals(
    contracts: Sequence[RawLedgerContract],
    now: Optional[datetime] = None,
) -> list[ProposalView]:
    """Transform raw ledger contracts into proposal views.

    Args:
        contracts: Contracts as returned by the ledger query.
        now: Timestamp to stamp on every view. Defaults to the current
            UTC time, sampled once.

    Returns:
        One ProposalView per contract, in the same order.
    """
    created_at = now or datetime.now(timezone.utc)
    return [to_proposal_view(contract, created_at) for contract in contracts]
