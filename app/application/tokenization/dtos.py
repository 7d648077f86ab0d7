"""
Data Transfer Objects for the tokenization application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.tokenization.entities import ProposalView


@dataclass(frozen=True)
class GetPendingProposalsQuery:
    """Input DTO for listing pending transfer proposals.

    Attributes:
        party_id: Recipient party. May be None or blank when the caller
            omitted it; the use case rejects that before touching the ledger.
    """

    party_id: Optional[str]


@dataclass(frozen=True)
class PendingProposalsResult:
    """Output DTO for the pending proposal listing.

    Attributes:
        party_id: The party the proposals were listed for.
        proposals: Views in ledger order.
    """

    party_id: str
    proposals: list[ProposalView]


@dataclass(frozen=True)
class ProposalDecisionCommand:
    """Input DTO for accepting or rejecting a transfer proposal.

    Attributes:
        proposal_id: Contract id of the proposal (or legacy proposal id).
        recipient_party_id: Party the proposal is addressed to.
    """

    proposal_id: str
    recipient_party_id: str


@dataclass(frozen=True)
class ProposalDecisionResult:
    """Output DTO for an accept/reject decision.

    Attributes:
        transaction_id: Ledger transaction or cleanup id.
        method: How the decision was carried out.
        message: Human-readable outcome.
        is_stale: True when the proposal no longer exists on the ledger.
    """

    transaction_id: str
    method: str
    message: str
    is_stale: bool = False


@dataclass(frozen=True)
class CreateTransferCommand:
    """Input DTO for opening a transfer proposal.

    Attributes:
        sender_party_id: Owner of the holding the tokens come from.
        recipient_party_id: Party the proposal is addressed to.
        token_name: Token to transfer.
        amount: Decimal amount as text.
    """

    sender_party_id: str
    recipient_party_id: str
    token_name: str
    amount: str


@dataclass(frozen=True)
class TransferProposalCreated:
    """Output DTO for a newly opened transfer proposal."""

    proposal_id: str
    is_legacy: bool = False
