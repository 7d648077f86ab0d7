"""
Pydantic schemas for tokenization API request/response validation.

These schemas enforce input validation and define the API contract.
Field names are snake_case in Python and camelCase on the wire; the
camelCase shape is what UI clients already consume.
No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PARTY_ID_DESCRIPTION = "Ledger party identifier, e.g. alice::1220..."


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProposalItem(CamelModel):
    """A single pending transfer proposal.

    ``id``, ``proposal_id`` and ``contract_address`` all hold the
    contract id; ``created_at`` is the query time.
    """

    id: str
    proposal_id: str
    from_party_id: str
    to_party_id: str
    token_name: str
    amount: str
    issuer: str
    status: str
    created_at: datetime
    contract_address: str


class PendingProposalsResponse(CamelModel):
    """Response schema for the pending proposal listing."""

    success: bool
    proposals: list[ProposalItem]
    party_id: str


class ProposalDecisionRequest(CamelModel):
    """Request schema for accepting or rejecting a proposal.

    Attributes:
        proposal_id: Contract id of the proposal to act on.
        recipient_party_id: Party the proposal is addressed to.
    """

    proposal_id: str = Field(..., min_length=1, description="Proposal contract id")
    recipient_party_id: str = Field(..., min_length=1, description=PARTY_ID_DESCRIPTION)


class CreateTransferRequest(CamelModel):
    """Request schema for opening a transfer proposal."""

    sender_party_id: str = Field(..., min_length=1, description=PARTY_ID_DESCRIPTION)
    recipient_party_id: str = Field(..., min_length=1, description=PARTY_ID_DESCRIPTION)
    token_name: str = Field(..., min_length=1, description="Token to transfer")
    amount: str = Field(..., min_length=1, description="Decimal amount, e.g. \"12.5\"")


class TransactionItem(CamelModel):
    """Ledger transaction reference returned after a decision."""

    transaction_hash: str
    status: str


class AcceptProposalResponse(CamelModel):
    """Response schema for a successful acceptance."""

    success: bool
    transaction: TransactionItem
    message: str
    method: str


class CreateTransferResponse(CamelModel):
    """Response schema for a newly opened proposal awaiting acceptance."""

    success: bool
    requires_acceptance: bool
    proposal_id: str
    transaction: TransactionItem
    message: str
    acceptance_url: str


class RejectProposalResponse(CamelModel):
    """Response schema for a successful rejection."""

    success: bool
    transaction: TransactionItem
    message: str
    tokens_returned: bool


class StaleProposalResponse(CamelModel):
    """Response schema when the proposal no longer exists on the ledger."""

    success: bool = False
    is_stale_proposal: bool = True
    message: Optional[str] = None
    error: Optional[str] = None
    recommendation: str


class LegacyProposalItem(CamelModel):
    """A legacy proposal as exposed by the debug endpoint."""

    proposal_id: str
    from_party_id: str
    to_party_id: str
    token_name: str
    amount: str
    issuer_party_id: str
    holding_contract_id: str
    status: str
    created_at: datetime
    accepted_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None


class LegacyProposalsResponse(CamelModel):
    """Response schema for the legacy proposal debug endpoint."""

    success: bool
    proposals: list[LegacyProposalItem]
    store_size: int


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str


class HealthResponse(CamelModel):
    """Health check response schema."""

    status: str
    version: str
    ledger_available: bool
