"""
Domain entities for the tokenization bounded context.

Entities represent ledger records and the views built from them.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


PENDING_STATUS = "pending"


class LegacyProposalStatus(Enum):
    """Lifecycle of an off-ledger (legacy) transfer proposal."""

    PENDING = "pending"
    ACCEPTED_WITH_LIMITATIONS = "accepted_with_limitations"
    REJECTED = "rejected"


@dataclass(frozen=True)
class TransferProposalPayload:
    """Payload of a TransferProposal contract as stored on the ledger.

    All fields are ledger-defined and immutable once the contract exists.
    Amounts stay strings: the ledger encodes Decimals as text.
    """

    current_owner: str
    new_owner: str
    token_name: str
    transfer_amount: str
    issuer: str
    holding_id: Optional[str] = None
    is_legacy: bool = False


@dataclass(frozen=True)
class RawLedgerContract:
    """A single TransferProposal contract returned by a ledger query."""

    contract_id: str
    proposal: TransferProposalPayload


@dataclass(frozen=True)
class ProposalView:
    """UI-facing projection of a pending transfer proposal.

    The shape is an external wire contract. ``id``, ``proposal_id`` and
    ``contract_address`` all carry the source contract id, and
    ``created_at`` is the time of the query, not of contract creation:
    the ledger does not expose creation time at this boundary.
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


@dataclass
class LegacyProposal:
    """A simulated transfer proposal kept off-ledger.

    Holdings created under template generations that predate the
    proposal workflow cannot carry an on-ledger TransferProposal, so
    their pending transfers are recorded here until accepted or rejected.
    """

    proposal_id: str
    from_party_id: str
    to_party_id: str
    token_name: str
    amount: str
    issuer_party_id: str
    holding_contract_id: str
    created_at: datetime
    status: LegacyProposalStatus = LegacyProposalStatus.PENDING
    accepted_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None

    def to_raw_contract(self) -> RawLedgerContract:
        """Present this proposal the way a ledger query would."""
        return RawLedgerContract(
            contract_id=self.proposal_id,
            proposal=TransferProposalPayload(
                current_owner=self.from_party_id,
                new_owner=self.to_party_id,
                token_name=self.token_name,
                transfer_amount=self.amount,
                issuer=self.issuer_party_id,
                holding_id=self.holding_contract_id,
                is_legacy=True,
            ),
        )


@dataclass(frozen=True)
class ExerciseResult:
    """Outcome of exercising a choice on a transfer proposal.

    Attributes:
        transaction_id: Ledger transaction (or cleanup) identifier.
        method: How the request was resolved, e.g. ``proposal_acceptance``
            or ``stale_proposal_cleanup``.
        message: Human-readable outcome.
    """

    transaction_id: str
    method: str
    message: str


@dataclass(frozen=True)
class TokenHolding:
    """A TokenHolding contract owned by a party.

    ``template_id`` tells which template generation the holding was
    created under; only generations that know ``ProposeTransfer`` can
    open an on-ledger proposal.
    """

    contract_id: str
    template_id: str
    owner: str
    issuer: str
    token_name: str
    amount: str


@dataclass(frozen=True)
class ProposalCreation:
    """Outcome of opening a transfer proposal.

    Attributes:
        proposal_id: Contract id of the new TransferProposal, or the id of
            the legacy proposal recorded off-ledger.
        is_legacy: True when the holding's template generation forced the
            off-ledger path.
    """

    proposal_id: str
    is_legacy: bool = False
