"""
Test data builders and an in-memory ledger port.
"""

from datetime import datetime, timezone
from typing import Optional

from app.domain.tokenization.entities import (
    ExerciseResult,
    LegacyProposal,
    ProposalCreation,
    RawLedgerContract,
    TokenHolding,
    TransferProposalPayload,
)
from app.domain.tokenization.ports import LedgerQueryPort


def make_contract(
    contract_id: str = "C1",
    current_owner: str = "Alice",
    new_owner: str = "Bob",
    token_name: str = "USD",
    transfer_amount: str = "5.0",
    issuer: str = "Issuer1",
) -> RawLedgerContract:
    """Build a raw TransferProposal contract."""
    return RawLedgerContract(
        contract_id=contract_id,
        proposal=TransferProposalPayload(
            current_owner=current_owner,
            new_owner=new_owner,
            token_name=token_name,
            transfer_amount=transfer_amount,
            issuer=issuer,
        ),
    )


def make_legacy_proposal(
    proposal_id: str = "legacy-proposal-1",
    to_party_id: str = "Bob",
) -> LegacyProposal:
    """Build a pending legacy proposal addressed to ``to_party_id``."""
    return LegacyProposal(
        proposal_id=proposal_id,
        from_party_id="Alice",
        to_party_id=to_party_id,
        token_name="GBP",
        amount="2.5",
        issuer_party_id="Issuer1",
        holding_contract_id="H1",
        created_at=datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc),
    )


def make_holding(
    contract_id: str = "H1",
    token_name: str = "USD",
    amount: str = "10.0",
    template_id: str = "pkg-new:CIP0056Token:TokenHolding",
) -> TokenHolding:
    """Build a holding owned by Alice."""
    return TokenHolding(
        contract_id=contract_id,
        template_id=template_id,
        owner="Alice",
        issuer="Issuer1",
        token_name=token_name,
        amount=amount,
    )


class FakeLedgerPort(LedgerQueryPort):
    """In-memory LedgerQueryPort recording every call it receives."""

    def __init__(
        self,
        contracts: Optional[list[RawLedgerContract]] = None,
        error: Optional[BaseException] = None,
        accept_result: Optional[ExerciseResult] = None,
        reject_result: Optional[ExerciseResult] = None,
        available: bool = True,
        holdings: Optional[list[TokenHolding]] = None,
    ) -> None:
        self.contracts = list(contracts or [])
        self.holdings = list(holdings or [])
        self.creation = ProposalCreation(proposal_id="P1")
        self.error = error
        self.accept_result = accept_result or ExerciseResult(
            transaction_id="tx-accept",
            method="proposal_acceptance",
            message="Transfer proposal accepted successfully",
        )
        self.reject_result = reject_result or ExerciseResult(
            transaction_id="tx-reject",
            method="proposal_rejection",
            message="Transfer proposal rejected successfully. Tokens have been returned to sender.",
        )
        self.available = available
        self.calls: list[tuple[str, ...]] = []

    async def get_pending_transfer_proposals(self, party: str) -> list[RawLedgerContract]:
        self.calls.append(("query", party))
        if self.error is not None:
            raise self.error
        return list(self.contracts)

    async def accept_transfer_proposal(self, party: str, proposal_id: str) -> ExerciseResult:
        self.calls.append(("accept", party, proposal_id))
        if self.error is not None:
            raise self.error
        return self.accept_result

    async def reject_transfer_proposal(self, party: str, proposal_id: str) -> ExerciseResult:
        self.calls.append(("reject", party, proposal_id))
        if self.error is not None:
            raise self.error
        return self.reject_result

    async def get_holdings(self, party: str) -> list[TokenHolding]:
        self.calls.append(("holdings", party))
        if self.error is not None:
            raise self.error
        return list(self.holdings)

    async def propose_transfer(
        self, holding: TokenHolding, recipient: str, amount: str
    ) -> ProposalCreation:
        self.calls.append(("propose", holding.contract_id, recipient, amount))
        return self.creation

    async def is_available(self) -> bool:
        return self.available
