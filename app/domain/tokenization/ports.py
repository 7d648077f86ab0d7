"""
Port interfaces (ABCs) for the tokenization bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.tokenization.entities import (
    ExerciseResult,
    LegacyProposal,
    ProposalCreation,
    RawLedgerContract,
    TokenHolding,
)


class LedgerQueryPort(ABC):
    """Port for reading and acting on TransferProposal contracts."""

    @abstractmethod
    async def get_pending_transfer_proposals(
        self, party: str
    ) -> list[RawLedgerContract]:
        """Return the pending transfer proposals addressed to a party.

        Args:
            party: Ledger party identifier of the proposal recipient.

        Returns:
            Raw contracts in ledger order.

        Raises:
            LedgerUnavailableError: If the ledger cannot be reached.
            LedgerRequestError: If the ledger rejects the query.
        """
        raise NotImplementedError

    @abstractmethod
    async def accept_transfer_proposal(
        self, party: str, proposal_id: str
    ) -> ExerciseResult:
        """Exercise AcceptTransfer on a proposal as the recipient party."""
        raise NotImplementedError

    @abstractmethod
    async def reject_transfer_proposal(
        self, party: str, proposal_id: str
    ) -> ExerciseResult:
        """Exercise RejectTransfer on a proposal as the recipient party."""
        raise NotImplementedError

    @abstractmethod
    async def get_holdings(self, party: str) -> list[TokenHolding]:
        """Return the token holdings owned by a party, across template generations."""
        raise NotImplementedError

    @abstractmethod
    async def propose_transfer(
        self, holding: TokenHolding, recipient: str, amount: str
    ) -> ProposalCreation:
        """Open a transfer proposal from a holding's owner to a recipient.

        Holdings on template generations without ``ProposeTransfer`` are
        recorded as legacy proposals instead.

        Raises:
            LedgerUnavailableError: If the ledger cannot be reached.
            LedgerRequestError: If the ledger refuses the holding contract.
            ProposalExerciseError: If no template generation takes the choice.
        """
        raise NotImplementedError

    @abstractmethod
    async def is_available(self) -> bool:
        """Return True if the ledger answers a trivial query."""
        raise NotImplementedError


class LegacyProposalRepository(ABC):
    """Port for storing off-ledger (legacy) transfer proposals."""

    @abstractmethod
    def add(self, proposal: LegacyProposal) -> None:
        """Store a new legacy proposal, replacing any with the same id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, proposal_id: str) -> Optional[LegacyProposal]:
        """Return a legacy proposal by id, or None if unknown."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[LegacyProposal]:
        """Return every stored proposal in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def list_pending_for(self, party: str) -> list[LegacyProposal]:
        """Return pending proposals addressed to a party, in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def mark_accepted(self, proposal_id: str) -> LegacyProposal:
        """Settle a pending proposal as accepted and return it."""
        raise NotImplementedError

    @abstractmethod
    def mark_rejected(self, proposal_id: str) -> LegacyProposal:
        """Settle a pending proposal as rejected and return it."""
        raise NotImplementedError
