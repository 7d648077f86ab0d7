"""
Use case: Accept a pending transfer proposal.

Input: ProposalDecisionCommand (proposal_id, recipient_party_id)
Output: ProposalDecisionResult
Side effects: Exercises AcceptTransfer on the ledger, or settles a
    legacy proposal in the legacy store.
Failure cases: ValidationError, LedgerUnavailableError, LedgerRequestError,
    LegacyProposalNotPendingError.
"""

import logging

from app.application.tokenization.dtos import (
    ProposalDecisionCommand,
    ProposalDecisionResult,
)
from app.domain.tokenization.errors import ValidationError
from app.domain.tokenization.ports import LedgerQueryPort

logger = logging.getLogger(__name__)

STALE_PROPOSAL_METHOD = "stale_proposal_cleanup"


class AcceptTransferProposalUseCase:
    """Orchestrates acceptance of a transfer proposal by its recipient.

    A proposal whose contract has disappeared from the ledger is not an
    error: the ledger port reports it as a stale cleanup and the result
    is flagged so the interface layer can answer with 422.
    """

    def __init__(self, ledger_port: LedgerQueryPort) -> None:
        self._ledger_port = ledger_port

    async def execute(self, command: ProposalDecisionCommand) -> ProposalDecisionResult:
        """Run the acceptance.

        Args:
            command: Proposal id and the recipient party acting on it.

        Returns:
            The decision outcome.

        Raises:
            ValidationError: If either identifier is blank.
        """
        if not command.proposal_id.strip():
            raise ValidationError("Proposal ID is required")
        if not command.recipient_party_id.strip():
            raise ValidationError("Recipient party ID is required")

        logger.info(
            "Accepting transfer proposal=%s for party=%s",
            command.proposal_id,
            command.recipient_party_id,
        )

        result = await self._ledger_port.accept_transfer_proposal(
            party=command.recipient_party_id,
            proposal_id=command.proposal_id,
        )

        return ProposalDecisionResult(
            transaction_id=result.transaction_id,
            method=result.method,
            message=result.message,
            is_stale=result.method == STALE_PROPOSAL_METHOD,
        )
