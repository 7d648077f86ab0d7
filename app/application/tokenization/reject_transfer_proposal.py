"""
Use case: Reject a pending transfer proposal.

Input: ProposalDecisionCommand (proposal_id, recipient_party_id)
Output: ProposalDecisionResult
Side effects: Exercises RejectTransfer on the ledger (the held tokens
    return to the sender), or settles a legacy proposal as rejected.
Failure cases: ValidationError, StaleProposalError, LedgerUnavailableError,
    LedgerRequestError, LegacyProposalNotPendingError.
"""

import logging

from app.application.tokenization.dtos import (
    ProposalDecisionCommand,
    ProposalDecisionResult,
)
from app.domain.tokenization.errors import ValidationError
from app.domain.tokenization.ports import LedgerQueryPort

logger = logging.getLogger(__name__)


class RejectTransferProposalUseCase:
    """Orchestrates rejection of a transfer proposal by its recipient."""

    def __init__(self, ledger_port: LedgerQueryPort) -> None:
        self._ledger_port = ledger_port

    async def execute(self, command: ProposalDecisionCommand) -> ProposalDecisionResult:
        """Run the rejection.

        Raises:
            ValidationError: If either identifier is blank.
            StaleProposalError: If the proposal contract no longer exists.
        """
        if not command.proposal_id.strip():
            raise ValidationError("Proposal ID is required")
        if not command.recipient_party_id.strip():
            raise ValidationError("Recipient party ID is required")

        logger.info(
            "Rejecting transfer proposal=%s for party=%s",
            command.proposal_id,
            command.recipient_party_id,
        )

        result = await self._ledger_port.reject_transfer_proposal(
            party=command.recipient_party_id,
            proposal_id=command.proposal_id,
        )

        return ProposalDecisionResult(
            transaction_id=result.transaction_id,
            method=result.method,
            message=result.message,
        )
