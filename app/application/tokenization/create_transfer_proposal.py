"""
Use case: Open a transfer proposal from a sender to a recipient.

Input: CreateTransferCommand (sender, recipient, token name, amount)
Output: TransferProposalCreated
Side effects: Exercises ProposeTransfer on the sender's holding, or
    records a legacy proposal for holdings on older templates.
Failure cases: ValidationError, InsufficientBalanceError,
    LedgerUnavailableError, LedgerRequestError, ProposalExerciseError.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from app.application.tokenization.dtos import (
    CreateTransferCommand,
    TransferProposalCreated,
)
from app.domain.tokenization.entities import TokenHolding
from app.domain.tokenization.errors import InsufficientBalanceError, ValidationError
from app.domain.tokenization.ports import LedgerQueryPort

logger = logging.getLogger(__name__)


def _parse_amount(raw: str) -> Decimal:
    try:
        amount = Decimal(raw.strip())
    except InvalidOperation:
        amount = None
    if amount is None or not amount.is_finite() or amount <= 0:
        raise ValidationError("Amount must be a positive number")
    return amount


def _select_holding(
    holdings: list[TokenHolding], token_name: str, amount: Decimal
) -> Optional[TokenHolding]:
    for holding in holdings:
        if holding.token_name == token_name and Decimal(holding.amount) >= amount:
            return holding
    return None


class CreateTransferProposalUseCase:
    """Orchestrates the sender side of the proposal workflow.

    Every transfer needs the recipient's acceptance: the result is always
    a pending proposal, never a settled transfer.
    """

    def __init__(self, ledger_port: LedgerQueryPort) -> None:
        self._ledger_port = ledger_port

    async def execute(self, command: CreateTransferCommand) -> TransferProposalCreated:
        """Open the proposal.

        Args:
            command: Sender, recipient, token and amount.

        Returns:
            The new proposal id and whether it was kept off-ledger.

        Raises:
            ValidationError: If a field is blank or the amount is not positive.
            InsufficientBalanceError: If no holding of the token covers the amount.
        """
        if not command.sender_party_id.strip():
            raise ValidationError("Sender Party ID is required")
        if not command.recipient_party_id.strip():
            raise ValidationError("Recipient Party ID is required")
        if not command.token_name.strip():
            raise ValidationError("Token name is required")
        amount = _parse_amount(command.amount)

        holdings = await self._ledger_port.get_holdings(command.sender_party_id)
        holding = _select_holding(holdings, command.token_name, amount)
        if holding is None:
            available = sum(
                (Decimal(h.amount) for h in holdings if h.token_name == command.token_name),
                Decimal(0),
            )
            logger.info(
                "Insufficient %s balance for party=%s: available=%s requested=%s",
                command.token_name,
                command.sender_party_id,
                available,
                amount,
            )
            raise InsufficientBalanceError(command.token_name, command.amount, str(available))

        logger.info(
            "Proposing %s %s from party=%s to party=%s",
            command.amount,
            command.token_name,
            command.sender_party_id,
            command.recipient_party_id,
        )
        created = await self._ledger_port.propose_transfer(
            holding=holding,
            recipient=command.recipient_party_id,
            amount=command.amount.strip(),
        )
        return TransferProposalCreated(proposal_id=created.proposal_id, is_legacy=created.is_legacy)
