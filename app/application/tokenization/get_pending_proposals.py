"""
Use case: List pending transfer proposals addressed to a party.

Input: GetPendingProposalsQuery (party_id)
Output: PendingProposalsResult
Side effects: None (read-only query).
Failure cases: ValidationError, LedgerUnavailableError, LedgerRequestError.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from app.application.tokenization.dtos import (
    GetPendingProposalsQuery,
    PendingProposalsResult,
)
from app.domain.tokenization.errors import ValidationError
from app.domain.tokenization.ports import LedgerQueryPort
from app.domain.tokenization.proposal_transformer import transform_proposals

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GetPendingProposalsUseCase:
    """Orchestrates the pending proposal listing.

    Rejects a missing party before any ledger call, queries the ledger
    port once and maps every contract into a ProposalView. Failures from
    the port propagate unchanged; there are no retries and no partial
    results.
    """

    def __init__(
        self,
        ledger_port: LedgerQueryPort,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ledger_port = ledger_port
        self._clock = clock

    async def execute(self, query: GetPendingProposalsQuery) -> PendingProposalsResult:
        """Run the pending proposal listing.

        Args:
            query: The listing request carrying the recipient party.

        Returns:
            The party and its pending proposals in ledger order.

        Raises:
            ValidationError: If the party id is missing or blank.
        """
        party_id = query.party_id
        if not party_id or not party_id.strip():
            raise ValidationError()

        logger.info("Getting pending transfer proposals for party=%s", party_id)

        contracts = await self._ledger_port.get_pending_transfer_proposals(party_id)
        proposals = transform_proposals(contracts, now=self._clock())

        logger.info("Found %d pending proposals for party=%s", len(proposals), party_id)

        return PendingProposalsResult(party_id=party_id, proposals=proposals)
