"""
Adapter: In-memory legacy proposal store.

Implements LegacyProposalRepository.
One instance is owned by the application and lives as long as it does;
nothing is persisted across restarts.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from app.domain.tokenization.entities import LegacyProposal, LegacyProposalStatus
from app.domain.tokenization.errors import (
    LegacyProposalNotPendingError,
    ProposalNotFoundError,
)
from app.domain.tokenization.ports import LegacyProposalRepository

logger = logging.getLogger(__name__)


class InMemoryLegacyProposalRepository(LegacyProposalRepository):
    """Dict-backed legacy proposal store guarded by a lock.

    Sync route handlers run in a threadpool, so every access takes the lock.
    """

    def __init__(self) -> None:
        self._proposals: dict[str, LegacyProposal] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._proposals)

    def add(self, proposal: LegacyProposal) -> None:
        with self._lock:
            self._proposals[proposal.proposal_id] = proposal
        logger.info("Stored legacy proposal=%s", proposal.proposal_id)

    def get(self, proposal_id: str) -> Optional[LegacyProposal]:
        with self._lock:
            return self._proposals.get(proposal_id)

    def list_all(self) -> list[LegacyProposal]:
        with self._lock:
            return list(self._proposals.values())

    def list_pending_for(self, party: str) -> list[LegacyProposal]:
        with self._lock:
            return [
                p
                for p in self._proposals.values()
                if p.to_party_id == party and p.status is LegacyProposalStatus.PENDING
            ]

    def mark_accepted(self, proposal_id: str) -> LegacyProposal:
        with self._lock:
            proposal = self._pending(proposal_id)
            proposal.status = LegacyProposalStatus.ACCEPTED_WITH_LIMITATIONS
            proposal.accepted_at = datetime.now(timezone.utc)
            return proposal

    def mark_rejected(self, proposal_id: str) -> LegacyProposal:
        with self._lock:
            proposal = self._pending(proposal_id)
            proposal.status = LegacyProposalStatus.REJECTED
            proposal.rejected_at = datetime.now(timezone.utc)
            return proposal

    def _pending(self, proposal_id: str) -> LegacyProposal:
        # Caller holds the lock.
        proposal = self._proposals.get(proposal_id)
        if proposal is None:
            raise ProposalNotFoundError(proposal_id)
        if proposal.status is not LegacyProposalStatus.PENDING:
            raise LegacyProposalNotPendingError(proposal_id, proposal.status.value)
        return proposal
