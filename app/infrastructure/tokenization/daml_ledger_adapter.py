"""
Adapter: DAML HTTP JSON API.

Implements LedgerQueryPort against the ledger's JSON API (v1).
Queries and exercises TransferProposal contracts across every known
template generation, opens proposals from TokenHolding contracts, and
keeps legacy proposals off-ledger for holdings whose template predates
``ProposeTransfer``.
No retries: a failed request surfaces as a domain error immediately.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional, Sequence
from uuid import uuid4

import httpx

from app.domain.tokenization.entities import (
    ExerciseResult,
    LegacyProposal,
    ProposalCreation,
    RawLedgerContract,
    TokenHolding,
    TransferProposalPayload,
)
from app.domain.tokenization.errors import (
    LedgerRequestError,
    LedgerUnavailableError,
    ProposalExerciseError,
    StaleProposalError,
)
from app.domain.tokenization.ports import LedgerQueryPort, LegacyProposalRepository
from app.infrastructure.tokenization.ledger_auth import LedgerTokenFactory

logger = logging.getLogger(__name__)

ACCEPT_CHOICE = "AcceptTransfer"
REJECT_CHOICE = "RejectTransfer"
PROPOSE_CHOICE = "ProposeTransfer"


def _payload_from_json(payload: dict[str, Any]) -> TransferProposalPayload:
    return TransferProposalPayload(
        current_owner=payload["currentOwner"],
        new_owner=payload["newOwner"],
        token_name=payload["tokenName"],
        transfer_amount=payload["transferAmount"],
        issuer=payload["issuer"],
        holding_id=payload.get("holdingId"),
    )


def _holding_from_json(item: dict[str, Any]) -> TokenHolding:
    payload = item["payload"]
    return TokenHolding(
        contract_id=item["contractId"],
        template_id=item["templateId"],
        owner=payload["owner"],
        issuer=payload["issuer"],
        token_name=payload["tokenName"],
        amount=payload["amount"],
    )


class DamlLedgerAdapter(LedgerQueryPort):
    """Concrete adapter for the DAML HTTP JSON API.

    Args:
        client: Async HTTP client whose base URL points at the JSON API.
            Owned by the caller; the adapter never closes it.
        token_factory: Mints the per-party bearer token for each request.
        proposal_template_ids: TransferProposal template ids, newest first.
        token_metadata_template_id: Template used by the availability probe.
        admin_party: Party the availability probe runs as.
        legacy_repo: Optional store of off-ledger proposals.
        holding_template_ids: TokenHolding templates that offer
            ``ProposeTransfer``, newest first.
        legacy_holding_template_ids: TokenHolding templates without it.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token_factory: LedgerTokenFactory,
        proposal_template_ids: Sequence[str],
        token_metadata_template_id: str,
        admin_party: str = "admin",
        legacy_repo: Optional[LegacyProposalRepository] = None,
        holding_template_ids: Sequence[str] = (),
        legacy_holding_template_ids: Sequence[str] = (),
    ) -> None:
        self._client = client
        self._token_factory = token_factory
        self._proposal_template_ids = list(proposal_template_ids)
        self._token_metadata_template_id = token_metadata_template_id
        self._admin_party = admin_party
        self._legacy_repo = legacy_repo
        self._holding_template_ids = list(holding_template_ids)
        self._legacy_holding_template_ids = list(legacy_holding_template_ids)

    async def _post(self, endpoint: str, body: dict[str, Any], party: str) -> dict[str, Any]:
        """POST to the JSON API as a party and return the decoded body."""
        headers = {"Authorization": f"Bearer {self._token_factory.token_for(party)}"}
        try:
            response = await self._client.post(f"/v1/{endpoint}", json=body, headers=headers)
        except httpx.TimeoutException as exc:
            raise LedgerUnavailableError(f"request to /v1/{endpoint} timed out") from exc
        except httpx.TransportError as exc:
            raise LedgerUnavailableError(str(exc) or type(exc).__name__) from exc

        if response.is_error:
            raise LedgerRequestError(response.status_code, response.text)
        try:
            return response.json()
        except ValueError as exc:
            raise LedgerRequestError(
                response.status_code, f"invalid JSON in response: {response.text[:200]}"
            ) from exc

    async def get_pending_transfer_proposals(
        self, party: str
    ) -> list[RawLedgerContract]:
        """Return on-ledger proposals for the party, then pending legacy ones."""
        body = {
            "templateIds": self._proposal_template_ids,
            "query": {"newOwner": party},
        }
        data = await self._post("query", body, party)

        contracts = [
            RawLedgerContract(
                contract_id=item["contractId"],
                proposal=_payload_from_json(item["payload"]),
            )
            for item in data.get("result") or []
        ]
        logger.debug("Ledger returned %d transfer proposals for party=%s", len(contracts), party)

        if self._legacy_repo is not None:
            legacy = self._legacy_repo.list_pending_for(party)
            contracts.extend(p.to_raw_contract() for p in legacy)
            logger.debug("Added %d legacy proposals for party=%s", len(legacy), party)

        return contracts

    async def _exercise(
        self,
        choice: str,
        party: str,
        contract_id: str,
        template_ids: Sequence[str],
        argument: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Exercise a choice, trying each template generation in turn.

        A CONTRACT_NOT_FOUND answer is re-raised straight away; other
        ledger rejections move on to the next template id.
        """
        last_error: Optional[LedgerRequestError] = None
        for template_id in template_ids:
            body = {
                "templateId": template_id,
                "contractId": contract_id,
                "choice": choice,
                "argument": argument or {},
            }
            try:
                data = await self._post("exercise", body, party)
            except LedgerRequestError as exc:
                if exc.contract_not_found:
                    raise
                logger.info("Template %s refused %s: %s", template_id, choice, exc.message)
                last_error = exc
                continue
            return data.get("result") or {}

        reason = last_error.message if last_error else "no template ids configured"
        raise ProposalExerciseError(choice, contract_id, reason)

    async def _exercise_proposal(
        self, choice: str, party: str, proposal_id: str
    ) -> dict[str, Any]:
        try:
            return await self._exercise(choice, party, proposal_id, self._proposal_template_ids)
        except LedgerRequestError as exc:
            raise StaleProposalError(proposal_id) from exc

    async def get_holdings(self, party: str) -> list[TokenHolding]:
        """Return holdings owned by the party under every known template."""
        body = {
            "templateIds": self._holding_template_ids + self._legacy_holding_template_ids,
            "query": {"owner": party},
        }
        data = await self._post("query", body, party)
        holdings = [_holding_from_json(item) for item in data.get("result") or []]
        logger.debug("Ledger returned %d holdings for party=%s", len(holdings), party)
        return holdings

    async def propose_transfer(
        self, holding: TokenHolding, recipient: str, amount: str
    ) -> ProposalCreation:
        if holding.template_id not in self._holding_template_ids:
            return self._record_legacy_proposal(holding, recipient, amount)

        # The holding's own generation first, then the others newest first.
        template_ids = [holding.template_id] + [
            t for t in self._holding_template_ids if t != holding.template_id
        ]
        result = await self._exercise(
            PROPOSE_CHOICE,
            holding.owner,
            holding.contract_id,
            template_ids,
            {"newOwner": recipient, "transferAmount": amount},
        )
        proposal_id = result.get("exerciseResult")
        if not proposal_id:
            raise LedgerRequestError(200, f"{PROPOSE_CHOICE} returned no proposal contract id")
        logger.info(
            "Transfer proposal=%s opened from holding=%s to party=%s",
            proposal_id,
            holding.contract_id,
            recipient,
        )
        return ProposalCreation(proposal_id=proposal_id)

    def _record_legacy_proposal(
        self, holding: TokenHolding, recipient: str, amount: str
    ) -> ProposalCreation:
        if self._legacy_repo is None:
            raise ProposalExerciseError(
                PROPOSE_CHOICE,
                holding.contract_id,
                f"template {holding.template_id} has no transfer proposals",
            )
        proposal = LegacyProposal(
            proposal_id=f"legacy-proposal-{uuid4().hex}",
            from_party_id=holding.owner,
            to_party_id=recipient,
            token_name=holding.token_name,
            amount=amount,
            issuer_party_id=holding.issuer,
            holding_contract_id=holding.contract_id,
            created_at=datetime.now(timezone.utc),
        )
        self._legacy_repo.add(proposal)
        logger.info(
            "Legacy proposal=%s recorded for holding=%s on template %s",
            proposal.proposal_id,
            holding.contract_id,
            holding.template_id,
        )
        return ProposalCreation(proposal_id=proposal.proposal_id, is_legacy=True)

    async def accept_transfer_proposal(
        self, party: str, proposal_id: str
    ) -> ExerciseResult:
        if self._legacy_repo is not None and self._legacy_repo.get(proposal_id):
            self._legacy_repo.mark_accepted(proposal_id)
            logger.info("Legacy proposal=%s accepted with limitations", proposal_id)
            return ExerciseResult(
                transaction_id=f"legacy-accepted-{proposal_id}",
                method="legacy_proposal_accepted_with_limitations",
                message=(
                    "Legacy transfer proposal accepted. Legacy templates cannot "
                    "settle the transfer on-ledger; an issuer process completes it."
                ),
            )

        try:
            result = await self._exercise_proposal(ACCEPT_CHOICE, party, proposal_id)
        except StaleProposalError:
            logger.warning("Proposal=%s no longer exists on the ledger", proposal_id)
            return ExerciseResult(
                transaction_id=f"cleanup-{uuid4().hex}",
                method="stale_proposal_cleanup",
                message=(
                    "This transfer proposal was no longer valid and has been "
                    "removed from your notifications."
                ),
            )

        return ExerciseResult(
            transaction_id=result.get("completionOffset") or proposal_id,
            method="proposal_acceptance",
            message="Transfer proposal accepted successfully",
        )

    async def reject_transfer_proposal(
        self, party: str, proposal_id: str
    ) -> ExerciseResult:
        if self._legacy_repo is not None and self._legacy_repo.get(proposal_id):
            self._legacy_repo.mark_rejected(proposal_id)
            logger.info("Legacy proposal=%s rejected", proposal_id)
            return ExerciseResult(
                transaction_id=proposal_id,
                method="legacy_proposal_rejection",
                message="Legacy transfer proposal rejected.",
            )

        result = await self._exercise_proposal(REJECT_CHOICE, party, proposal_id)
        return ExerciseResult(
            transaction_id=result.get("completionOffset") or proposal_id,
            method="proposal_rejection",
            message="Transfer proposal rejected successfully. Tokens have been returned to sender.",
        )

    async def is_available(self) -> bool:
        body = {"templateIds": [self._token_metadata_template_id]}
        try:
            await self._post("query", body, self._admin_party)
        except (LedgerUnavailableError, LedgerRequestError) as exc:
            logger.warning("DAML ledger not available: %s", exc.message)
            return False
        return True
