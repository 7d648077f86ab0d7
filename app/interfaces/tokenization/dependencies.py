"""
Dependency injection for the tokenization bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
Long-lived resources (the ledger HTTP client, the token factory and the
legacy proposal store) are owned by the application and read from
``app.state``; see ``app.main.create_app``.
"""

from fastapi import Depends, Request

from app.application.tokenization.accept_transfer_proposal import (
    AcceptTransferProposalUseCase,
)
from app.application.tokenization.create_transfer_proposal import (
    CreateTransferProposalUseCase,
)
from app.application.tokenization.get_pending_proposals import (
    GetPendingProposalsUseCase,
)
from app.application.tokenization.reject_transfer_proposal import (
    RejectTransferProposalUseCase,
)
from app.core.config import Settings
from app.domain.tokenization.ports import LedgerQueryPort, LegacyProposalRepository
from app.infrastructure.tokenization.daml_ledger_adapter import DamlLedgerAdapter


def get_legacy_proposal_repo(request: Request) -> LegacyProposalRepository:
    """Return the legacy proposal store owned by the running application."""
    return request.app.state.legacy_proposals


def get_ledger_port(
    request: Request,
    legacy_repo: LegacyProposalRepository = Depends(get_legacy_proposal_repo),
) -> LedgerQueryPort:
    """Build the DAML ledger adapter over the application's HTTP client."""
    config: Settings = request.app.state.settings
    return DamlLedgerAdapter(
        client=request.app.state.ledger_client,
        token_factory=request.app.state.ledger_tokens,
        proposal_template_ids=config.transfer_proposal_template_ids,
        token_metadata_template_id=config.token_metadata_template_id,
        admin_party=config.ledger_admin_party,
        legacy_repo=legacy_repo,
        holding_template_ids=config.token_holding_template_ids,
        legacy_holding_template_ids=config.legacy_token_holding_template_ids,
    )


def get_pending_proposals_use_case(
    ledger_port: LedgerQueryPort = Depends(get_ledger_port),
) -> GetPendingProposalsUseCase:
    """Build GetPendingProposalsUseCase with its infrastructure dependencies."""
    return GetPendingProposalsUseCase(ledger_port=ledger_port)


def get_accept_transfer_use_case(
    ledger_port: LedgerQueryPort = Depends(get_ledger_port),
) -> AcceptTransferProposalUseCase:
    """Build AcceptTransferProposalUseCase with its infrastructure dependencies."""
    return AcceptTransferProposalUseCase(ledger_port=ledger_port)


def get_reject_transfer_use_case(
    ledger_port: LedgerQueryPort = Depends(get_ledger_port),
) -> RejectTransferProposalUseCase:
    """Build RejectTransferProposalUseCase with its infrastructure dependencies."""
    return RejectTransferProposalUseCase(ledger_port=ledger_port)


def get_create_transfer_use_case(
    ledger_port: LedgerQueryPort = Depends(get_ledger_port),
) -> CreateTransferProposalUseCase:
    """Build CreateTransferProposalUseCase with its infrastructure dependencies."""
    return CreateTransferProposalUseCase(ledger_port=ledger_port)
