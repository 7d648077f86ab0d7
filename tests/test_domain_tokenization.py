"""
Tests for the tokenization domain layer.

Tests the proposal transformer, entities and error classes in isolation.
No external dependencies or IO required.
"""

from dataclasses import FrozenInstanceError, replace
from datetime import datetime, timezone

import pytest

from app.domain.tokenization.entities import PENDING_STATUS, ProposalView
from app.domain.tokenization.errors import (
    PARTY_ID_REQUIRED,
    LedgerRequestError,
    LedgerUnavailableError,
    LegacyProposalNotPendingError,
    StaleProposalError,
    ValidationError,
)
from app.domain.tokenization.proposal_transformer import transform_proposals
from tests.factories import make_contract, make_legacy_proposal

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestProposalTransformer:
    """Tests for transform_proposals."""

    def test_concrete_contract_maps_to_view(self) -> None:
        """A single contract maps field by field onto the wire view."""
        views = transform_proposals([make_contract()], now=NOW)

        assert views == [
            ProposalView(
                id="C1",
                proposal_id="C1",
                from_party_id="Alice",
                to_party_id="Bob",
                token_name="USD",
                amount="5.0",
                issuer="Issuer1",
                status="pending",
                created_at=NOW,
                contract_address="C1",
            )
        ]

    def test_one_view_per_contract_in_order(self) -> None:
        """N contracts yield N views in the same order, duplicates kept."""
        contracts = [make_contract(contract_id=cid) for cid in ("C3", "C1", "C2", "C1")]

        views = transform_proposals(contracts, now=NOW)

        assert [v.id for v in views] == ["C3", "C1", "C2", "C1"]

    def test_identifier_fields_all_carry_contract_id(self) -> None:
        """id, proposal_id and contract_address all equal the contract id."""
        views = transform_proposals(
            [make_contract(contract_id=f"00ab#{i}") for i in range(5)], now=NOW
        )

        for i, view in enumerate(views):
            assert view.id == view.proposal_id == view.contract_address == f"00ab#{i}"

    def test_status_is_always_pending(self) -> None:
        views = transform_proposals([make_contract(), make_contract("C2")], now=NOW)
        assert {v.status for v in views} == {PENDING_STATUS}

    def test_timestamp_sampled_once_per_call(self) -> None:
        """Every view in one call shares the same created_at."""
        views = transform_proposals([make_contract(str(i)) for i in range(10)])

        assert len({v.created_at for v in views}) == 1
        assert views[0].created_at.tzinfo is not None

    def test_empty_input_yields_empty_list(self) -> None:
        assert transform_proposals([], now=NOW) == []

    def test_repeat_calls_differ_only_in_timestamp(self) -> None:
        """Transforming the same contracts twice is idempotent apart from created_at."""
        contracts = [make_contract("C1"), make_contract("C2", new_owner="Carol")]
        later = datetime(2024, 1, 15, 12, 5, tzinfo=timezone.utc)

        first = transform_proposals(contracts, now=NOW)
        second = transform_proposals(contracts, now=later)

        assert [v.created_at for v in first] != [v.created_at for v in second]
        assert [replace(v, created_at=NOW) for v in second] == first

    def test_source_contracts_untouched(self) -> None:
        """The transformer neither mutates nor returns the source records."""
        contract = make_contract()
        before = make_contract()

        (view,) = transform_proposals([contract], now=NOW)

        assert contract == before
        assert view is not contract
        with pytest.raises(FrozenInstanceError):
            view.status = "accepted"  # type: ignore[misc]


class TestLegacyProposal:
    """Tests for the LegacyProposal entity."""

    def test_presents_as_raw_contract(self) -> None:
        """A legacy proposal looks like a ledger contract flagged as legacy."""
        raw = make_legacy_proposal().to_raw_contract()

        assert raw.contract_id == "legacy-proposal-1"
        assert raw.proposal.current_owner == "Alice"
        assert raw.proposal.new_owner == "Bob"
        assert raw.proposal.transfer_amount == "2.5"
        assert raw.proposal.holding_id == "H1"
        assert raw.proposal.is_legacy is True


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_validation_error_default_message(self) -> None:
        assert ValidationError().message == PARTY_ID_REQUIRED == "Party ID is required"

    def test_ledger_request_error_message(self) -> None:
        err = LedgerRequestError(403, "forbidden")
        assert err.message == "DAML API error (403): forbidden"
        assert err.contract_not_found is False

    def test_ledger_request_error_detects_missing_contract(self) -> None:
        err = LedgerRequestError(404, '{"errors":["CONTRACT_NOT_FOUND: 00ab"]}')
        assert err.contract_not_found is True

    def test_ledger_unavailable_without_reason_has_no_message(self) -> None:
        """An unavailable ledger with no reason carries an empty message."""
        assert LedgerUnavailableError("").message == ""
        assert "connection refused" in LedgerUnavailableError("connection refused").message

    def test_stale_and_not_pending_errors_keep_ids(self) -> None:
        assert StaleProposalError("C9").proposal_id == "C9"
        err = LegacyProposalNotPendingError("L1", "rejected")
        assert err.message == "Legacy proposal is not pending (status: rejected)"
