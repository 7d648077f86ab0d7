"""
Response envelopes for the tokenization API.

Every tokenization endpoint answers with one of a small set of JSON
shapes. This module builds them, success or failure, together with the
status code, so routes and error handlers never assemble bodies by hand.

Failure mapping:
    ValidationError                  -> 400 {"error": <message>}
    StaleProposalError               -> 422 {"success": false, "isStaleProposal": true, ...}
    other domain error with message  -> 400 {"error": <message>}
    anything else                    -> 500 {"error": "Internal server error"}
"""

from dataclasses import dataclass
from typing import Any, Sequence

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.domain.tokenization.entities import ProposalView
from app.domain.tokenization.errors import (
    PARTY_ID_REQUIRED,
    StaleProposalError,
    TokenizationDomainError,
    ValidationError,
)
from app.interfaces.tokenization.schemas import ProposalItem

HTTP_200 = 200
HTTP_400 = 400
HTTP_422 = 422
HTTP_500 = 500

INTERNAL_SERVER_ERROR = "Internal server error"
STALE_RECOMMENDATION = "Please ask the sender to create a new transfer proposal."


@dataclass(frozen=True)
class ResponseEnvelope:
    """A response body paired with its HTTP status code."""

    status_code: int
    body: dict[str, Any]

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=jsonable_encoder(self.body))


def proposal_item(view: ProposalView) -> ProposalItem:
    """Map a domain view onto its wire schema."""
    return ProposalItem(
        id=view.id,
        proposal_id=view.proposal_id,
        from_party_id=view.from_party_id,
        to_party_id=view.to_party_id,
        token_name=view.token_name,
        amount=view.amount,
        issuer=view.issuer,
        status=view.status,
        created_at=view.created_at,
        contract_address=view.contract_address,
    )


def build_success(proposals: Sequence[ProposalView], party_id: str) -> ResponseEnvelope:
    """Envelope for a successful proposal listing."""
    return ResponseEnvelope(
        status_code=HTTP_200,
        body={
            "success": True,
            "proposals": [proposal_item(p).model_dump(mode="json", by_alias=True) for p in proposals],
            "partyId": party_id,
        },
    )


def build_failure(exc: BaseException) -> ResponseEnvelope:
    """Envelope for a caught failure.

    Only domain errors expose their message; any other exception, or a
    domain error with an empty message, becomes a generic 500.
    """
    if isinstance(exc, ValidationError):
        return ResponseEnvelope(HTTP_400, {"error": exc.message or PARTY_ID_REQUIRED})
    if isinstance(exc, StaleProposalError):
        return ResponseEnvelope(
            HTTP_422,
            {
                "success": False,
                "isStaleProposal": True,
                "error": exc.message,
                "recommendation": STALE_RECOMMENDATION,
            },
        )
    if isinstance(exc, TokenizationDomainError) and exc.message:
        return ResponseEnvelope(HTTP_400, {"error": exc.message})
    return ResponseEnvelope(HTTP_500, {"error": INTERNAL_SERVER_ERROR})
