"""
Domain-specific errors for the tokenization bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

PARTY_ID_REQUIRED = "Party ID is required"


class TokenizationDomainError(Exception):
    """Base error for all tokenization domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(TokenizationDomainError):
    """Raised when caller input is missing or malformed."""

    def __init__(self, message: str = PARTY_ID_REQUIRED) -> None:
        super().__init__(message)


class LedgerUnavailableError(TokenizationDomainError):
    """Raised when the ledger cannot be reached or does not answer in time."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"DAML ledger unavailable: {reason}" if reason else "")
        self.reason = reason


class LedgerRequestError(TokenizationDomainError):
    """Raised when the ledger answers a request with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"DAML API error ({status_code}): {body}")
        self.status_code = status_code
        self.body = body

    @property
    def contract_not_found(self) -> bool:
        """True when the ledger reports the target contract as archived or unknown."""
        return "CONTRACT_NOT_FOUND" in self.body


class StaleProposalError(TokenizationDomainError):
    """Raised when a proposal's contract no longer exists on the ledger."""

    def __init__(self, proposal_id: str) -> None:
        super().__init__(
            "This transfer proposal is no longer valid. "
            "It may be from an outdated contract version."
        )
        self.proposal_id = proposal_id


class ProposalExerciseError(TokenizationDomainError):
    """Raised when no known template generation accepts a proposal choice."""

    def __init__(self, choice: str, proposal_id: str, reason: str) -> None:
        super().__init__(f"Transfer proposal {proposal_id} rejected {choice}: {reason}")
        self.choice = choice
        self.proposal_id = proposal_id
        self.reason = reason


class LegacyProposalNotPendingError(TokenizationDomainError):
    """Raised when acting on a legacy proposal that was already settled."""

    def __init__(self, proposal_id: str, status: str) -> None:
        super().__init__(f"Legacy proposal is not pending (status: {status})")
        self.proposal_id = proposal_id
        self.status = status


class ProposalNotFoundError(TokenizationDomainError):
    """Raised when a legacy proposal id is unknown to the store."""

    def __init__(self, proposal_id: str) -> None:
        super().__init__(f"Legacy proposal not found: {proposal_id}")
        self.proposal_id = proposal_id


class InsufficientBalanceError(TokenizationDomainError):
    """Raised when the sender holds too little of a token to transfer."""

    def __init__(self, token_name: str, requested: str, available: str = "0") -> None:
        super().__init__("Insufficient balance")
        self.token_name = token_name
        self.requested = requested
        self.available = available
