"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_CURRENT = "a636b4833c07b7e428d8abdf95d3b47ec9daec1d97fb7bb0965adcedd03fc458"
_PACKAGE_PREVIOUS = "cb35be9090c18b08e25f727a8b6c06623386042b84ecb3e07f7638610d1ace5d"
_PACKAGE_LEGACY = "ac3a226c1e1a84ec06dc8438b570386218774432cc00f0f7d08cafeede599283"

INSECURE_JWT_SECRET = "secret"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_enabled: Turn the rate limiter on or off.
        enable_debug_routes: Mount the /debug inspection endpoints.
        ledger_http_url: Base URL of the DAML HTTP JSON API.
        ledger_timeout_seconds: Per-request timeout for ledger calls.
        ledger_jwt_secret: HS256 secret shared with the JSON API.
        ledger_token_ttl_seconds: Lifetime of minted ledger tokens.
        transfer_proposal_template_ids: TransferProposal templates, newest first.
        token_metadata_template_id: Template queried by the availability probe.
        token_holding_template_ids: TokenHolding templates offering ProposeTransfer.
        legacy_token_holding_template_ids: Older TokenHolding templates; their
            transfers are kept as legacy proposals.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Canton Tokenization"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_enabled: bool = True
    enable_debug_routes: bool = False

    # DAML HTTP JSON API
    ledger_http_url: str = "http://localhost:7575"
    ledger_timeout_seconds: float = 10.0
    ledger_id: str = "sandbox"
    ledger_participant_id: str = "sandbox-participant"
    ledger_application_id: str = "canton-tokenization-demo"
    ledger_admin_party: str = "admin"
    ledger_jwt_secret: str = INSECURE_JWT_SECRET
    ledger_token_ttl_seconds: int = 60 * 60 * 24

    transfer_proposal_template_ids: list[str] = [
        f"{_PACKAGE_CURRENT}:CIP0056Token:TransferProposal",
        f"{_PACKAGE_PREVIOUS}:CIP0056Token:TransferProposal",
    ]
    token_metadata_template_id: str = f"{_PACKAGE_CURRENT}:CIP0056Token:TokenMetadata"
    token_holding_template_ids: list[str] = [
        f"{_PACKAGE_CURRENT}:CIP0056Token:TokenHolding",
        f"{_PACKAGE_PREVIOUS}:CIP0056Token:TokenHolding",
    ]
    legacy_token_holding_template_ids: list[str] = [
        f"{_PACKAGE_LEGACY}:CIP0056Token:TokenHolding",
    ]

    def check_ledger_secret(self) -> None:
        """Refuse the well-known placeholder secret outside debug mode.

        Raises:
            ValueError: If ``ledger_jwt_secret`` is unset or the placeholder
                and ``debug`` is off.
        """
        if self.debug:
            return
        if not self.ledger_jwt_secret or self.ledger_jwt_secret == INSECURE_JWT_SECRET:
            raise ValueError(
                "LEDGER_JWT_SECRET must be set to a private value when debug is off"
            )


settings = Settings()
