"""
Ledger access tokens.

Builds the HS256 bearer token the DAML HTTP JSON API expects, scoped to a
single party (``actAs`` and ``readAs``). The token is minted per request
and never logged.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Any, Callable


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


class LedgerTokenFactory:
    """Mints party-scoped JWTs for the ledger JSON API."""

    def __init__(
        self,
        secret: str,
        ledger_id: str,
        participant_id: str,
        application_id: str,
        ttl_seconds: int,
        admin_party: str = "admin",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secret = secret.encode("utf-8")
        self._ledger_id = ledger_id
        self._participant_id = participant_id
        self._application_id = application_id
        self._ttl_seconds = ttl_seconds
        self._admin_party = admin_party
        self._clock = clock

    def claims_for(self, party: str) -> dict[str, Any]:
        """Return the claim set for a party."""
        issued_at = int(self._clock())
        return {
            "aud": "daml-ledger-api",
            "sub": party,
            "iat": issued_at,
            "exp": issued_at + self._ttl_seconds,
            "ledgerId": self._ledger_id,
            "participantId": self._participant_id,
            "applicationId": self._application_id,
            "actAs": [party],
            "readAs": [party],
            "admin": party == self._admin_party,
        }

    def token_for(self, party: str) -> str:
        """Return a signed compact JWT for a party."""
        header = {"alg": "HS256", "typ": "JWT"}
        signing_input = ".".join(
            _b64url(json.dumps(part, separators=(",", ":")).encode("utf-8"))
            for part in (header, self.claims_for(party))
        )
        signature = hmac.new(
            self._secret, signing_input.encode("ascii"), hashlib.sha256
        ).digest()
        return f"{signing_input}.{_b64url(signature)}"
