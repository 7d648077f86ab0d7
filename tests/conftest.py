"""
Shared fixtures for the tokenization test suite.

Builds a FastAPI app wired to an in-memory ledger port through
dependency overrides.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.interfaces.tokenization.dependencies import get_ledger_port
from app.main import create_app
from tests.factories import FakeLedgerPort


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file, debug routes on."""
    return Settings(_env_file=None, enable_debug_routes=True)


@pytest.fixture
def ledger() -> FakeLedgerPort:
    return FakeLedgerPort()


@pytest.fixture
def app(settings: Settings, ledger: FakeLedgerPort) -> FastAPI:
    application = create_app(settings)
    application.dependency_overrides[get_ledger_port] = lambda: ledger
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    # Unexpected errors must come back as 500 responses, not re-raise.
    return TestClient(app, raise_server_exceptions=False)
