"""
Shared test configuration and fixtures for card audio processor tests.
"""
import logging
import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient

from app.main import app
from app.config.settings import settings
from app.application.card_orchestrator import CardOrchestrator
from app.core.usecases.process_card import ProcessCardUseCase
from tests.utils.mock_helpers import MockHelpers


# MOCK FIXTURES (for unit tests)

@pytest.fixture
def mock_lambda_context() -> Mock:
    """Mock Lambda context for handler tests."""
    return MockHelpers.create_mock_lambda_context()


@pytest.fixture
def card_body() -> dict:
    """Standard card request body."""
    return MockHelpers.create_card_body()


# SERVICE FIXTURES

@pytest.fixture
def process_card_use_case() -> ProcessCardUseCase:
    """Process card use case instance."""
    return ProcessCardUseCase()


@pytest.fixture
def card_orchestrator() -> CardOrchestrator:
    """Card orchestrator with the default use case."""
    return CardOrchestrator()


# API FIXTURES (for integration tests)

@pytest.fixture
def client() -> TestClient:
    """FastAPI test client for the local HTTP front end."""
    return TestClient(app)


# LOGGING FIXTURES

class RecordCollector(logging.Handler):
    """Handler keeping every record it receives."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def service_log_records():
    """Records emitted under the service logger, which does not propagate to root."""
    collector = RecordCollector()
    service_logger = logging.getLogger(settings.service_name)
    service_logger.addHandler(collector)
    try:
        yield collector.records
    finally:
        service_logger.removeHandler(collector)
