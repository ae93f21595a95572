"""Shared test fixtures for TubeScribe."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from backend.app.config import Config
from backend.app.core.credentials import StaticCredentialSource
from backend.app.interfaces import AbstractTranscriptProvider
from backend.app.transcription.service import TranscriptExtractionService


@pytest.fixture
def test_config():
    return Config()


@pytest.fixture
def provider():
    """Provider stub; returns "hello world" unless a test says otherwise."""
    mock = AsyncMock(spec=AbstractTranscriptProvider)
    mock.transcribe.return_value = "hello world"
    return mock


@pytest.fixture
def credentials():
    return StaticCredentialSource("test-key")


@pytest.fixture
def extraction_service(provider, credentials):
    return TranscriptExtractionService(provider, credentials)


# --- App fixtures for route testing ---


@pytest.fixture
def test_app(test_config, extraction_service):
    """FastAPI app wired with a stub provider and a fixed key."""
    from backend.app.main import app

    app.state.config = test_config
    app.state.extraction_service = extraction_service
    return app


@pytest.fixture
async def client(test_app):
    """Async HTTP client for testing routes."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
