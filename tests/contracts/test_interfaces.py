"""Interface contract tests."""

from backend.app.core.credentials import EnvCredentialSource, StaticCredentialSource
from backend.app.interfaces import (
    AbstractCredentialSource,
    AbstractTranscriptExtractor,
    AbstractTranscriptProvider,
)
from backend.app.transcription.gemini_client import GeminiClient
from backend.app.transcription.service import TranscriptExtractionService
from client.clipboard import AbstractClipboard, SystemClipboard
from client.storage import AbstractResultStore, JsonFileResultStore, MemoryResultStore


def test_gemini_client_implements_abc():
    assert issubclass(GeminiClient, AbstractTranscriptProvider)


def test_extraction_service_implements_abc():
    assert issubclass(TranscriptExtractionService, AbstractTranscriptExtractor)


def test_credential_sources_implement_abc():
    assert issubclass(EnvCredentialSource, AbstractCredentialSource)
    assert issubclass(StaticCredentialSource, AbstractCredentialSource)


def test_result_stores_implement_abc():
    assert issubclass(JsonFileResultStore, AbstractResultStore)
    assert issubclass(MemoryResultStore, AbstractResultStore)


def test_system_clipboard_implements_abc():
    assert issubclass(SystemClipboard, AbstractClipboard)
