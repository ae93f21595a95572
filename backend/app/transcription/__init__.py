from .gemini_client import GeminiClient
from .metadata import random_metadata
from .service import TranscriptExtractionService

__all__ = ["GeminiClient", "TranscriptExtractionService", "random_metadata"]
