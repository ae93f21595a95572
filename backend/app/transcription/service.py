"""Transcript extraction pipeline: validate, call the provider, decorate."""

import random
import time

from ..core.errors import InvalidUrlError
from ..core.logging import get_logger
from ..core.youtube import is_valid_youtube_url
from ..interfaces import (
    AbstractCredentialSource,
    AbstractTranscriptExtractor,
    AbstractTranscriptProvider,
)
from ..schemas.transcript import TranscriptResult
from .metadata import random_metadata

log = get_logger("transcription")


class TranscriptExtractionService(AbstractTranscriptExtractor):
    """One-shot relay from a YouTube URL to a TranscriptResult.

    Each step either succeeds or raises a RelayError; nothing is retried
    and no state survives between calls.
    """

    def __init__(
        self,
        provider: AbstractTranscriptProvider,
        credentials: AbstractCredentialSource,
        rng: random.Random | None = None,
    ):
        self.provider = provider
        self.credentials = credentials
        self.rng = rng

    def is_provider_configured(self) -> bool:
        return self.credentials.is_configured()

    async def extract(self, url: str | None) -> TranscriptResult:
        if not url:
            log.warning("No URL provided")
            raise InvalidUrlError("YouTube URL is required")

        log.info("Validating YouTube URL", extra={"video_url": url})
        if not is_valid_youtube_url(url):
            log.warning("Invalid YouTube URL format", extra={"video_url": url})
            raise InvalidUrlError("Invalid YouTube URL")

        url = url.strip()
        log.info("YouTube URL validation passed")

        # Raises MissingCredentialError before any outbound call
        api_key = self.credentials.get()

        started = time.monotonic()
        text = await self.provider.transcribe(url, api_key)
        elapsed_ms = round((time.monotonic() - started) * 1000, 1)

        result = TranscriptResult(text=text, **random_metadata(self.rng))
        log.info(
            "Transcript extraction completed",
            extra={
                "elapsed_ms": elapsed_ms,
                "text_length": len(result.text),
                "duration": result.duration,
                "language": result.language,
                "confidence": result.confidence,
            },
        )
        return result
