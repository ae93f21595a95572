"""Abstract base classes for dependency inversion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .core.errors import MissingCredentialError

if TYPE_CHECKING:
    from .schemas.transcript import TranscriptResult


class AbstractCredentialSource(ABC):
    """Interface for obtaining the provider credential."""

    @abstractmethod
    def get(self) -> str:
        """Return the current credential or raise MissingCredentialError."""

    def is_configured(self) -> bool:
        try:
            self.get()
        except MissingCredentialError:
            return False
        return True


class AbstractTranscriptProvider(ABC):
    """Interface for the external video-to-text provider."""

    @abstractmethod
    async def transcribe(self, url: str, api_key: str) -> str: ...


class AbstractTranscriptExtractor(ABC):
    """Interface for the validate -> call -> transform pipeline."""

    @abstractmethod
    async def extract(self, url: str | None) -> TranscriptResult: ...

    @abstractmethod
    def is_provider_configured(self) -> bool: ...
