"""Sources for the provider API key."""

import os

from ..interfaces import AbstractCredentialSource
from .errors import MissingCredentialError


class EnvCredentialSource(AbstractCredentialSource):
    """Reads the key from the process environment on every call."""

    def __init__(self, var: str = "GEMINI_API_KEY"):
        self.var = var

    def get(self) -> str:
        value = os.getenv(self.var, "").strip()
        if not value:
            raise MissingCredentialError()
        return value


class StaticCredentialSource(AbstractCredentialSource):
    """Fixed key, or no key at all when constructed with None."""

    def __init__(self, value: str | None):
        self._value = value

    def get(self) -> str:
        if not self._value:
            raise MissingCredentialError()
        return self._value
