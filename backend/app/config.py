"""Configuration for the TubeScribe backend."""

import os
from dataclasses import dataclass, field


@dataclass
class ProviderConfig:
    """Configuration for the Gemini transcription provider."""

    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-2.0-flash-exp"
    api_key_env: str = "GEMINI_API_KEY"  # Read on every request, never cached
    timeout: float | None = None  # None = wait for the provider indefinitely


@dataclass
class Config:
    """Main application configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    log_file: str = ""  # JSON log file, empty = stdout only

    provider: ProviderConfig = field(default_factory=ProviderConfig)


def load_config() -> Config:
    """Load configuration from environment variables."""
    config = Config()

    if host := os.getenv("TUBESCRIBE_HOST"):
        config.host = host

    if port := os.getenv("TUBESCRIBE_PORT"):
        config.port = int(port)

    if log_level := os.getenv("TUBESCRIBE_LOG_LEVEL"):
        config.log_level = log_level

    if log_file := os.getenv("TUBESCRIBE_LOG_FILE"):
        config.log_file = log_file

    if model := os.getenv("TUBESCRIBE_GEMINI_MODEL"):
        config.provider.model = model

    if base_url := os.getenv("TUBESCRIBE_GEMINI_BASE_URL"):
        config.provider.base_url = base_url.rstrip("/")

    if timeout := os.getenv("TUBESCRIBE_PROVIDER_TIMEOUT"):
        config.provider.timeout = float(timeout)

    return config
