"""Configuration for the TubeScribe client."""

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ClientConfig:
    backend_url: str = "http://localhost:8000"
    data_dir: Path = field(default_factory=lambda: Path.home() / ".local/share/tubescribe")
    copied_reset_delay: float = 3.0  # Seconds the "copied" indicator stays on


def load_client_config() -> ClientConfig:
    """Load client configuration from environment variables."""
    config = ClientConfig()

    if backend_url := os.getenv("TUBESCRIBE_BACKEND_URL"):
        config.backend_url = backend_url.rstrip("/")

    if data_dir := os.getenv("TUBESCRIBE_CLIENT_DATA_DIR"):
        config.data_dir = Path(data_dir).expanduser()

    return config
