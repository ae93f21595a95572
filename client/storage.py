"""Local persistence of the last transcript."""

import json
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from backend.app.schemas.transcript import TranscriptResult

from .core.logging import get_logger

log = get_logger("storage")

STORAGE_KEY = "youtube-transcript"


class AbstractResultStore(ABC):
    """Save/load/clear for the most recent TranscriptResult."""

    @abstractmethod
    def save(self, result: TranscriptResult) -> None: ...

    @abstractmethod
    def load(self) -> TranscriptResult | None: ...

    @abstractmethod
    def clear(self) -> None: ...


class MemoryResultStore(AbstractResultStore):
    def __init__(self):
        self._data: str | None = None

    def save(self, result: TranscriptResult) -> None:
        self._data = result.model_dump_json()

    def load(self) -> TranscriptResult | None:
        if self._data is None:
            return None
        return TranscriptResult.model_validate_json(self._data)

    def clear(self) -> None:
        self._data = None


class JsonFileResultStore(AbstractResultStore):
    """Keeps one JSON document in `<data_dir>/youtube-transcript.json`.

    A file that cannot be parsed is deleted and reported as absent.
    """

    def __init__(self, data_dir: Path):
        self.path = Path(data_dir) / f"{STORAGE_KEY}.json"

    def save(self, result: TranscriptResult) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(result.model_dump_json(), encoding="utf-8")
        log.debug(f"Saved transcript to {self.path}")

    def load(self) -> TranscriptResult | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            result = TranscriptResult.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            log.warning(f"Discarding unreadable saved transcript: {e}")
            self.clear()
            return None
        log.debug(f"Loaded saved transcript from {self.path}")
        return result

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
