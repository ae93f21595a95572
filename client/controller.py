"""State and actions behind the transcript form."""

import asyncio

from backend.app.core.youtube import is_valid_youtube_url
from backend.app.schemas.transcript import TranscriptResult

from .api_client import ApiError, TranscriptApiClient
from .clipboard import AbstractClipboard, SystemClipboard
from .core.logging import get_logger
from .storage import AbstractResultStore

log = get_logger("controller")

FALLBACK_ERROR = "Failed to extract transcript. Please try again."


class TranscriptFormController:
    """Drives one form: URL in, transcript out.

    At most one of `is_loading`, `error` and `result` describes the current
    view. Every failure in `submit()` and `copy()` ends up in `error`;
    nothing raised by the request lifecycle escapes.
    """

    def __init__(
        self,
        api: TranscriptApiClient,
        clipboard: AbstractClipboard | None = None,
        store: AbstractResultStore | None = None,
        copied_reset_delay: float = 3.0,
    ):
        self.api = api
        self.clipboard = clipboard or SystemClipboard()
        self.store = store
        self.copied_reset_delay = copied_reset_delay

        self.url = ""
        self.is_loading = False
        self.error = ""
        self.result: TranscriptResult | None = None
        self.is_copied = False
        self._copied_reset: asyncio.TimerHandle | None = None

        if self.store is not None:
            self.result = self.store.load()
            if self.result is not None:
                log.info("Loaded saved transcript")

    @property
    def word_count(self) -> int:
        if self.result is None:
            return 0
        return len(self.result.text.split())

    async def submit(self) -> None:
        """Validate the current URL and fetch its transcript."""
        if self.is_loading:
            log.debug("Submission ignored, request already in flight")
            return

        self.error = ""
        self.result = None

        if not self.url.strip():
            self.error = "Please enter a YouTube URL."
            return

        if not is_valid_youtube_url(self.url):
            self.error = "Please enter a valid YouTube URL."
            return

        self.is_loading = True
        try:
            log.info(f"Starting transcript extraction for {self.url.strip()}")
            result = await self.api.extract(self.url.strip())
        except ApiError as e:
            log.error(f"Extraction rejected: {e.message}")
            self.error = e.message
        except Exception as e:
            log.error(f"Extraction failed: {type(e).__name__}: {e}")
            self.error = FALLBACK_ERROR
        else:
            self.result = result
            self.error = ""
            self._persist(result)
        finally:
            self.is_loading = False

    async def copy(self) -> None:
        """Copy the transcript text and flash the copied indicator."""
        if self.result is None or not self.result.text:
            return

        try:
            await self.clipboard.write_text(self.result.text)
        except Exception as e:
            log.error(f"Clipboard write failed: {e}")
            self.error = "Failed to copy to clipboard."
            return

        self.is_copied = True
        if self._copied_reset is not None:
            self._copied_reset.cancel()
        loop = asyncio.get_running_loop()
        self._copied_reset = loop.call_later(self.copied_reset_delay, self._reset_copied)

    def clear(self) -> None:
        self.result = None
        self.url = ""
        self.error = ""
        if self.store is not None:
            self.store.clear()
        log.info("Cleared transcript")

    def _reset_copied(self) -> None:
        self.is_copied = False
        self._copied_reset = None

    def _persist(self, result: TranscriptResult) -> None:
        if self.store is None:
            return
        try:
            self.store.save(result)
        except OSError as e:
            log.warning(f"Could not save transcript locally: {e}")
