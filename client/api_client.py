"""HTTP client for the relay endpoint."""

import httpx

from backend.app.schemas.transcript import ExtractTranscriptRequest, TranscriptResult

from .core.logging import get_logger

log = get_logger("api")

DEFAULT_ERROR = "Failed to extract transcript"


class ApiError(Exception):
    """The relay endpoint answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TranscriptApiClient:
    """Calls POST /api/extract-transcript on the backend."""

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        # No timeout: the backend waits on the provider for as long as it takes
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=None, transport=transport)

    async def extract(self, url: str) -> TranscriptResult:
        """Request a transcript.

        Raises:
            ApiError: the endpoint returned a non-2xx status.
            httpx.HTTPError, ValueError: transport failure or unreadable body.
        """
        payload = ExtractTranscriptRequest(url=url).model_dump()
        log.info(f"Sending API request for {url}")

        response = await self._client.post("/api/extract-transcript", json=payload)
        log.info(f"Received response status {response.status_code}")

        data = response.json()
        if not response.is_success:
            message = data.get("error") if isinstance(data, dict) else None
            log.warning(f"API request failed: {data}")
            raise ApiError(message or DEFAULT_ERROR, response.status_code)

        return TranscriptResult.model_validate(data)

    async def close(self) -> None:
        await self._client.aclose()
