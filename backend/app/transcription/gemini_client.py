"""HTTP client for the Gemini generateContent API."""

import time

import httpx

from ..config import Config
from ..core.errors import ProviderError, ProviderResponseError
from ..core.logging import get_logger
from ..interfaces import AbstractTranscriptProvider

log = get_logger("gemini")

TRANSCRIBE_PROMPT = (
    "Transcribe the video. Return only the spoken dialogue, verbatim. "
    "Omit any additional text or descriptions. "
    "Remember I don't need any new lines generated in the outputed text."
)


def extract_text(data) -> str:
    """Pull candidates[0].content.parts[0].text out of a response body.

    Raises:
        ProviderResponseError: the body does not have that shape, or the
            text is empty.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise ProviderResponseError()
    if not isinstance(text, str) or not text.strip():
        raise ProviderResponseError()
    return text


class GeminiClient(AbstractTranscriptProvider):
    """Sends one video URL to Gemini and returns the transcript text.

    One POST per call, no retry. The API key is passed per call so the
    caller decides where it comes from.
    """

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport | None = None):
        self.provider = config.provider
        self._transport = transport

    def endpoint_url(self) -> str:
        return f"{self.provider.base_url}/models/{self.provider.model}:generateContent"

    def build_request(self, url: str) -> dict:
        return {
            "contents": [
                {
                    "parts": [
                        {"text": TRANSCRIBE_PROMPT},
                        {"file_data": {"file_uri": url}},
                    ]
                }
            ]
        }

    async def transcribe(self, url: str, api_key: str) -> str:
        payload = self.build_request(url)
        endpoint = self.endpoint_url()
        log.info("Calling Gemini", extra={"endpoint": endpoint, "video_url": url})
        log.debug(f"Gemini request body: {payload}")

        started = time.monotonic()
        try:
            async with httpx.AsyncClient(
                timeout=self.provider.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    endpoint,
                    params={"key": api_key},
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            elapsed_ms = round((time.monotonic() - started) * 1000, 1)
            log.error(
                f"Gemini request failed: {type(e).__name__}: {e}",
                extra={"elapsed_ms": elapsed_ms},
            )
            raise ProviderError() from e

        elapsed_ms = round((time.monotonic() - started) * 1000, 1)
        log.info(
            f"Gemini responded {response.status_code}",
            extra={"status_code": response.status_code, "elapsed_ms": elapsed_ms},
        )

        if not response.is_success:
            log.error(
                "Gemini API error",
                extra={"status_code": response.status_code, "body": response.text},
            )
            raise ProviderError()

        try:
            data = response.json()
        except ValueError:
            log.error("Gemini returned a non-JSON body", extra={"body": response.text})
            raise ProviderResponseError()

        try:
            text = extract_text(data)
        except ProviderResponseError:
            log.error("No transcript found in Gemini response", extra={"body": response.text})
            raise

        log.info(
            "Extracted transcript",
            extra={"transcript_length": len(text), "preview": text[:100]},
        )
        return text
