import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..core.errors import RelayError
from ..core.logging import get_logger
from ..dependencies import get_extraction_service
from ..interfaces import AbstractTranscriptExtractor
from ..schemas.transcript import ErrorResponse, ExtractTranscriptRequest, TranscriptResult

router = APIRouter(prefix="/api")
log = get_logger("api")


async def _read_url(request: Request) -> str | None:
    """Return the `url` field of a JSON object body, or None.

    Anything that is not a JSON object with a string `url` counts as a
    missing or invalid URL, so it ends up as a 400 rather than a 422.
    """
    try:
        body = await request.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    url = body.get("url")
    if url is None or isinstance(url, str):
        return url
    return str(url)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/extract-transcript",
    response_model=TranscriptResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    # The body is read by hand in _read_url, so document it here
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ExtractTranscriptRequest.model_json_schema()}},
            "required": True,
        }
    },
)
async def extract_transcript(
    request: Request,
    service: AbstractTranscriptExtractor = Depends(get_extraction_service),
):
    """Transcribe a YouTube video through the provider."""
    started = time.monotonic()
    log.info("Received transcript extraction request")

    try:
        url = await _read_url(request)
        result = await service.extract(url)
    except RelayError as e:
        elapsed_ms = round((time.monotonic() - started) * 1000, 1)
        log.warning(
            f"Transcript extraction failed: {e.message}",
            extra={"status_code": e.status_code, "elapsed_ms": elapsed_ms},
        )
        return _error(e.status_code, e.message)
    except Exception:
        elapsed_ms = round((time.monotonic() - started) * 1000, 1)
        log.exception(
            "Unexpected error extracting transcript", extra={"elapsed_ms": elapsed_ms}
        )
        return _error(500, "Internal server error")

    elapsed_ms = round((time.monotonic() - started) * 1000, 1)
    log.info(
        "Sending transcript response",
        extra={"elapsed_ms": elapsed_ms, "text_length": len(result.text)},
    )
    return result
