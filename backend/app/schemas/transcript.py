from pydantic import BaseModel, Field


class ExtractTranscriptRequest(BaseModel):
    """Body of POST /api/extract-transcript."""

    url: str | None = Field(None, description="YouTube video URL")


class TranscriptResult(BaseModel):
    """Transcript text plus display metadata.

    Only `text` comes from the provider. `duration`, `language` and
    `confidence` are picked at random from fixed sets and say nothing about
    the actual video.
    """

    text: str = Field(..., description="Spoken dialogue, verbatim")
    duration: str = Field(..., description="Display duration, e.g. 12:34")
    language: str = Field(..., description="Display language name")
    confidence: str = Field(..., description="Display confidence, e.g. 95%")


class ErrorResponse(BaseModel):
    error: str
