from fastapi import Request

from .interfaces import AbstractTranscriptExtractor


def get_extraction_service(request: Request) -> AbstractTranscriptExtractor:
    return request.app.state.extraction_service
