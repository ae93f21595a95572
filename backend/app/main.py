"""TubeScribe Backend API."""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import load_config
from .core.credentials import EnvCredentialSource
from .core.logging import get_logger, setup_logging
from .dependencies import get_extraction_service
from .interfaces import AbstractTranscriptExtractor
from .routers import transcripts
from .transcription import GeminiClient, TranscriptExtractionService

log = get_logger("api")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - wire config and services into app.state."""
    config = load_config()
    setup_logging(config.log_level, config.log_file)

    app.state.config = config
    app.state.extraction_service = TranscriptExtractionService(
        provider=GeminiClient(config),
        credentials=EnvCredentialSource(config.provider.api_key_env),
    )

    log.info("Backend started")
    log.info(f"Provider model: {config.provider.model}")
    if not app.state.extraction_service.is_provider_configured():
        log.warning(f"{config.provider.api_key_env} is not set; extraction will fail")

    yield

    log.info("Backend stopped")


app = FastAPI(
    title="TubeScribe API",
    description="YouTube transcript extraction relay",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(transcripts.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"service": "TubeScribe", "version": VERSION}


@app.get("/health")
async def health(service: AbstractTranscriptExtractor = Depends(get_extraction_service)):
    """Health check endpoint."""
    return {"status": "ok", "provider_configured": service.is_provider_configured()}


def main():
    import uvicorn

    config = load_config()
    uvicorn.run(
        "backend.app.main:app",
        host=config.host,
        port=config.port,
    )


if __name__ == "__main__":
    main()
