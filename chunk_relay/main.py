"""FastAPI application exposing the chunk translation endpoint and the synthesized audio."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.datastructures import UploadFile

from .config import Settings, get_settings
from .exceptions import RelayError, ValidationError
from .logging import setup_logging
from .pipeline import ChunkPipeline, ChunkResult
from .storage import TransientStorage
from .synthesis_service import ArtifactCounter, AudioSynthesizer
from .translation_service import TranslationClient

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    translator: TranslationClient | None = None,
    synthesizer: AudioSynthesizer | None = None,
) -> FastAPI:
    """Wire the pipeline components into a FastAPI application."""
    settings = settings or get_settings()
    storage = TransientStorage(settings.upload_dir, settings.tts_dir)
    translator = translator or TranslationClient.from_settings(settings)
    synthesizer = synthesizer or AudioSynthesizer(
        settings.tts_dir, ArtifactCounter(), url_prefix=settings.tts_url_prefix
    )
    pipeline = ChunkPipeline(storage, translator, synthesizer, settings.default_chunk_filename)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        storage.ensure_output_directory()
        storage.ensure_upload_directory()
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY is not set, every chunk will fail to translate")
        yield

    app = FastAPI(title="Live Chunk Translation Relay", lifespan=lifespan)
    app.state.pipeline = pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/api/chunk", response_model=ChunkResult)
    async def post_chunk(request: Request):
        """Translate the audio chunk uploaded in the `chunk` file field and return its text and audio URL."""
        try:
            form = await request.form()
            chunk = form.get("chunk")
            # A plain text field is not a chunk
            if not isinstance(chunk, UploadFile):
                return await pipeline.process(None)
            return await pipeline.process(await chunk.read(), chunk.filename)
        except ValidationError as e:
            return JSONResponse({"error": str(e)}, status_code=e.http_status)
        except RelayError as e:
            logger.error("Chunk processing failed", extra={"error": str(e)})
            return PlainTextResponse(str(e), status_code=e.http_status)
        except Exception as e:
            logger.exception("Unexpected error while processing chunk")
            return PlainTextResponse(str(e), status_code=500)

    # The directory is created at startup, after the mount is declared
    app.mount(
        settings.tts_url_prefix,
        StaticFiles(directory=settings.tts_dir, check_dir=False),
        name="tts",
    )

    if Path(settings.static_dir).is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


app = create_app()
