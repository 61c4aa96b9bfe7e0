"""Sequences one chunk through translation and synthesis."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ValidationError
from .storage import TransientStorage
from .synthesis_service import AudioSynthesizer
from .translation_service import TranslationClient

logger = logging.getLogger(__name__)


class ChunkResult(BaseModel):
    """Translated text of a chunk and the URL of its synthesized audio ("" when there is no text)."""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    audio_url: str = Field(alias="audioUrl")


class ChunkPipeline:
    """
    Runs a chunk through Received, Persisted, Translated, then Synthesized or
    SkippedSynthesis. Any failure propagates to the caller, which turns it into
    an error response; the temporary chunk file is gone by then either way.
    """

    def __init__(
        self,
        storage: TransientStorage,
        translator: TranslationClient,
        synthesizer: AudioSynthesizer,
        default_filename: str = "chunk.webm",
    ) -> None:
        self.storage = storage
        self.translator = translator
        self.synthesizer = synthesizer
        self.default_filename = default_filename

    async def process(self, data: bytes | None, filename: str | None = None) -> ChunkResult:
        """
        Translate one chunk and synthesize audio for the result.

        Raises:
            ValidationError: no chunk was attached; nothing is sent upstream.
            RelayError: translation, synthesis, or storage failed.
        """
        if data is None:
            raise ValidationError("No chunk file")

        filename = filename or self.default_filename
        logger.info("Chunk received", extra={"chunk_name": filename, "chunk_bytes": len(data)})

        async with self.storage.chunk_file(data) as path:
            buffer = await self.storage.read_chunk(path)
            text = await self.translator.translate(buffer, filename)

        audio_url = ""
        if text:
            audio_url = await self.synthesizer.synthesize(text)
        else:
            logger.info("Empty translation, synthesis skipped", extra={"chunk_name": filename})

        return ChunkResult(text=text, audio_url=audio_url)
