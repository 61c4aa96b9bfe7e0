"""Placeholder speech synthesis: every text becomes one second of silent WAV audio."""

import asyncio
import io
import itertools
import logging
import time
import wave
from collections.abc import Callable
from pathlib import Path

from .exceptions import StorageWriteError

logger = logging.getLogger(__name__)

SAMPLE_RATE = 8000
SAMPLE_WIDTH = 2  # 16-bit linear PCM
CHANNELS = 1
DURATION_SECONDS = 1


def build_silent_wav(seconds: int = DURATION_SECONDS, sample_rate: int = SAMPLE_RATE) -> bytes:
    """Return a mono 16-bit PCM WAV container holding `seconds` of silence."""
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wav:
        wav.setnchannels(CHANNELS)
        wav.setsampwidth(SAMPLE_WIDTH)
        wav.setframerate(sample_rate)
        wav.writeframes(b"\x00" * (sample_rate * seconds * SAMPLE_WIDTH * CHANNELS))
    return buf.getvalue()


class ArtifactCounter:
    """Monotonic counter used to keep artifact filenames unique within the process."""

    def __init__(self, start: int = 0) -> None:
        self._values = itertools.count(start)

    def next(self) -> int:
        # No await here: two tasks can never read the same value
        return next(self._values)


class AudioSynthesizer:
    """Writes one audio artifact per call and returns the URL path it is served under."""

    def __init__(
        self,
        output_dir: str | Path,
        counter: ArtifactCounter | None = None,
        url_prefix: str = "/tts",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.counter = counter or ArtifactCounter()
        self.url_prefix = url_prefix.rstrip("/")
        self._clock = clock
        self._payload = build_silent_wav()

    def next_filename(self) -> str:
        """Return `tts_<epoch ms>_<counter>.wav`, advancing the counter."""
        return f"tts_{int(self._clock() * 1000)}_{self.counter.next()}.wav"

    async def synthesize(self, text: str) -> str:
        """Synthesize `text` and return the artifact's URL path.

        The audio does not depend on the text. Existing files are never overwritten.

        Raises:
            StorageWriteError: the output directory is missing, not writable, or full.
        """
        filename = self.next_filename()
        path = self.output_dir / filename

        def _write() -> None:
            with open(path, "xb") as f:
                f.write(self._payload)

        try:
            await asyncio.to_thread(_write)
        except OSError as e:
            raise StorageWriteError(path, e) from e

        logger.info("Audio artifact written", extra={"artifact": filename, "text_length": len(text)})
        return f"{self.url_prefix}/{filename}"
