"""Local directories for incoming chunks and synthesized artifacts."""

import asyncio
import logging
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from .exceptions import StorageError

logger = logging.getLogger(__name__)


class TransientStorage:
    """Owns the upload directory (emptied as chunks are consumed) and the output directory."""

    def __init__(self, upload_dir: str | Path, output_dir: str | Path) -> None:
        self.upload_dir = Path(upload_dir)
        self.output_dir = Path(output_dir)

    def ensure_output_directory(self) -> None:
        """Create the artifact directory if it does not exist yet."""
        self._ensure_directory(self.output_dir)

    def ensure_upload_directory(self) -> None:
        """Create the directory incoming chunks are written to."""
        self._ensure_directory(self.upload_dir)

    @staticmethod
    def _ensure_directory(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(path, e) from e

    async def persist_chunk(self, data: bytes) -> Path:
        """Write an uploaded chunk to a new file in the upload directory."""
        path = self.upload_dir / uuid.uuid4().hex

        def _write() -> None:
            with open(path, "xb") as f:
                f.write(data)

        try:
            await asyncio.to_thread(_write)
        except OSError as e:
            raise StorageError(path, e) from e
        return path

    async def read_chunk(self, path: Path) -> bytes:
        """Load a persisted chunk back into memory."""
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise StorageError(path, e) from e

    async def discard_chunk(self, path: Path) -> None:
        """Best-effort delete: a leaked temp file is logged, never raised."""
        try:
            await asyncio.to_thread(path.unlink)
        except OSError as e:
            logger.warning("Could not discard chunk file", extra={"path": str(path), "error": str(e)})

    @asynccontextmanager
    async def chunk_file(self, data: bytes) -> AsyncIterator[Path]:
        """Persist a chunk for the duration of the block and discard it on every exit path."""
        path = await self.persist_chunk(data)
        try:
            yield path
        finally:
            await self.discard_chunk(path)
