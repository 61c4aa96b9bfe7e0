import sys
import os

import pytest

# Ensure the project root is in sys.path so `from chunk_relay.main import create_app` works
# with relative imports inside the chunk_relay package
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from chunk_relay.config import Settings  # noqa: E402


@pytest.fixture
def settings(tmp_path):
    return Settings(
        openai_api_key="sk-test",
        translation_url="https://translate.test/v1/audio/translations",
        upload_dir=str(tmp_path / "chunks"),
        tts_dir=str(tmp_path / "tts"),
        static_dir=str(tmp_path / "public"),
    )
