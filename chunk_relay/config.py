"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Required at request time; an empty key fails every translation attempt
    openai_api_key: str = ""

    translation_url: str = "https://api.openai.com/v1/audio/translations"
    translation_model: str = "whisper-1"
    translation_response_format: str = "text"
    translation_timeout_seconds: float = 30.0

    upload_dir: str = "chunks"
    tts_dir: str = "tts"
    tts_url_prefix: str = "/tts"
    static_dir: str = "public"
    default_chunk_filename: str = "chunk.webm"

    cors_origins: list[str] = ["*"]

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Returns the process-wide settings instance."""
    return Settings()
