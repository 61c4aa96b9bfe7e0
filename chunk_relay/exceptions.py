"""Errors raised along the chunk processing pipeline."""

from pathlib import Path


class RelayError(Exception):
    """Base class for every error the relay converts into an HTTP response."""

    http_status = 500


class ConfigurationError(RelayError):
    """Raised when a required setting (the service credential) is missing."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"Missing {setting}")


class ValidationError(RelayError):
    """Raised when the request does not carry the expected input."""

    http_status = 400


class RemoteServiceError(RelayError):
    """Raised when the translation service answers with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Translation service error {status_code}: {body}")


class TransportError(RelayError):
    """Raised when the translation service cannot be reached."""

    def __init__(self, url: str, cause: Exception | None = None):
        self.url = url
        self.cause = cause
        super().__init__(f"Could not reach translation service at {url}: {cause}")


class StorageError(RelayError):
    """Raised when a local filesystem operation fails."""

    def __init__(self, path: str | Path, cause: Exception | None = None):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Storage failure on '{self.path}': {cause}")


class StorageWriteError(StorageError):
    """Raised when a synthesized artifact cannot be written."""
