"""Typed exception hierarchy for publisher errors."""

from typing import Optional

from src.wiki_client.errors import PublishError


class PublisherError(PublishError):
    """Base exception for all publisher errors."""
    pass


class LocalDocsError(PublisherError):
    """Raised when a local docs file or directory cannot be read."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
