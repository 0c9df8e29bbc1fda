"""Typed exception hierarchy for Azure DevOps wiki errors.

This module defines all custom exceptions used by the wiki client library.
All exceptions inherit from WikiError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional


class PublishError(Exception):
    """Base exception for all wiki-publisher errors.

    Use this to catch any application-level error from the publish tool.
    """
    pass


class WikiError(PublishError):
    """Base exception for all wiki API errors."""
    pass


class InvalidCredentialsError(WikiError):
    """Raised when the personal access token is rejected."""

    def __init__(self, endpoint: str, status_code: Optional[int] = None):
        message = f"Access token was rejected (endpoint: {endpoint})"
        if status_code:
            message += f" [HTTP {status_code}]"
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class PageNotFoundError(WikiError):
    """Raised when a page is required to exist but does not."""

    def __init__(self, path: str):
        super().__init__(f"Wiki page {path} not found")
        self.path = path


class APIUnreachableError(WikiError):
    """Raised when the Azure DevOps API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(WikiError):
    """Raised when an API call fails for any other reason."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
