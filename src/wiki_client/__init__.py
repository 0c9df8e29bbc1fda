"""Azure DevOps wiki client library for publishing.

This package provides Python abstractions over the Azure DevOps Wiki REST
API, limited to the operations needed to publish and archive pages.
"""

from .errors import (
    PublishError,
    WikiError,
    InvalidCredentialsError,
    PageNotFoundError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "PublishError",
    "WikiError",
    "InvalidCredentialsError",
    "PageNotFoundError",
    "APIUnreachableError",
    "APIAccessError",
]
