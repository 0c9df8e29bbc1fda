"""Typed exception hierarchy for CLI-related errors.

This module defines all custom exceptions used by the CLI.
All exceptions inherit from CLIError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional

from src.wiki_client.errors import PublishError


class CLIError(PublishError):
    """Base exception for all CLI-related errors."""
    pass


class DocsNotFoundError(CLIError):
    """Raised when the local docs folder does not exist."""

    def __init__(self, docs_path: str):
        super().__init__(f"Docs folder not found at {docs_path}")
        self.docs_path = docs_path


class GeneratorError(CLIError):
    """Raised when the documentation generator cannot run or fails."""

    def __init__(self, message: str, generator_output: Optional[str] = None):
        full_message = message
        if generator_output:
            full_message += f"\n{generator_output.strip()}"
        super().__init__(full_message)
        self.generator_output = generator_output
