"""Command-line interface for publishing docs to an Azure DevOps wiki.

This package provides the `wiki-publish` CLI tool that runs the docs
generator, uploads the generated markdown and archives orphaned pages,
with terminal output and exit-code handling.
"""

from .publish_command import PublishCommand
from .docs_generator import DocsGenerator
from .models import ExitCode, PublishSummary
from .errors import (
    CLIError,
    DocsNotFoundError,
    GeneratorError,
)

__all__ = [
    'PublishCommand',
    'DocsGenerator',
    'ExitCode',
    'PublishSummary',
    'CLIError',
    'DocsNotFoundError',
    'GeneratorError',
]
