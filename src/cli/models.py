"""Data models for CLI operations.

This module defines all data models used by the CLI module.
All models use dataclasses for clean, type-safe data structures,
following the patterns established in src/publisher/models.py.
"""

from dataclasses import dataclass
from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully (including "archive skipped")
    - GENERAL_ERROR (1): Missing local prerequisites, generator or filesystem failures
    - AUTH_ERROR (3): The access token was rejected
    - NETWORK_ERROR (4): API unreachable or an API call failed

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


@dataclass
class PublishSummary:
    """Summary of a publish run for display to the user.

    Attributes:
        uploaded_count: Pages created or updated from the docs folder
        archived_count: Orphan pages moved into the archive
        skipped_count: Orphans already carried along by an ancestor's move
        created_parent_count: Placeholder pages created in the archive
        archive_enabled: False when no archive prefix was given
    """
    uploaded_count: int = 0
    archived_count: int = 0
    skipped_count: int = 0
    created_parent_count: int = 0
    archive_enabled: bool = True
