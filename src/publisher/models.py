"""Data models for publisher operations.

All models use dataclasses for clean, type-safe data structures.
"""

from dataclasses import dataclass, field
from typing import List

# Content written for directories and for archive ancestors created on demand
PARENT_PAGE_CONTENT = "This is a parent page. Please see sub-pages for more information."


@dataclass(frozen=True)
class PageMove:
    """A page relocated by the archiver.

    Attributes:
        source: Full page path before the move
        destination: Full page path after the move (may carry a numeric suffix)
    """
    source: str
    destination: str


@dataclass
class ArchiveResult:
    """Outcome of one archiver run.

    Attributes:
        moved: Pages relocated into the archive, in processing order
        skipped: Orphan paths that no longer existed when their turn came,
            usually because an ancestor's move carried them along
        created_parents: Placeholder pages created in the archive so that
            moves had an existing parent

    Example:
        >>> result = ArchiveResult()
        >>> result.moved.append(PageMove("Docs/Old", "Archive/Old"))
        >>> result.archived_count
        1
    """
    moved: List[PageMove] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    created_parents: List[str] = field(default_factory=list)

    @property
    def archived_count(self) -> int:
        return len(self.moved)
