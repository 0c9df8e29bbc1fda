"""Archiver that relocates wiki pages no longer present in the docs tree.

Orphaned pages are moved under an archive root instead of being deleted.
Moving a page carries its whole subtree, so later orphans in the same
subtree are usually gone by the time they are processed; those are skipped.
"""

import logging
import time
from typing import Iterable, List, Set

from src.publisher.models import PARENT_PAGE_CONTENT, ArchiveResult, PageMove
from src.wiki_client.paths import is_within, join_page_path, normalize_path, relative_to

logger = logging.getLogger(__name__)


class Archiver:
    """Reconciles the wiki against the set of pages just uploaded.

    For each page listed under the path prefix that is not in the uploaded
    set, the archiver:
    1. Skips it if it no longer exists (already moved with an ancestor)
    2. Creates any missing ancestor pages of the archive destination
    3. Picks a free destination, suffixing a millisecond timestamp on collision
    4. Moves the page

    Ancestor pages created or confirmed during a reconcile() call are
    remembered for the rest of that call only.

    Example:
        >>> archiver = Archiver(client, path_prefix="Docs", archive_path="Archive")
        >>> result = archiver.reconcile(uploaded_pages)
        >>> print(f"Archived {result.archived_count} page(s)")
    """

    def __init__(self, client, path_prefix: str, archive_path: str):
        """Initialize the archiver.

        Args:
            client: WikiClient (or compatible) used for reads, upserts and moves
            path_prefix: Wiki path the docs tree is published under
            archive_path: Wiki path orphaned pages are moved under
        """
        self.client = client
        self.path_prefix = normalize_path(path_prefix)
        self.archive_path = normalize_path(archive_path)

    def reconcile(self, uploaded_pages: Iterable[str]) -> ArchiveResult:
        """Archive every page under the prefix that was not just uploaded.

        Args:
            uploaded_pages: Relative page paths returned by Uploader.sync()

        Returns:
            ArchiveResult describing the moves, skips and created parents

        Raises:
            WikiError: If listing, upserting or moving fails
        """
        uploaded = {normalize_path(page) for page in uploaded_pages}
        current_pages = self.client.list_all_pages(self.path_prefix)

        # The archive may live beneath the prefix; its pages are never orphans
        archive_inside_prefix = (
            is_within(self.archive_path, self.path_prefix)
            and self.archive_path != self.path_prefix
        )
        archive_relative = relative_to(self.archive_path, self.path_prefix)

        result = ArchiveResult()
        archived_parents: Set[str] = set()

        for page in current_pages:
            normalized_page = normalize_path(page)

            if normalized_page in uploaded:
                continue

            if archive_inside_prefix and is_within(normalized_page, archive_relative):
                logger.debug(f"Leaving archived page in place: {normalized_page}")
                continue

            logger.info(f"Archiving page: {normalized_page}")
            self._archive_page(
                join_page_path(self.path_prefix, normalized_page),
                join_page_path(self.archive_path, normalized_page),
                archived_parents,
                result,
            )

        logger.info(
            f"Archived {result.archived_count} page(s), "
            f"skipped {len(result.skipped)} already moved"
        )
        return result

    def _archive_page(
        self,
        source: str,
        destination: str,
        archived_parents: Set[str],
        result: ArchiveResult,
    ) -> None:
        """Relocate one orphan page into the archive."""
        if self.client.get_page_etag(source) is None:
            logger.debug(f"Page already moved, skipping: {source}")
            result.skipped.append(source)
            return

        result.created_parents.extend(
            self._create_parent_pages(destination, archived_parents)
        )

        destination = self._free_destination(destination)

        self.client.move_page(source, destination)
        result.moved.append(PageMove(source=source, destination=destination))

    def _create_parent_pages(self, path: str, archived_parents: Set[str]) -> List[str]:
        """Make sure every ancestor of path exists, creating placeholders.

        The wiki rejects a move into a parent that does not exist, so this
        runs before each move.

        Returns:
            The ancestor paths that had to be created
        """
        created = []
        segments = normalize_path(path).split("/")[:-1]

        for index in range(len(segments)):
            parent_path = "/".join(segments[:index + 1])
            if parent_path in archived_parents:
                continue

            if self.client.get_page_etag(parent_path) is None:
                logger.info(f"Creating archive parent page: {parent_path}")
                self.client.upsert_page(parent_path, PARENT_PAGE_CONTENT)
                created.append(parent_path)

            archived_parents.add(parent_path)

        return created

    def _free_destination(self, destination: str) -> str:
        """Return destination, or a timestamp-suffixed variant if it is taken."""
        if self.client.get_page_etag(destination) is None:
            return destination

        suffix = time.time_ns() // 1_000_000
        candidate = f"{destination}-{suffix}"
        while self.client.get_page_etag(candidate) is not None:
            suffix += 1
            candidate = f"{destination}-{suffix}"

        logger.warning(f"Archive path {destination} exists, using {candidate}")
        return candidate
