"""Uploader that mirrors a local docs tree into the wiki.

Every file and every directory under the docs folder becomes exactly one
wiki page. Files keep their text as page content (with the extension dropped
from the page name); directories become placeholder parent pages. Pages are
written parent first so the wiki never sees a child without its parent.
"""

import logging
import os
from typing import List, Optional

from src.publisher.errors import LocalDocsError
from src.publisher.models import PARENT_PAGE_CONTENT
from src.wiki_client.paths import join_page_path, normalize_path, strip_extension

logger = logging.getLogger(__name__)


class Uploader:
    """Walks a local directory tree and upserts each entry as a wiki page.

    The uploader returns the ordered list of relative page paths it wrote.
    That list is the ground truth the Archiver uses to decide which remote
    pages are orphans.

    Example:
        >>> uploader = Uploader("docs", client, path_prefix="Docs")
        >>> uploaded = uploader.sync()
        >>> print(f"Uploaded {len(uploaded)} page(s)")
    """

    def __init__(self, docs_folder: str, client, path_prefix: str = ""):
        """Initialize the uploader.

        Args:
            docs_folder: Root of the local docs tree
            client: WikiClient (or compatible) used for upserts
            path_prefix: Wiki path under which the docs tree is published
        """
        self.docs_folder = docs_folder
        self.client = client
        self.path_prefix = path_prefix

    def sync(self, directory: Optional[str] = None) -> List[str]:
        """Upload a directory and everything beneath it.

        Args:
            directory: Directory to upload; defaults to the docs folder

        Returns:
            Normalized page paths relative to the path prefix, in the order
            they were upserted (each directory before its contents)

        Raises:
            LocalDocsError: If a directory or file cannot be read
            WikiError: If an upsert fails
        """
        directory = directory or self.docs_folder
        logger.info(f"Traversing {directory}")

        try:
            entries = sorted(os.listdir(directory))
        except OSError as e:
            raise LocalDocsError(directory, "list", str(e)) from e

        uploaded: List[str] = []
        for entry in entries:
            entry_path = os.path.join(directory, entry)
            is_directory = os.path.isdir(entry_path)

            relative_path = os.path.relpath(entry_path, self.docs_folder)
            if is_directory:
                content = PARENT_PAGE_CONTENT
            else:
                content = self._read_file(entry_path)
                relative_path = strip_extension(relative_path)

            page_path = normalize_path(relative_path)
            self.client.upsert_page(join_page_path(self.path_prefix, page_path), content)
            uploaded.append(page_path)

            if is_directory:
                uploaded.extend(self.sync(entry_path))

        return uploaded

    @staticmethod
    def _read_file(file_path: str) -> str:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LocalDocsError(file_path, "read", str(e)) from e
