"""Page tree model and flattening for recursive wiki listings.

A ``GET pages`` call with ``recursionLevel=Full`` returns the requested page
with its whole subtree nested in ``subPages``. The publisher only needs the
paths, flattened in the order the service returns them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from .paths import is_within, normalize_path, relative_to

logger = logging.getLogger(__name__)


@dataclass
class WikiPageNode:
    """A node in the Azure DevOps wiki page hierarchy.

    Attributes:
        path: Page path as reported by the API (e.g. "/Docs/Apex Classes")
        sub_pages: Child nodes, in the order returned by the API
        order: Position among siblings, if reported
        is_parent_page: Whether the service reports the page as having children
    """
    path: str
    sub_pages: List['WikiPageNode'] = field(default_factory=list)
    order: int = 0
    is_parent_page: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WikiPageNode':
        """Build a node (and its subtree) from an API ``WikiPage`` payload."""
        return cls(
            path=data.get("path") or "",
            sub_pages=[cls.from_dict(child) for child in data.get("subPages") or []],
            order=data.get("order") or 0,
            is_parent_page=bool(data.get("isParentPage", False)),
        )


def flatten_page_tree(
    data: Union[WikiPageNode, List[WikiPageNode]],
    root_path: str,
) -> List[str]:
    """Flatten a page tree into paths relative to root_path.

    Traversal is depth-first with each parent emitted before its subtree.
    The node for root_path itself is not emitted. Nodes outside root_path
    are skipped with a warning, but their children are still visited.

    Args:
        data: Root node, or list of nodes, as parsed from the API
        root_path: The path the listing was requested for

    Returns:
        Normalized paths relative to root_path
    """
    nodes = data if isinstance(data, list) else [data]
    pages: List[str] = []

    for node in nodes:
        path = normalize_path(node.path)
        if not is_within(path, root_path):
            logger.warning(f"Ignoring page outside {root_path!r}: {node.path}")
        else:
            relative = relative_to(path, root_path)
            if relative:
                pages.append(relative)

        if node.sub_pages:
            pages.extend(flatten_page_tree(node.sub_pages, root_path))

    return pages
