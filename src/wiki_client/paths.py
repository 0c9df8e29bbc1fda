"""Canonical form for wiki page paths.

Local file-system paths and paths reported by the wiki API are compared in
one canonical form: forward slashes only, no ``.``/``..`` segments, no
repeated separators and no leading separator. Every comparison between a
locally derived path and a remotely derived path must go through
normalize_path() on both sides.
"""

import posixpath
import re

_EXTENSION = re.compile(r"\.[^/.]+$")


def normalize_path(path: str) -> str:
    """Return the canonical form of a page path.

    Example:
        >>> normalize_path("/Docs\\\\Apex/./Classes//")
        'Docs/Apex/Classes'
    """
    if not path:
        return ""

    normalized = posixpath.normpath(path.replace("\\", "/")).lstrip("/")
    if normalized == ".":
        return ""
    return normalized


def join_page_path(*parts: str) -> str:
    """Join path segments and normalize the result, ignoring empty parts."""
    segments = [normalize_path(part) for part in parts]
    return normalize_path("/".join(segment for segment in segments if segment))


def strip_extension(path: str) -> str:
    """Drop the extension of the final segment.

    ``classes/Foo.cls.md`` becomes ``classes/Foo.cls``. A final segment with
    no dot, or one that is nothing but an extension (``.pages``), is returned
    unchanged.
    """
    head, _, name = path.replace("\\", "/").rpartition("/")
    stripped = _EXTENSION.sub("", name)
    if not stripped:
        return path
    return f"{head}/{stripped}" if head else stripped


def is_within(path: str, root: str) -> bool:
    """Return True when path equals root or lies beneath it."""
    path = normalize_path(path)
    root = normalize_path(root)
    if not root:
        return True
    return path == root or path.startswith(root + "/")


def relative_to(path: str, root: str) -> str:
    """Return path relative to root; both sides are normalized first."""
    path = normalize_path(path)
    root = normalize_path(root)
    if not root:
        return path
    if path == root:
        return ""
    return normalize_path(path[len(root):])
