"""Publishing engine: mirror a docs tree into the wiki and archive orphans."""

from .archiver import Archiver
from .errors import LocalDocsError, PublisherError
from .models import PARENT_PAGE_CONTENT, ArchiveResult, PageMove
from .uploader import Uploader

__all__ = [
    'Archiver',
    'Uploader',
    'ArchiveResult',
    'PageMove',
    'PARENT_PAGE_CONTENT',
    'PublisherError',
    'LocalDocsError',
]
