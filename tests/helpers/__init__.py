"""Test helper modules for wiki publisher testing.

- fake_wiki: In-memory wiki with the WikiClient interface
"""

from .fake_wiki import FakeWiki

__all__ = [
    'FakeWiki',
]
