"""Root pytest configuration for all tests."""

import logging

import pytest

from tests.helpers.fake_wiki import FakeWiki

# urllib3 logs connection retries at WARNING; keep test output readable.
logging.getLogger("urllib3").setLevel(logging.ERROR)


@pytest.fixture
def fake_wiki():
    """Empty in-memory wiki."""
    return FakeWiki()
