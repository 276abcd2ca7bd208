"""Test helpers."""

from tests.test_utils.helpers.fixture import fixture_path, read_fixture
from tests.test_utils.helpers.sitemap import locs, url_fragments

__all__ = [
    "fixture_path",
    "locs",
    "read_fixture",
    "url_fragments",
]
