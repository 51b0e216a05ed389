"""Unit tests for core/utils/slug.py"""

import pytest

from polysite.core.utils.slug import pretty_label, sanitize_slug, slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-chrs"),
    ("Café Crème", "cafe-creme"),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify converts text to lowercase hyphenated slug."""
    assert slugify(text) == expected


def test_slugify_preserves_hyphens():
    """slugify keeps existing hyphens intact."""
    assert slugify("already-slugified") == "already-slugified"


@pytest.mark.parametrize("raw,expected", [
    ("/about/", "about"),
    ("//blog//", "blog"),
    ("About Us", "about-us"),
    ("../etc/passwd", "etcpasswd"),
    ("", "page"),
    ("///", "page"),
    ("???", "page"),
])
def test_sanitize_slug(raw, expected):
    """sanitize_slug strips slashes and path-unsafe characters; empty results become 'page'."""
    assert sanitize_slug(raw) == expected


@pytest.mark.parametrize("slug,expected", [
    ("about-us", "About Us"),
    ("contact", "Contact"),
    ("home", "Home"),
    ("index", "Home"),
    ("", "Home"),
])
def test_pretty_label(slug, expected):
    assert pretty_label(slug) == expected
