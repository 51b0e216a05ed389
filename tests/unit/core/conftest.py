"""Shared fixtures for core unit tests"""

import pytest

from polysite.core.models import Document


def make_doc(slug: str, locale: str = None, title: str = None, html: str = "<p>body</p>", **extra) -> Document:
    return Document(slug=slug, locale=locale, title=title or slug.title(), html=html, **extra)


@pytest.fixture(name="doc")
def doc_fixture():
    """Factory fixture: doc('about', 'fr') -> Document."""
    return make_doc
