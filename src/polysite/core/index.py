"""Slug -> locale -> Document index with an explicit locale-agnostic bucket"""

from dataclasses import dataclass
from typing import Iterable, Optional

from polysite.core.models import Document


@dataclass(frozen=True)
class LocaleKey:
    """Index key for a document's locale. code=None is the locale-agnostic bucket."""
    code: Optional[str] = None

    @classmethod
    def unspecified(cls) -> 'LocaleKey':
        return cls(None)

    @classmethod
    def of(cls, locale: Optional[str]) -> 'LocaleKey':
        return cls(locale.lower()) if locale else cls.unspecified()

    @property
    def is_unspecified(self) -> bool:
        return self.code is None


UNSPECIFIED = LocaleKey.unspecified()

SlugLocaleMap = dict[str, dict[LocaleKey, Document]]


def index_key(slug: str) -> str:
    """Index slot for a slug: surrounding slashes stripped, empty -> 'home'."""
    return slug.strip('/') or 'home'


def build_index(documents: Iterable[Document]) -> SlugLocaleMap:
    """Group documents by slug, then by locale. Later (slug, locale) duplicates win."""
    index: SlugLocaleMap = {}
    for doc in documents:
        index.setdefault(index_key(doc.slug), {})[LocaleKey.of(doc.locale)] = doc
    return index
