"""Pick the Document variant to render for a (slug, locale) pair"""

from typing import Optional

from polysite.core.index import UNSPECIFIED, LocaleKey, SlugLocaleMap
from polysite.core.models import Document


def pick_doc(
    index: SlugLocaleMap,
    slug: str,
    locale: str,
    fallback_locale: str,
    any_variant: bool = True,
    ) -> Optional[Document]:
    """Resolve slug for locale; first hit wins.

    1. the requested locale's own variant
    2. the locale-agnostic variant
    3. the fallback (default) locale's variant
    4. if any_variant, the remaining variant with the lowest locale code
    """
    by_locale = index.get(slug)
    if not by_locale:
        return None
    for key in (LocaleKey.of(locale), UNSPECIFIED, LocaleKey.of(fallback_locale)):
        if key in by_locale:
            return by_locale[key]
    if not any_variant:
        return None
    rest = sorted(k.code for k in by_locale if not k.is_unspecified)
    return by_locale[LocaleKey(rest[0])] if rest else None


def first_available(
    index: SlugLocaleMap,
    locale: str,
    fallback_locale: str,
    any_variant: bool = True,
    ) -> Optional[Document]:
    """First document resolvable for locale, scanning slugs in index order."""
    for slug in index:
        doc = pick_doc(index, slug, locale, fallback_locale, any_variant)
        if doc is not None:
            return doc
    return None
