"""Slug sanitization for route segments and nav labels"""

import re
import unicodedata


ROOT_SLUGS = {'home', 'index'}
DEFAULT_SLUG = 'page'


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug (may be empty)."""
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = text.lower()
    text = re.sub(r'[^a-z0-9\s_-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def sanitize_slug(raw: str) -> str:
    """Strip surrounding slashes, then slugify; an empty result becomes 'page'."""
    return slugify(raw.strip().strip('/')) or DEFAULT_SLUG


def is_root_slug(slug: str) -> bool:
    return slug in ROOT_SLUGS


def pretty_label(slug: str = '') -> str:
    """Human label for a slug: 'about-us' -> 'About Us'; root slugs -> 'Home'."""
    if not slug or is_root_slug(slug):
        return 'Home'
    return re.sub(r'\b\w', lambda m: m.group(0).upper(), slug.replace('-', ' '))
