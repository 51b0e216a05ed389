"""Raw content record -> canonical Document"""

from datetime import date, datetime
from typing import Any, Mapping, Optional

from polysite.core.models import Document
from polysite.core.utils.html import ensure_html
from polysite.core.utils.markdown import render_markdown
from polysite.core.utils.slug import DEFAULT_SLUG, sanitize_slug


META_TITLE_MAX = 60
META_DESCRIPTION_MAX = 160


def _text(value: Any) -> str:
    """String form of a raw field; falsy values become ''."""
    return str(value) if value else ''


def _truncate(text: str, units: int) -> str:
    """Cut text to at most `units` UTF-16 code units without splitting a surrogate pair."""
    encoded = text.encode('utf-16-le')
    if len(encoded) <= units * 2:
        return text
    return encoded[:units * 2].decode('utf-16-le', errors='ignore')


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not value:
        return None
    text = str(value).strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _media_links(raw: Mapping[str, Any]) -> tuple[str, ...]:
    links = raw.get('media_links')
    if isinstance(links, (list, tuple)):
        return tuple(u for u in links if isinstance(u, str))
    single = raw.get('media_link')
    return (single,) if isinstance(single, str) and single else ()


def _body(raw: Mapping[str, Any], parser_config: str) -> str:
    html = _text(raw.get('html'))
    if not html.strip() and raw.get('markdown'):
        html = render_markdown(str(raw['markdown']), parser_config)
    return ensure_html(html)


def normalize_doc(raw: Mapping[str, Any], parser_config: str = 'gfm-like') -> Document:
    """Canonicalize a raw page/post record. Never raises for malformed fields.

    Missing or unusable fields fall back to safe defaults: 'Untitled' title,
    'page' slug, placeholder body. A missing locale stays None so the
    document can satisfy any locale's lookup.
    """
    if not isinstance(raw, Mapping):
        raw = {}
    locale = _text(raw.get('locale')).strip().lower()
    return Document(
        title=_text(raw.get('title')) or 'Untitled',
        slug=sanitize_slug(_text(raw.get('slug')) or DEFAULT_SLUG),
        html=_body(raw, parser_config),
        meta_title=_truncate(_text(raw.get('meta_title')), META_TITLE_MAX),
        meta_description=_truncate(_text(raw.get('meta_description')), META_DESCRIPTION_MAX),
        author=_text(raw.get('author')) or None,
        category=_text(raw.get('category')) or None,
        published_at=_parse_timestamp(raw.get('published_at')),
        media_links=_media_links(raw),
        locale=locale or None,
    )
