"""Site navigation: explicit or inferred items, per-locale hrefs, active marking"""

from typing import Any, Iterable, Mapping, Sequence

from polysite.core.models import Document, NavItem
from polysite.core.utils.slug import is_root_slug, pretty_label


BLOG_HREF = '/blog/'
BLOG_LABEL = 'Blog'
NAV_EXCLUDED_SLUGS = {'privacy', 'terms'}
MAX_INFERRED_ITEMS = 7


def ensure_slash(href: str) -> str:
    return href if href.endswith('/') else f'{href}/'


def normalize_href(slug: Any) -> str:
    """Nav href for a configured slug: root slugs and blanks collapse to '/'."""
    s = str(slug or '').strip().strip('/')
    if not s or is_root_slug(s):
        return '/'
    return f'/{s}/'


def dedupe_nav(items: Iterable[NavItem]) -> list[NavItem]:
    """Drop later items whose href was already seen."""
    seen: set[str] = set()
    out = []
    for item in items:
        if item.href not in seen:
            seen.add(item.href)
            out.append(item)
    return out


def _configured_nav(items: list, include_blog: bool, has_posts: bool) -> list[NavItem]:
    nav = [
        NavItem(href=normalize_href(i.get('slug')), label=str(i.get('title') or pretty_label(str(i.get('slug') or '').strip('/'))))
        for i in items
        if isinstance(i, Mapping)
    ]
    if include_blog and has_posts and not any(n.href == BLOG_HREF for n in nav):
        nav.append(NavItem(href=BLOG_HREF, label=BLOG_LABEL))
    return dedupe_nav(nav)


def _inferred_nav(pages: Sequence[Document], has_posts: bool) -> list[NavItem]:
    base = sorted(
        (p for p in pages if p.slug not in NAV_EXCLUDED_SLUGS),
        key=lambda p: p.slug,
    )
    nav: list[NavItem] = []
    if any(is_root_slug(p.slug) for p in base):
        nav.append(NavItem(href='/', label='Home'))
    for p in base:
        href = '/' if is_root_slug(p.slug) else f'/{p.slug}/'
        if not any(n.href == href for n in nav):
            nav.append(NavItem(href=href, label=pretty_label(p.slug)))
        if len(nav) >= MAX_INFERRED_ITEMS:
            break
    if has_posts and not any(n.href == BLOG_HREF for n in nav):
        nav.append(NavItem(href=BLOG_HREF, label=BLOG_LABEL))
    return dedupe_nav(nav)


def build_nav(
    pages: Sequence[Document],
    posts: Sequence[Document],
    theme_config: Mapping[str, Any] = None,
    ) -> list[NavItem]:
    """Base (default-locale, unprefixed) navigation.

    theme_config['nav']['items'] wins when it is a non-empty list of
    {slug, title?} mappings; otherwise the nav is inferred from pages:
    privacy/terms excluded, sorted by slug, Home first, at most 7 entries,
    then Blog when posts exist.
    """
    cfg = (theme_config or {}).get('nav') or {}
    items = cfg.get('items') if isinstance(cfg, Mapping) else None
    if isinstance(items, list) and items:
        return _configured_nav(items, bool(cfg.get('includeBlog')), bool(posts))
    return _inferred_nav(pages, bool(posts))


def strip_locale_prefix(href: str, locales: Iterable[str]) -> str:
    """Locale-neutral form of href: '/fr/about/' -> '/about/', '/fr' -> '/'."""
    for loc in locales:
        prefix = f'/{loc}/'
        if href == f'/{loc}' or href.startswith(prefix):
            return href[len(prefix) - 1:] or '/'
    return href or '/'


def localize_href(href: str, locale: str, default_locale: str, locales: Iterable[str] = ()) -> str:
    """Re-root href under locale; the default locale stays unprefixed."""
    neutral = ensure_slash(strip_locale_prefix(href or '/', locales))
    if not neutral.startswith('/'):
        neutral = f'/{neutral}'
    return neutral if locale == default_locale else f'/{locale}{neutral}'


def localize_nav(
    nav: Sequence[NavItem],
    locale: str,
    default_locale: str,
    locales: Iterable[str] = (),
    ) -> list[NavItem]:
    """Rewrite every href for locale.

    Before re-rooting, any prefix from `locales` is stripped, as is the
    prefix an item got from an earlier localize_nav call. Localizing back
    to the default locale therefore restores the original hrefs even when
    `locales` is omitted.
    """
    locales = list(locales)
    out = []
    for n in nav:
        known = locales + [n._locale_prefix] if n._locale_prefix else locales
        item = n.model_copy(update={'href': localize_href(n.href, locale, default_locale, known)})
        item._locale_prefix = None if locale == default_locale else locale
        out.append(item)
    return out


def mark_active(nav: Sequence[NavItem], current_href: str) -> list[NavItem]:
    """active=True only on items whose href equals current_href exactly."""
    return [n.model_copy(update={'active': n.href == current_href}) for n in nav]
