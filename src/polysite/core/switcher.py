"""Language switcher: locale-equivalent hrefs and the fallback switcher fragment"""

from typing import Sequence

from polysite.core.models import LanguageLink
from polysite.core.nav import strip_locale_prefix
from polysite.core.render import render_template
from polysite.core.utils.html import inject_before_close_body


SWITCHER_TEMPLATE = 'lang_switcher.html'
DEFAULT_MAX_LOCALES = 6


def href_for_locale(current_href: str, target_locale: str, default_locale: str, locales: Sequence[str]) -> str:
    """The page at current_href, as served for target_locale."""
    neutral = strip_locale_prefix(current_href, locales)
    if not neutral.startswith('/'):
        neutral = f'/{neutral}'
    if target_locale == default_locale:
        return neutral
    return f'/{target_locale}{neutral}'


def language_links(
    current_href: str,
    locales: Sequence[str],
    current_locale: str,
    default_locale: str,
    max_locales: int = DEFAULT_MAX_LOCALES,
    ) -> list[LanguageLink]:
    """One link per locale (first max_locales only); empty when the site has fewer than two."""
    if len(locales) < 2:
        return []
    return [
        LanguageLink(
            locale=loc,
            href=href_for_locale(current_href, loc, default_locale, locales),
            active=loc == current_locale,
        )
        for loc in locales[:max_locales]
    ]


def build_lang_switcher(
    current_href: str,
    locales: Sequence[str],
    current_locale: str,
    default_locale: str,
    max_locales: int = DEFAULT_MAX_LOCALES,
    ) -> str:
    """Floating switcher markup, or '' when there is nothing to switch to."""
    links = language_links(current_href, locales, current_locale, default_locale, max_locales)
    if not links:
        return ''
    return render_template(SWITCHER_TEMPLATE, links=links)


def apply_fallback_switcher(html: str, includes_switcher: bool, fragment: str) -> str:
    """Add fragment to a rendered page unless the theme already rendered its own switcher."""
    if includes_switcher:
        return html
    return inject_before_close_body(html, fragment)
