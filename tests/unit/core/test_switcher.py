"""Unit tests for core/switcher.py"""

from polysite.core.switcher import (
    apply_fallback_switcher, build_lang_switcher, href_for_locale, language_links,
)


LOCALES = ["en", "fr", "de"]


def test_href_for_locale_rerooting():
    assert href_for_locale("/fr/about/", "en", "en", LOCALES) == "/about/"
    assert href_for_locale("/fr/about/", "de", "en", LOCALES) == "/de/about/"
    assert href_for_locale("/", "fr", "en", LOCALES) == "/fr/"
    assert href_for_locale("/fr/", "en", "en", LOCALES) == "/"


def test_language_links_cover_every_locale():
    links = language_links("/fr/about/", LOCALES, "fr", "en")
    assert [(l.locale, l.href, l.active) for l in links] == [
        ("en", "/about/", False),
        ("fr", "/fr/about/", True),
        ("de", "/de/about/", False),
    ]


def test_language_links_need_two_locales():
    assert language_links("/about/", ["en"], "en", "en") == []
    assert build_lang_switcher("/about/", ["en"], "en", "en") == ""


def test_language_links_respect_max():
    assert len(language_links("/", LOCALES, "en", "en", max_locales=2)) == 2


def test_build_lang_switcher_markup():
    """The fragment carries the marker attribute and one link per locale."""
    html = build_lang_switcher("/blog/hello/", LOCALES, "de", "en")
    assert "data-lang-switcher" in html
    assert 'href="/blog/hello/">EN</a>' in html
    assert '<a class="active" href="/de/blog/hello/">DE</a>' in html
    assert 'href="/fr/blog/hello/">FR</a>' in html


def test_fallback_injected_before_last_body_close():
    page = "<html><body><p>x</p></BODY></html>"
    assert apply_fallback_switcher(page, False, "<div>s</div>") == "<html><body><p>x</p><div>s</div></BODY></html>"


def test_fallback_appended_without_body_close():
    assert apply_fallback_switcher("<p>x</p>", False, "<div>s</div>") == "<p>x</p><div>s</div>"


def test_fallback_skipped_when_theme_has_switcher():
    page = "<html><body></body></html>"
    assert apply_fallback_switcher(page, True, "<div>s</div>") == page


def test_empty_fragment_leaves_page_unchanged():
    page = "<html><body></body></html>"
    assert apply_fallback_switcher(page, False, "") == page
