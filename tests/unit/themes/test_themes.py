"""Unit tests for themes/registry.py and the built-in themes"""

import asyncio

import pytest

from polysite.core.models import LanguageLink, NavItem, PageMeta, SiteInfo
from polysite.errors import ConfigError, ThemeNotFoundError
from polysite.themes.base import PrepareContext, RenderContext, RenderedPage
from polysite.themes.classic import ClassicTheme
from polysite.themes.cyberchat import CyberchatTheme, palette
from polysite.themes.minimal import MinimalTheme
from polysite.themes.registry import available_themes, get_theme


def _ctx(**overrides) -> RenderContext:
    data = dict(
        hostname="example.com",
        site=SiteInfo(name="Example", has_blog=True),
        path_href="/fr/about/",
        meta=PageMeta(title="About & Co", description="desc", canonical="https://example.com/fr/about/"),
        content_html="<p>Bonjour</p>",
        nav=[NavItem(href="/fr/", label="Home"), NavItem(href="/fr/about/", label="About", active=True)],
        assets_href="/assets/classic/",
        theme_config={},
        locales=["en", "fr"],
        current_locale="fr",
        default_locale="en",
        language_links=[
            LanguageLink(locale="en", href="/about/"),
            LanguageLink(locale="fr", href="/fr/about/", active=True),
        ],
    )
    data.update(overrides)
    return RenderContext(**data)


# --- registry ---

def test_available_themes():
    assert available_themes() == ["classic", "cyberchat", "minimal"]


@pytest.mark.parametrize("name,cls", [
    ("classic", ClassicTheme), ("CLASSIC", ClassicTheme), (None, ClassicTheme), ("", ClassicTheme),
    ("minimal", MinimalTheme), ("cyberchat", CyberchatTheme),
])
def test_get_theme(name, cls):
    assert isinstance(get_theme(name), cls)


def test_get_theme_unknown_fails_fast():
    with pytest.raises(ThemeNotFoundError, match="Unknown theme 'cyberpunk'") as exc:
        get_theme("cyberpunk")
    assert isinstance(exc.value, ConfigError)
    assert exc.value.available == ["classic", "cyberchat", "minimal"]


# --- classic ---

def test_classic_render_includes_own_switcher():
    page = ClassicTheme().render(_ctx())
    assert isinstance(page, RenderedPage)
    assert page.includes_language_switcher
    assert page.html.count("data-lang-switcher") == 1
    assert '<a class="active" href="/fr/about/">FR</a>' in page.html
    assert '<a href="/fr/about/" class="active">About</a>' in page.html
    assert "<title>About &amp; Co</title>" in page.html
    assert "<p>Bonjour</p>" in page.html
    assert 'href="/fr/blog/">Latest Posts' in page.html
    assert 'href="/rss.fr.xml"' in page.html
    assert 'href="/rss.xml"' not in page.html


def test_classic_render_single_locale_has_no_switcher():
    page = ClassicTheme().render(_ctx(locales=["en"], language_links=[]))
    assert not page.includes_language_switcher
    assert "data-lang-switcher" not in page.html


def test_classic_prepare_writes_assets(tmp_path):
    """prepare copies classic.css and writes vars.css from colour overrides."""
    prepared = asyncio.run(ClassicTheme().prepare(
        PrepareContext(public_dir=tmp_path, theme_config={"primaryColor": "#ff0000"})
    ))
    assert prepared.assets_href == "/assets/classic/"
    assert (tmp_path / "assets" / "classic" / "classic.css").exists()
    assert "--color-primary: #ff0000;" in (tmp_path / "assets" / "classic" / "vars.css").read_text()


# --- minimal ---

def test_minimal_render_relies_on_fallback_switcher():
    page = MinimalTheme().render(_ctx())
    assert not page.includes_language_switcher
    assert "data-lang-switcher" not in page.html
    assert '<a href="/fr/about/" class="active">About</a>' in page.html
    assert page.html.rstrip().endswith("</html>")


def test_minimal_prepare_has_no_assets(tmp_path):
    prepared = asyncio.run(MinimalTheme().prepare(PrepareContext(public_dir=tmp_path)))
    assert prepared.assets_href == "/assets/theme/"
    assert not (tmp_path / "assets").exists()


def test_classic_default_locale_links_default_feed():
    page = ClassicTheme().render(_ctx(current_locale="en", path_href="/about/"))
    assert 'href="/rss.xml"' in page.html


# --- cyberchat ---

def test_cyberchat_render_sidebar_layout():
    page = CyberchatTheme().render(_ctx())
    assert not page.includes_language_switcher
    assert "data-lang-switcher" not in page.html
    assert '<a href="/fr/about/" class="active">About</a>' in page.html
    assert '<a href="/fr/">Example</a>' in page.html
    assert "<span>About &amp; Co</span>" in page.html
    assert 'href="/rss.fr.xml"' in page.html
    assert "--bg:#0b0f16;" in page.html
    assert "<p>Bonjour</p>" in page.html


def test_cyberchat_crumb_on_home():
    page = CyberchatTheme().render(_ctx(path_href="/fr/"))
    assert "<span>Home</span>" in page.html


def test_cyberchat_palette_overrides():
    colors = palette({"bg": "#000000", "primaryColor": "#123456", "muted": "red</style>"})
    assert colors["bg"] == "#000000"
    assert colors["primary"] == "#123456"
    assert colors["muted"] == "red/style>"
    assert colors["sidebar"] == "#0e1420"
    assert colors["border"] == "#1f2937"


def test_cyberchat_prepare_creates_assets_dir(tmp_path):
    prepared = asyncio.run(CyberchatTheme().prepare(PrepareContext(public_dir=tmp_path)))
    assert prepared.assets_href == "/assets/cyberchat/"
    assert (tmp_path / "assets" / "cyberchat").is_dir()
