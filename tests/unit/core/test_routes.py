"""Unit tests for core/routes.py"""

from pathlib import PurePosixPath

import pytest

from polysite.core.models import DocumentRole
from polysite.core.routes import canonical_url, plan_route


HOST = "example.com"


def test_default_locale_page_route(doc):
    """Default-locale pages live at /{slug}/ with no locale prefix."""
    route = plan_route(doc("about"), DocumentRole.page, "en", "en", HOST)
    assert route.fs_path == "/about/"
    assert route.public_href == "/about/"
    assert route.canonical == "https://example.com/about/"
    assert route.output_file == PurePosixPath("about/index.html")


def test_other_locale_page_route(doc):
    """Non-default locales nest the whole tree under /{locale}/."""
    route = plan_route(doc("about"), DocumentRole.page, "fr", "en", HOST)
    assert route.fs_path == "/about/"
    assert route.public_href == "/fr/about/"
    assert route.output_file == PurePosixPath("fr/about/index.html")


@pytest.mark.parametrize("slug", ["home", "index"])
def test_root_slugs_collapse_to_root(doc, slug):
    route = plan_route(doc(slug), DocumentRole.page, "en", "en", HOST)
    assert route.public_href == "/"
    assert route.output_file == PurePosixPath("index.html")


def test_home_flag_pins_any_document_to_root(doc):
    """A home substitute renders at the locale root regardless of its slug."""
    route = plan_route(doc("about"), DocumentRole.page, "fr", "en", HOST, home=True)
    assert route.fs_path == "/"
    assert route.public_href == "/fr/"
    assert route.output_file == PurePosixPath("fr/index.html")


def test_post_routes_live_under_blog(doc):
    en = plan_route(doc("hello"), DocumentRole.post, "en", "en", HOST)
    fr = plan_route(doc("hello"), DocumentRole.post, "fr", "en", HOST)
    assert en.public_href == "/blog/hello/"
    assert fr.public_href == "/fr/blog/hello/"
    assert fr.output_file == PurePosixPath("fr/blog/hello/index.html")


@pytest.mark.parametrize("slug", ["home", "about", "a-b"])
@pytest.mark.parametrize("role", list(DocumentRole))
def test_locale_prefix_rule(doc, slug, role):
    """Non-default hrefs start with /{L}/; default hrefs never do."""
    assert plan_route(doc(slug), role, "de", "en", HOST).public_href.startswith("/de/")
    assert not plan_route(doc(slug), role, "en", "en", HOST).public_href.startswith("/en/")


def test_canonical_url():
    assert canonical_url(HOST, "/fr/") == "https://example.com/fr/"
