"""Unit tests for core/utils/markdown.py"""

from polysite.core.utils.markdown import make_parser, render_markdown


def test_make_parser_cached_per_preset():
    """The same preset reuses one parser; a different preset gets its own."""
    assert make_parser("gfm-like") is make_parser("gfm-like")
    assert make_parser("commonmark") is not make_parser("gfm-like")


def test_render_markdown_does_not_linkify():
    html = render_markdown("# Title\n\nsee https://example.com")
    assert "<h1>Title</h1>" in html
    assert "<a " not in html
