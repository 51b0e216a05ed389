"""Shared markdown-it parser instances"""

from functools import lru_cache

from markdown_it import MarkdownIt


@lru_cache(maxsize=None)
def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """MarkdownIt instance for the given preset name, built once per preset."""
    return MarkdownIt(preset, options_update={"linkify": False})


def render_markdown(text: str, preset: str = 'gfm-like') -> str:
    return make_parser(preset).render(text)
