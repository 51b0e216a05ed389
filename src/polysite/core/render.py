"""Jinja2 environment for theme pages, the fallback switcher, and XML feeds"""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


TEMPLATES_DIR = Path(__file__).resolve().parent.parent / 'templates'


@lru_cache(maxsize=1)
def get_env() -> Environment:
    """Shared environment; autoescaping on for .html and .xml templates."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(['html', 'xml']),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(name: str, **context) -> str:
    return get_env().get_template(name).render(**context)
