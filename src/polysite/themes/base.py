"""Theme interface: optional asset preparation plus page rendering"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from polysite.core.models import LanguageLink, NavItem, PageMeta, SiteInfo


@dataclass(frozen=True)
class PrepareContext:
    public_dir: Path
    theme_config: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PreparedTheme:
    assets_href: str


@dataclass(frozen=True)
class RenderContext:
    """Everything a theme needs to produce one complete page."""
    hostname: str
    site: SiteInfo
    path_href: str
    meta: PageMeta
    content_html: str
    nav: list[NavItem]
    assets_href: str
    theme_config: dict[str, Any]
    locales: list[str]
    current_locale: str
    default_locale: str
    language_links: list[LanguageLink] = field(default_factory=list)


@dataclass(frozen=True)
class RenderedPage:
    html: str
    includes_language_switcher: bool = False


class Theme(ABC):
    """A named page renderer. Subclasses register themselves in polysite.themes.registry."""
    name: str = ''

    async def prepare(self, ctx: PrepareContext) -> PreparedTheme:
        """Copy or generate static assets; the default has none to copy."""
        return PreparedTheme(assets_href=f'/assets/{self.name}/')

    @abstractmethod
    def render(self, ctx: RenderContext) -> RenderedPage:
        ...
