"""Single-column theme with inline styles and no assets"""

from polysite.core.render import render_template
from polysite.themes.base import PrepareContext, PreparedTheme, RenderContext, RenderedPage, Theme
from polysite.themes.registry import register_theme


@register_theme
class MinimalTheme(Theme):
    name = 'minimal'

    async def prepare(self, ctx: PrepareContext) -> PreparedTheme:
        return PreparedTheme(assets_href='/assets/theme/')

    def render(self, ctx: RenderContext) -> RenderedPage:
        # No switcher of its own; the builder injects the fallback one.
        return RenderedPage(html=render_template('minimal/page.html', ctx=ctx))
