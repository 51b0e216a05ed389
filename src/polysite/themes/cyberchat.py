"""Dark sidebar 'cyberchat' theme: inline colour palette, no bundled assets"""

import asyncio

from polysite.core.feeds import feed_filename
from polysite.core.render import render_template
from polysite.themes.base import PrepareContext, PreparedTheme, RenderContext, RenderedPage, Theme
from polysite.themes.registry import register_theme


DEFAULT_FONT = 'Inter, ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Ubuntu, Cantarell, sans-serif'
BORDER = '#1f2937'

# palette key -> (theme config key, default)
PALETTE = {
    'bg': ('bg', '#0b0f16'),
    'sidebar': ('sidebar', '#0e1420'),
    'surface': ('surface', '#111827'),
    'fg': ('fg', '#e5e7eb'),
    'muted': ('muted', '#94a3b8'),
    'primary': ('primaryColor', '#00e5ff'),
    'accent': ('accentColor', '#ff4ecd'),
}


def _css_value(value) -> str:
    # Values land inside <style>; a '<' could close it.
    return str(value).replace('<', '').replace(';', '').strip()


def palette(theme_config: dict) -> dict[str, str]:
    """CSS custom property values, config overrides first."""
    colors = {
        name: _css_value(theme_config.get(key) or default)
        for name, (key, default) in PALETTE.items()
    }
    colors['border'] = BORDER
    return colors


def _make_assets_dir(path) -> None:
    path.mkdir(parents=True, exist_ok=True)


@register_theme
class CyberchatTheme(Theme):
    name = 'cyberchat'

    async def prepare(self, ctx: PrepareContext) -> PreparedTheme:
        await asyncio.to_thread(_make_assets_dir, ctx.public_dir / 'assets' / self.name)
        return PreparedTheme(assets_href=f'/assets/{self.name}/')

    def render(self, ctx: RenderContext) -> RenderedPage:
        home_href = '/' if ctx.current_locale == ctx.default_locale else f'/{ctx.current_locale}/'
        html = render_template(
            'cyberchat/page.html',
            ctx=ctx,
            colors=palette(ctx.theme_config),
            font=_css_value(ctx.theme_config.get('font') or DEFAULT_FONT),
            home_href=home_href,
            crumb='Home' if ctx.path_href == home_href else ctx.meta.title,
            feed_href=f'/{feed_filename(ctx.current_locale, ctx.default_locale)}',
        )
        # No switcher of its own; the builder injects the fallback one.
        return RenderedPage(html=html)
