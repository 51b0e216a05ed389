"""Two-column 'classic' theme with its own language switcher and CSS assets"""

import asyncio
import shutil
from pathlib import Path

from polysite.core.feeds import feed_filename
from polysite.core.render import render_template
from polysite.themes.base import PrepareContext, PreparedTheme, RenderContext, RenderedPage, Theme
from polysite.themes.registry import register_theme


ASSETS_DIR = Path(__file__).resolve().parent / 'assets' / 'classic'
DEFAULT_FONT = 'Inter, system-ui, -apple-system, Segoe UI, Roboto, Ubuntu, Cantarell, "Helvetica Neue", Arial, "Noto Sans", sans-serif'


def vars_css(theme_config: dict) -> str:
    """CSS custom properties from primaryColor / accentColor / font overrides."""
    return (
        ":root{\n"
        f"  --color-primary: {theme_config.get('primaryColor') or '#2563eb'};\n"
        f"  --color-accent:  {theme_config.get('accentColor') or '#a855f7'};\n"
        f"  --font-body:     {theme_config.get('font') or DEFAULT_FONT};\n"
        "}\n"
    )


def _write_assets(out_dir: Path, theme_config: dict) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    if ASSETS_DIR.is_dir():
        shutil.copytree(ASSETS_DIR, out_dir, dirs_exist_ok=True)
    (out_dir / 'vars.css').write_text(vars_css(theme_config), encoding='utf-8')


@register_theme
class ClassicTheme(Theme):
    name = 'classic'

    async def prepare(self, ctx: PrepareContext) -> PreparedTheme:
        await asyncio.to_thread(_write_assets, ctx.public_dir / 'assets' / self.name, ctx.theme_config)
        return PreparedTheme(assets_href=f'/assets/{self.name}/')

    def render(self, ctx: RenderContext) -> RenderedPage:
        html = render_template(
            'classic/page.html',
            ctx=ctx,
            brand=ctx.theme_config.get('logoText') or ctx.site.name or ctx.hostname,
            home_href='/' if ctx.current_locale == ctx.default_locale else f'/{ctx.current_locale}/',
            blog_href='/blog/' if ctx.current_locale == ctx.default_locale else f'/{ctx.current_locale}/blog/',
            feed_href=f'/{feed_filename(ctx.current_locale, ctx.default_locale)}',
        )
        return RenderedPage(html=html, includes_language_switcher=bool(ctx.language_links))
