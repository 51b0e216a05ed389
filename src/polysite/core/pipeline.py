"""Build orchestration: normalize -> index -> per-locale resolve/route/render -> feeds -> manifest"""

import asyncio
import json
import logging
import shutil
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from polysite.core.feeds import feed_filename, make_robots_txt, make_rss_xml, make_sitemap_xml
from polysite.core.index import SlugLocaleMap, build_index
from polysite.core.models import (
    Blueprint, BuildResult, Document, DocumentRole, InventoryEntry,
    Manifest, NavItem, PageMeta, SiteInfo, ThemeInfo,
)
from polysite.core.nav import build_nav, localize_nav, mark_active
from polysite.core.normalize import normalize_doc
from polysite.core.resolve import first_available, pick_doc
from polysite.core.routes import Route, plan_route
from polysite.core.switcher import apply_fallback_switcher, build_lang_switcher, language_links
from polysite.core.utils.html import extract_image_urls
from polysite.core.utils.slug import ROOT_SLUGS
from polysite.errors import BuildError, PolysiteError, RenderError
from polysite.themes.base import PrepareContext, RenderContext, RenderedPage, Theme
from polysite.themes.registry import DEFAULT_THEME, get_theme


logger = logging.getLogger(__name__)

PUBLIC_DIR = 'public'
MANIFEST_FILE = 'manifest.json'
DEFAULT_LOCALE = 'en'


def normalize_locales(locales: Optional[Iterable[Any]], default_locale: Optional[str] = None) -> tuple[list[str], str]:
    """Lowercased, deduplicated locale list and the default locale (always included, first if added)."""
    codes = [str(x).strip().lower() for x in (locales or []) if str(x).strip()]
    codes = list(dict.fromkeys(codes)) or [DEFAULT_LOCALE]
    default = str(default_locale or codes[0]).strip().lower()
    if default not in codes:
        codes.insert(0, default)
    return codes, default


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')
    except OSError as e:
        raise BuildError(f"Failed to write {path}: {e}") from e


def _rmtree(path: Path) -> None:
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        raise BuildError(f"Failed to remove {path}: {e}") from e


def remove_site(sites_root: Union[str, Path], hostname: str) -> bool:
    """Delete a site's whole tree. Returns False when there was nothing to delete."""
    base = Path(sites_root) / hostname
    if not base.exists():
        return False
    _rmtree(base)
    return True


def _in_locale(locale: str, default_locale: str):
    return lambda d: (d.locale or default_locale) == locale


@dataclass
class _SiteBuild:
    """Read-only state shared by every locale pass of one build."""
    hostname: str
    site: SiteInfo
    theme: Theme
    theme_config: dict[str, Any]
    assets_href: str
    public_dir: Path
    locales: list[str]
    default_locale: str
    base_nav: list[NavItem]
    page_index: SlugLocaleMap
    post_index: SlugLocaleMap
    limit: asyncio.Semaphore
    switcher_max: int

    def reserved_slugs(self, locale: str) -> set[str]:
        """Page slugs whose route would land on another locale's root."""
        if locale != self.default_locale:
            return set()
        return {loc for loc in self.locales if loc != self.default_locale}

    def plan_locale(self, locale: str) -> list[tuple[Document, Route]]:
        """Resolve home, pages, then posts for locale. Misses are skipped."""
        default = self.default_locale
        planned = []

        home = (
            pick_doc(self.page_index, 'home', locale, default)
            or pick_doc(self.page_index, 'index', locale, default)
            or first_available(self.page_index, locale, default)
        )
        if home is not None:
            planned.append((home, plan_route(home, DocumentRole.page, locale, default, self.hostname, home=True)))

        reserved = self.reserved_slugs(locale)
        for slug in self.page_index:
            if slug in ROOT_SLUGS:
                continue    # served by the home route
            if slug in reserved:
                logger.warning(
                    "Skipping page '%s' for locale %s: /%s/ is the %s locale root", slug, locale, slug, slug,
                )
                continue
            doc = pick_doc(self.page_index, slug, locale, default)
            if doc is None:
                logger.debug("No page variant of '%s' for locale %s", slug, locale)
                continue
            planned.append((doc, plan_route(doc, DocumentRole.page, locale, default, self.hostname)))

        for slug in self.post_index:
            doc = pick_doc(self.post_index, slug, locale, default, any_variant=False)
            if doc is None:
                logger.debug("No post variant of '%s' for locale %s", slug, locale)
                continue
            planned.append((doc, plan_route(doc, DocumentRole.post, locale, default, self.hostname)))

        return planned

    def render_route(self, doc: Document, route: Route, nav: list[NavItem]) -> str:
        images = extract_image_urls(doc.html, doc.media_links)
        ctx = RenderContext(
            hostname=self.hostname,
            site=self.site,
            path_href=route.public_href,
            meta=PageMeta(
                title=doc.meta_title or doc.title,
                description=doc.meta_description,
                canonical=route.canonical,
                og_image=images[0] if images else None,
            ),
            content_html=doc.html,
            nav=mark_active(nav, route.public_href),
            assets_href=self.assets_href,
            theme_config=self.theme_config,
            locales=self.locales,
            current_locale=route.locale,
            default_locale=self.default_locale,
            language_links=language_links(
                route.public_href, self.locales, route.locale, self.default_locale, self.switcher_max,
            ),
        )
        try:
            rendered = self.theme.render(ctx)
        except PolysiteError:
            raise
        except Exception as e:
            raise RenderError(f"Theme '{self.theme.name}' failed on {route.public_href}: {e}") from e
        if not isinstance(rendered, RenderedPage) or not isinstance(rendered.html, str):
            raise RenderError(
                f"Theme '{self.theme.name}' returned {type(rendered).__name__} for {route.public_href}; "
                f"expected RenderedPage"
            )

        fragment = '' if rendered.includes_language_switcher else build_lang_switcher(
            route.public_href, self.locales, route.locale, self.default_locale, self.switcher_max,
        )
        return apply_fallback_switcher(rendered.html, rendered.includes_language_switcher, fragment)

    async def write_route(self, doc: Document, route: Route, nav: list[NavItem]) -> str:
        """Render and write one route; returns its canonical URL."""
        async with self.limit:
            html = self.render_route(doc, route, nav)
            await asyncio.to_thread(_write_text, self.public_dir / route.output_file, html)
        logger.debug("Wrote %s -> %s", route.public_href, route.output_file)
        return route.canonical

    async def build_locale(self, locale: str) -> tuple[list[Route], list[str]]:
        nav = localize_nav(self.base_nav, locale, self.default_locale, self.locales)
        planned = self.plan_locale(locale)
        urls = await asyncio.gather(*(self.write_route(doc, route, nav) for doc, route in planned))
        return [route for _, route in planned], list(urls)


async def _prepare_theme(theme: Theme, public_dir: Path, theme_config: dict) -> str:
    try:
        prepared = await theme.prepare(PrepareContext(public_dir=public_dir, theme_config=theme_config))
    except PolysiteError:
        raise
    except OSError as e:
        raise BuildError(f"Theme '{theme.name}' failed to prepare assets: {e}") from e
    except Exception as e:
        raise RenderError(f"Theme '{theme.name}' failed to prepare: {e}") from e
    return getattr(prepared, 'assets_href', None) or f'/assets/{theme.name}/'


async def build_site(
    sites_root: Union[str, Path],
    hostname: str,
    blueprint: Union[Blueprint, Mapping[str, Any], None] = None,
    pages: Iterable[Mapping[str, Any]] = (),
    posts: Iterable[Mapping[str, Any]] = (),
    locales: Optional[Iterable[str]] = None,
    max_concurrency: int = 6,
    switcher_max: int = 6,
    parser_config: str = 'gfm-like',
    default_theme: str = DEFAULT_THEME,
    ) -> BuildResult:
    """Build the complete static tree for hostname under sites_root/hostname.

    The existing tree is wiped first. The default locale is built at the
    public root, every other locale under /{locale}/. Fails with
    ThemeNotFoundError before touching disk for an unknown theme, and with
    RenderError or BuildError (fatal, tree unreliable) mid-build.
    """
    if isinstance(blueprint, Blueprint):
        bp = blueprint
    else:
        raw = blueprint if isinstance(blueprint, Mapping) else {}
        bp = Blueprint.model_validate({str(k): v for k, v in raw.items()})
    all_locales, default_locale = normalize_locales(locales, bp.default_locale)
    theme_config = dict(bp.theme or {})
    theme = get_theme(theme_config.get('name') or default_theme)

    norm_pages = [normalize_doc(p, parser_config) for p in pages or ()]
    norm_posts = [normalize_doc(p, parser_config) for p in posts or ()]
    logger.info(
        "Building %s: %d page(s), %d post(s), locales=%s (default %s), theme=%s",
        hostname, len(norm_pages), len(norm_posts), ','.join(all_locales), default_locale, theme.name,
    )

    base = Path(sites_root) / hostname
    public_dir = base / PUBLIC_DIR
    await asyncio.to_thread(_rmtree, base)
    try:
        public_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BuildError(f"Failed to create {public_dir}: {e}") from e

    assets_href = await _prepare_theme(theme, public_dir, theme_config)
    in_default = _in_locale(default_locale, default_locale)
    locale_roots = set(all_locales) - {default_locale}
    build = _SiteBuild(
        hostname=hostname,
        site=SiteInfo(name=bp.site_name or hostname, has_blog=bool(norm_posts)),
        theme=theme,
        theme_config=theme_config,
        assets_href=assets_href,
        public_dir=public_dir,
        locales=all_locales,
        default_locale=default_locale,
        base_nav=build_nav(
            [p for p in norm_pages if in_default(p) and p.slug not in locale_roots],
            [p for p in norm_posts if in_default(p)],
            theme_config,
        ),
        page_index=build_index(norm_pages),
        post_index=build_index(norm_posts),
        limit=asyncio.Semaphore(max_concurrency),
        switcher_max=switcher_max,
    )

    routes: list[Route] = []
    sitemap_urls: list[str] = []
    for locale in [default_locale] + [loc for loc in all_locales if loc != default_locale]:
        locale_routes, urls = await build.build_locale(locale)
        routes.extend(locale_routes)
        sitemap_urls.extend(urls)

    await asyncio.to_thread(_write_text, public_dir / 'sitemap.xml', make_sitemap_xml(sitemap_urls))
    await asyncio.to_thread(_write_text, public_dir / 'robots.txt', make_robots_txt(hostname))
    await _write_feeds(public_dir, hostname, build.site.name, norm_posts, all_locales, default_locale)

    manifest = Manifest(
        hostname=hostname,
        site_name=build.site.name,
        locales=all_locales,
        default_locale=default_locale,
        pages=[InventoryEntry(title=p.title, slug=p.slug, locale=p.locale or default_locale) for p in norm_pages],
        posts=[InventoryEntry(title=p.title, slug=p.slug, locale=p.locale or default_locale) for p in norm_posts],
        built_at=datetime.now(timezone.utc),
        theme=ThemeInfo(name=theme.name, config=theme_config),
    )
    await asyncio.to_thread(
        _write_text, base / MANIFEST_FILE,
        json.dumps(manifest.model_dump(mode='json'), indent=2, ensure_ascii=False),
    )

    logger.info("Built %s: %d route(s)", hostname, len(routes))
    return BuildResult(
        hostname=hostname,
        pages=len(norm_pages),
        posts=len(norm_posts),
        theme=theme.name,
        locales=all_locales,
        default_locale=default_locale,
        routes=[r.public_href for r in routes],
        sitemap_urls=sitemap_urls,
    )


async def _write_feeds(
    public_dir: Path,
    hostname: str,
    site_name: str,
    posts: list[Document],
    locales: list[str],
    default_locale: str,
    ) -> None:
    """rss.xml for default-locale posts, rss.{locale}.xml for each other locale with posts."""
    for locale in locales:
        feed_posts = [p for p in posts if _in_locale(locale, default_locale)(p)]
        if not feed_posts:
            continue
        title = site_name if locale == default_locale else f"{site_name} ({locale.upper()})"
        xml = make_rss_xml(hostname, feed_posts, locale, default_locale, title)
        await asyncio.to_thread(_write_text, public_dir / feed_filename(locale, default_locale), xml)


def run_build(**kwargs) -> BuildResult:
    """Synchronous entry point around build_site."""
    return asyncio.run(build_site(**kwargs))
