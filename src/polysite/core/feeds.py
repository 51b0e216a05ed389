"""Discovery files: sitemap.xml, robots.txt, rss.xml"""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterable, Optional

from polysite.core.models import Document
from polysite.core.render import render_template
from polysite.core.routes import canonical_url, post_fs_path, public_href


def make_sitemap_xml(urls: Iterable[str]) -> str:
    return render_template('sitemap.xml', urls=list(urls))


def make_robots_txt(hostname: str) -> str:
    return f"User-agent: *\nAllow: /\n\nSitemap: https://{hostname}/sitemap.xml\n"


def _rfc822(ts: Optional[datetime]) -> Optional[str]:
    """RFC 822 date in GMT; naive timestamps are taken as UTC."""
    if ts is None:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return format_datetime(ts.astimezone(timezone.utc), usegmt=True)


def make_rss_xml(
    hostname: str,
    posts: Iterable[Document],
    locale: str,
    default_locale: str,
    site_name: str = None,
    ) -> str:
    """RSS 2.0 channel for posts, linked at their canonical href in `locale`."""
    items = [
        {
            "title": p.title,
            "link": canonical_url(hostname, public_href(post_fs_path(p.slug), locale, default_locale)),
            "pub_date": _rfc822(p.published_at),
            "description": p.meta_description,
        }
        for p in posts
    ]
    return render_template('rss.xml', title=site_name or hostname, hostname=hostname, items=items)


def feed_filename(locale: str, default_locale: str) -> str:
    return 'rss.xml' if locale == default_locale else f'rss.{locale}.xml'
