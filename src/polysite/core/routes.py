"""Canonical public hrefs and output paths for resolved documents"""

from dataclasses import dataclass
from pathlib import PurePosixPath

from polysite.core.models import Document, DocumentRole
from polysite.core.utils.slug import is_root_slug


INDEX_FILE = 'index.html'
BLOG_PREFIX = '/blog/'


@dataclass(frozen=True)
class Route:
    """One (locale, slug, role) mapped to one output file and one public URL."""
    role: DocumentRole
    locale: str
    slug: str
    fs_path: str        # path inside the locale's tree, e.g. '/about/'
    public_href: str    # '/about/' or '/fr/about/'
    canonical: str      # absolute URL of public_href

    @property
    def output_file(self) -> PurePosixPath:
        """index.html location relative to the public directory."""
        return PurePosixPath(self.public_href.strip('/')) / INDEX_FILE


def page_fs_path(slug: str) -> str:
    return '/' if is_root_slug(slug) else f'/{slug}/'


def post_fs_path(slug: str) -> str:
    return f'{BLOG_PREFIX}{slug}/'


def public_href(fs_path: str, locale: str, default_locale: str) -> str:
    """The default locale owns the bare root; every other locale nests under /{locale}/."""
    return fs_path if locale == default_locale else f'/{locale}{fs_path}'


def canonical_url(hostname: str, href: str) -> str:
    return f'https://{hostname}{href}'


def plan_route(
    doc: Document,
    role: DocumentRole,
    locale: str,
    default_locale: str,
    hostname: str,
    home: bool = False,
    ) -> Route:
    """Compute the route for a resolved document; home=True pins it to the locale root."""
    if home:
        fs_path = '/'
    elif role == DocumentRole.post:
        fs_path = post_fs_path(doc.slug)
    else:
        fs_path = page_fs_path(doc.slug)
    href = public_href(fs_path, locale, default_locale)
    return Route(
        role=role,
        locale=locale,
        slug=doc.slug,
        fs_path=fs_path,
        public_href=href,
        canonical=canonical_url(hostname, href),
    )
