"""Data models shared by the resolution, routing, and build pipeline"""

from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator


class DocumentRole(str, Enum):
    """Which collection a document belongs to; decides its route shape."""
    page = "page"
    post = "post"


class Document(BaseModel):
    """A normalized content document. Built by normalize_doc, never mutated."""
    model_config = ConfigDict(frozen=True)

    title: str = "Untitled"
    slug: str
    html: str
    meta_title: str = ""
    meta_description: str = ""
    author: Optional[str] = None
    category: Optional[str] = None
    published_at: Optional[datetime] = None
    media_links: tuple[str, ...] = ()
    locale: Optional[str] = None    # None = applies to every locale


class NavItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str
    label: str
    active: bool = False
    # Non-default locale this item's href was last re-rooted under, if any.
    _locale_prefix: Optional[str] = PrivateAttr(default=None)


class LanguageLink(BaseModel):
    """One entry of a language switcher: the same page in another locale."""
    model_config = ConfigDict(frozen=True)

    locale: str
    href: str
    active: bool = False


class SiteInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    has_blog: bool = False


class Blueprint(BaseModel):
    """Per-site build instructions supplied by the caller."""
    model_config = ConfigDict(extra="allow")

    site_name: Optional[str] = None
    primary_domain: Optional[str] = None
    default_locale: Optional[str] = None
    theme: dict[str, Any] = Field(default_factory=dict)

    @field_validator("site_name", "primary_domain", "default_locale", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        """Scalars become strings; blanks and non-scalars are treated as absent."""
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            return str(value).strip() or None
        return None

    @field_validator("theme", mode="before")
    @classmethod
    def _coerce_theme(cls, value: Any) -> dict[str, Any]:
        """A bare name becomes {"name": value}; anything else that is not a mapping is dropped."""
        if isinstance(value, str):
            return {"name": value.strip()} if value.strip() else {}
        if isinstance(value, Mapping):
            return {str(k): v for k, v in value.items()}
        return {}


class PageMeta(BaseModel):
    """Head metadata handed to themes for a single route."""
    title: str
    description: str = ""
    canonical: str
    og_image: Optional[str] = None


class InventoryEntry(BaseModel):
    title: str
    slug: str
    locale: str


class ThemeInfo(BaseModel):
    name: str
    config: dict[str, Any] = Field(default_factory=dict)


class Manifest(BaseModel):
    """Summary of one build, written to manifest.json next to the public tree."""
    hostname: str
    site_name: str
    locales: list[str]
    default_locale: str
    pages: list[InventoryEntry]
    posts: list[InventoryEntry]
    built_at: datetime
    theme: ThemeInfo


class BuildResult(BaseModel):
    hostname: str
    pages: int
    posts: int
    theme: str
    locales: list[str]
    default_locale: str
    routes: list[str] = Field(default_factory=list, description="Public hrefs written, in build order")
    sitemap_urls: list[str] = Field(default_factory=list)
