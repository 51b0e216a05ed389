"""Small HTML helpers: placeholder bodies, image discovery, body-end injection"""

import re


PLACEHOLDER_HTML = '<h1>Untitled</h1><p>Content coming soon.</p>'
MAX_BODY_IMAGES = 9

IMG_SRC_RE = re.compile(r'<img\b[^>]*\bsrc\s*=\s*["\']([^"\']+)["\']', re.IGNORECASE)
CLOSE_BODY_RE = re.compile(r'</body>', re.IGNORECASE)


def ensure_html(html: str) -> str:
    """Return html unchanged unless it is blank, in which case return the placeholder."""
    return html if html.strip() else PLACEHOLDER_HTML


def extract_image_urls(html: str, media_links=()) -> list[str]:
    """Image URLs from <img src> (first few) followed by media links, deduplicated in order."""
    found = [m.group(1) for m in IMG_SRC_RE.finditer(html)][:MAX_BODY_IMAGES]
    found.extend(u for u in media_links if isinstance(u, str))
    return list(dict.fromkeys(found))


def inject_before_close_body(html: str, snippet: str) -> str:
    """Splice snippet before the last </body> (case-insensitive), else append it."""
    if not snippet:
        return html
    matches = list(CLOSE_BODY_RE.finditer(html))
    if not matches:
        return html + snippet
    i = matches[-1].start()
    return html[:i] + snippet + html[i:]
