"""Build input loading: JSON/YAML payload files and markdown content directories"""

import json
import re
from pathlib import Path
from typing import Any

import yaml

from polysite.core.utils.markdown import render_markdown
from polysite.core.utils.slug import slugify
from polysite.errors import PayloadError


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}
SITE_FILES = ('site.yaml', 'site.yml', 'site.json')
PAYLOAD_KEYS = ('dns', 'blueprint', 'locales', 'pages', 'posts')


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise PayloadError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise PayloadError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def _read_mapping(path: Path) -> dict[str, Any]:
    """Parse a .json or .yaml/.yml file that must contain a mapping."""
    try:
        text = path.read_text(encoding='utf-8')
        data = json.loads(text) if path.suffix == '.json' else yaml.safe_load(text)
    except OSError as e:
        raise PayloadError(f"Cannot read {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise PayloadError(f"Invalid payload {path}: {e}") from e
    data = data or {}
    if not isinstance(data, dict):
        raise PayloadError(f"Invalid payload {path}: expected a mapping, got {type(data).__name__}")
    return data


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [] if it does not exist."""
    if not path.is_dir():
        return []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_record(path: Path, parser_config: str = 'gfm-like') -> dict[str, Any]:
    """Raw page/post record from a markdown file: frontmatter fields + rendered html."""
    frontmatter, body = _strip_frontmatter(path.read_text(encoding='utf-8'))
    record = dict(frontmatter)
    record.setdefault('slug', slugify(path.stem))
    if not record.get('html'):
        record['html'] = render_markdown(body, parser_config)
    return record


def load_payload(path: Path) -> dict[str, Any]:
    """Load a build payload file ({dns, blueprint, locales, pages, posts})."""
    data = _read_mapping(path)
    for key in ('pages', 'posts', 'locales'):
        if key in data and data[key] is not None and not isinstance(data[key], list):
            raise PayloadError(f"Invalid payload {path}: '{key}' must be a list")
    for key in ('dns', 'blueprint'):
        if key in data and data[key] is not None and not isinstance(data[key], dict):
            raise PayloadError(f"Invalid payload {path}: '{key}' must be a mapping")
    return {k: data[k] for k in PAYLOAD_KEYS if k in data}


def load_content_dir(root: Path, parser_config: str = 'gfm-like') -> dict[str, Any]:
    """Payload from a content directory: site.yaml plus pages/ and posts/ markdown files."""
    site_file = next((root / name for name in SITE_FILES if (root / name).is_file()), None)
    payload = load_payload(site_file) if site_file else {}
    payload['pages'] = list(payload.get('pages') or []) + [
        parse_record(p, parser_config) for p in discover_files(root / 'pages')
    ]
    payload['posts'] = list(payload.get('posts') or []) + [
        parse_record(p, parser_config) for p in discover_files(root / 'posts')
    ]
    return payload


def load_input(path: Path, parser_config: str = 'gfm-like') -> dict[str, Any]:
    """Dispatch on path type: directory -> content dir, file -> payload."""
    if path.is_dir():
        return load_content_dir(path, parser_config)
    if path.is_file():
        return load_payload(path)
    raise PayloadError(f"No such file or directory: {path}")


def resolve_hostname(payload: dict[str, Any]) -> str:
    """dns.hostname, else blueprint.primary_domain; lowercased and trimmed."""
    dns = payload.get('dns') if isinstance(payload.get('dns'), dict) else {}
    blueprint = payload.get('blueprint') if isinstance(payload.get('blueprint'), dict) else {}
    hostname = str(dns.get('hostname') or blueprint.get('primary_domain') or '').strip().lower()
    if not hostname:
        raise PayloadError("hostname required (dns.hostname or blueprint.primary_domain)")
    return hostname
