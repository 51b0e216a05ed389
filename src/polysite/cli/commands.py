"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from polysite.config import Settings, load_config
from polysite.core.parse import load_input, resolve_hostname
from polysite.core.pipeline import remove_site, run_build
from polysite.errors import ConfigError, PolysiteError
from polysite.logs import configure_logging
from polysite.themes.registry import available_themes


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then apply its log level."""
    try:
        settings = load_config(overrides=overrides)
    except ConfigError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def build_cmd(
    path: Annotated[str, typer.Argument(help="Payload file (.json/.yaml) or content directory")],
    sites_root: Annotated[Optional[str], typer.Option("--sites-root", help="Root directory for built sites")] = None,
    theme: Annotated[Optional[str], typer.Option("--theme", help="Theme to use when the blueprint names none")] = None,
    concurrency: Annotated[Optional[int], typer.Option("--max-concurrency", help="Max route writes in flight")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ...")] = None,
    ):
    """Build one site: every locale's routes, feeds, and manifest."""
    settings = _settings(overrides={
        "sites_root": sites_root, "default_theme": theme,
        "max_concurrency": concurrency, "log_level": log_level,
    })

    try:
        payload = load_input(Path(path), settings.parser_config)
        hostname = resolve_hostname(payload)
    except PolysiteError as e:
        _fail(str(e))

    try:
        result = run_build(
            sites_root=settings.sites_root,
            hostname=hostname,
            blueprint=payload.get("blueprint"),
            pages=payload.get("pages") or [],
            posts=payload.get("posts") or [],
            locales=payload.get("locales"),
            max_concurrency=settings.max_concurrency,
            switcher_max=settings.switcher_max,
            parser_config=settings.parser_config,
            default_theme=settings.default_theme,
        )
    except PolysiteError as e:
        _fail("Build failed", e)

    for href in result.routes:
        typer.echo(f"  {href}")
    typer.echo(
        f"Built {result.hostname} - "
        f"{len(result.routes)} route(s), "
        f"{result.pages} page(s), {result.posts} post(s), "
        f"locales={','.join(result.locales)} (default {result.default_locale}), "
        f"theme={result.theme}"
    )


def reset_cmd(
    hostname: Annotated[str, typer.Argument(help="Site hostname to delete")],
    sites_root: Annotated[Optional[str], typer.Option("--sites-root", help="Root directory for built sites")] = None,
    ):
    """Delete a built site completely."""
    settings = _settings(overrides={"sites_root": sites_root})
    host = hostname.strip().lower()
    if not host:
        _fail("hostname required")
    try:
        removed = remove_site(settings.sites_root, host)
    except PolysiteError as e:
        _fail(f"Could not delete {host}", e)
    typer.echo(f"Deleted {host}" if removed else f"Nothing to delete for {host}")


def themes_cmd():
    """List registered theme names."""
    for name in available_themes():
        typer.echo(name)
