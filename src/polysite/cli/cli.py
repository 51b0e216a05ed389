"""CLI entrypoint: Typer app definition and command registration"""

import typer

from polysite.cli.commands import build_cmd, reset_cmd, themes_cmd


app = typer.Typer(name="polysite", no_args_is_help=True, help="Locale-aware static site builder")

app.command(name="build")(build_cmd)
app.command(name="reset")(reset_cmd)
app.command(name="themes")(themes_cmd)
