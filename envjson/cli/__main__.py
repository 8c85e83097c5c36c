from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..core.config_loader import ConfigLoader, load_document
from ..core.errors import ConfigurationError, EnvJsonError
from ..core.parser import Parser
from ..core.types import format_path
from ..sources.env_file import EnvFileSource
from ..sources.environ import ProcessEnvSource

app = typer.Typer(help="Convert environment variables to JSON")


def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=2)


@app.callback()
def main(
    ctx: typer.Context,
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Variable prefix, e.g. APP"),
    separator: Optional[str] = typer.Option(None, "--separator", help="Path separator (default __)"),
    include: Optional[List[str]] = typer.Option(None, "--include", help="Regex a variable must match"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", help="Regex a variable must not match"),
    base: Optional[Path] = typer.Option(None, "--base", help="JSON/YAML document to merge onto"),
    raw_strings: bool = typer.Option(False, "--raw-strings", help="Keep values as strings"),
    keep_case: bool = typer.Option(False, "--keep-case", help="Do not lower-case field names"),
    array_merge: Optional[str] = typer.Option(None, "--array-merge", help="replace or index"),
    max_index: Optional[int] = typer.Option(None, "--max-index", help="Largest array index accepted"),
    env_file: Optional[List[Path]] = typer.Option(None, "--env-file", help=".env file to read"),
    no_environ: bool = typer.Option(False, "--no-environ", help="Ignore the process environment"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to envjson.yaml"),
    profile: str = typer.Option("default", "--profile", help="Profile in envjson.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if config is not None and not config.exists():
            raise ConfigurationError(f"Config file not found: {config}")
        loader = ConfigLoader(config)
        overrides = {
            "prefix": prefix,
            "separator": separator,
            "include": include or None,
            "exclude": exclude or None,
            "base": load_document(base) if base is not None else None,
            "raw_strings": True if raw_strings else None,
            "lowercase_keys": False if keep_case else None,
            "array_merge": array_merge,
            "max_index": max_index,
        }
        parser = Parser(loader.parser_config(profile, **overrides))
    except (EnvJsonError, OSError) as e:
        _fail(str(e))

    sources = [] if no_environ else [ProcessEnvSource()]
    sources.extend(EnvFileSource(p) for p in env_file or [])
    ctx.obj = {"parser": parser, "sources": sources}


@app.command()
def parse(
    ctx: typer.Context,
    indent: Optional[int] = typer.Option(2, "--indent", help="JSON indent, 0 for compact"),
    sort_keys: bool = typer.Option(False, "--sort-keys"),
):
    """Print the variables as a JSON document."""
    parser: Parser = ctx.obj["parser"]
    try:
        tree = parser.parse_sources(*ctx.obj["sources"])
    except OSError as e:
        _fail(str(e))
    typer.echo(json.dumps(tree, indent=indent or None, sort_keys=sort_keys))


@app.command()
def keys(ctx: typer.Context):
    """List accepted variables and the path each one maps to."""
    parser: Parser = ctx.obj["parser"]
    variables = {}
    try:
        for source in ctx.obj["sources"]:
            variables.update(source.load())
    except OSError as e:
        _fail(str(e))
    for entry in parser.entries(sorted(variables.items())):
        typer.echo(f"{entry.key}\t{format_path(entry.path)}")


if __name__ == "__main__":
    app()
