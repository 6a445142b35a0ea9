"""Command-line front end for the documentation converter."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated

import typer

from xmldoc.comment import build_comment
from xmldoc.errors import SettingsError
from xmldoc.external import load_external_documentation
from xmldoc.logging import get_logger, setup_logging
from xmldoc.render import convert_documentation
from xmldoc.settings import XmlDocSettings, load_settings

__all__ = ["app"]

LOGGER = get_logger(__name__)

app = typer.Typer(
    name="xmldoc",
    help="Convert XML documentation comments into plain text.",
    no_args_is_help=True,
    add_completion=False,
)

SourceArg = Annotated[
    Path | None,
    typer.Argument(help="File holding the documentation fragment; stdin when omitted."),
]
LineEndingOpt = Annotated[
    str | None,
    typer.Option("--line-ending", help="Line-ending token; escapes such as \\n are decoded."),
]


def _settings(line_ending: str | None = None, folder: str | None = None) -> XmlDocSettings:
    overrides: dict[str, object] = {}
    if line_ending is not None:
        overrides["line_ending"] = line_ending
    if folder is not None:
        overrides["external_annotations_folder"] = folder
    try:
        settings = load_settings(**overrides)
    except SettingsError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    setup_logging(settings.log_level)
    return settings


def _read_source(source: Path | None) -> str:
    if source is None:
        return sys.stdin.read()
    return source.read_text(encoding="utf-8")


@app.command()
def render(source: SourceArg = None, line_ending: LineEndingOpt = None) -> None:
    """Print the plain-text rendering of a documentation fragment."""
    settings = _settings(line_ending)
    text = convert_documentation(_read_source(source), settings.line_ending)
    LOGGER.info("Rendered fragment", extra={"operation": "render", "chars": len(text)})
    typer.echo(text)


@app.command()
def structure(source: SourceArg = None, line_ending: LineEndingOpt = None) -> None:
    """Print the structured sections of a documentation fragment as JSON."""
    settings = _settings(line_ending)
    comment = build_comment(_read_source(source), settings.line_ending)
    typer.echo(json.dumps(comment.to_dict(), indent=2))


@app.command()
def external(
    name: Annotated[str, typer.Argument(help="Fully-qualified display string of the symbol.")],
    assembly: Annotated[str, typer.Argument(help="Containing assembly name.")],
    folder: Annotated[
        str | None,
        typer.Option("--folder", help="Directory holding *.ExternalAnnotations.xml files."),
    ] = None,
    line_ending: LineEndingOpt = None,
) -> None:
    """Print the external annotation text for one symbol."""
    settings = _settings(line_ending, folder)
    typer.echo(
        load_external_documentation(
            name, assembly, settings.external_annotations_folder, settings.line_ending
        )
    )

