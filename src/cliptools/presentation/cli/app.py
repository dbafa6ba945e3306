"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All clipboard logic is accessed through the Container (bootstrap.py).
Every command reports a ``ClipToolsError`` as one line on standard error
and exits with the error's exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated, Any, Optional, TypeVar

import typer
from pydantic import BaseModel, ValidationError

from cliptools.application.dto.requests import CopyRequest, PasteRequest
from cliptools.application.error_messages import as_argument_error
from cliptools.bootstrap import Container
from cliptools.domain.errors import ClipToolsError
from cliptools.domain.models.enums import BinaryPolicy, ColorWhen
from cliptools.presentation.cli.formatters import error_message, json_panel, success_message

app = typer.Typer(
    name="cliptools",
    help="Read, list and write the system clipboard.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="Inspect and change persisted cliptools settings.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

_COLOR_KEY = "cliptools.color"

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _version_callback(value: bool) -> None:
    if value:
        try:
            current = version("cliptools")
        except PackageNotFoundError:
            current = "unknown"
        typer.echo(f"cliptools {current}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    color: Annotated[
        Optional[ColorWhen],
        typer.Option("--color", help="Colorize error messages (default: from settings)."),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug details to standard error.")
    ] = False,
    show_version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Read, list and write the system clipboard."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if ctx.obj is None:
        ctx.obj = Container()
    container: Container = ctx.obj
    ctx.meta[_COLOR_KEY] = color or container.settings.color


@contextmanager
def _reported_errors(ctx: typer.Context) -> Iterator[None]:
    """Render a ``ClipToolsError`` as one line and exit with its code."""
    try:
        yield
    except ClipToolsError as exc:
        error_message(str(exc), ctx.meta.get(_COLOR_KEY, ColorWhen.AUTO))
        raise typer.Exit(code=exc.exit_code) from exc


def _validated(model: type[_ModelT], **fields: Any) -> _ModelT:
    try:
        return model(**fields)
    except ValidationError as exc:
        raise as_argument_error(exc) from exc


# ---------------------------------------------------------------------------
# cliptools paste
# ---------------------------------------------------------------------------


@app.command()
def paste(
    ctx: typer.Context,
    type_name: Annotated[
        Optional[str],
        typer.Option(
            "--type",
            "-t",
            help="Type to fetch: url, html, pdf, png, rtf, text or @<native-name>.",
        ),
    ] = None,
    system_type: Annotated[
        Optional[str],
        typer.Option(
            "--system-type",
            "--custom-type",
            help="Platform-native type to fetch, passed to the clipboard as is.",
        ),
    ] = None,
    binary: Annotated[
        Optional[BinaryPolicy],
        typer.Option(
            "--binary",
            help="Allow non-UTF-8 output. 'auto' allows it only when stdout is not a terminal.",
        ),
    ] = None,
) -> None:
    """Print clipboard content, byte for byte, without a trailing newline."""
    container: Container = ctx.obj
    with _reported_errors(ctx):
        request = _validated(
            PasteRequest,
            type_name=type_name,
            system_type_name=system_type,
            binary=binary or container.settings.binary,
        )
        data = container.paste_content().execute(request, stdout_is_tty=sys.stdout.isatty())
        stdout = typer.get_binary_stream("stdout")
        stdout.write(data)
        stdout.flush()


# ---------------------------------------------------------------------------
# cliptools list-types
# ---------------------------------------------------------------------------


@app.command("list-types")
def list_types(
    ctx: typer.Context,
    system: Annotated[
        bool,
        typer.Option("--system", help="Show native type names, unsorted and not deduplicated."),
    ] = False,
) -> None:
    """Print the types currently held by the clipboard, one per line."""
    container: Container = ctx.obj
    with _reported_errors(ctx):
        for name in container.list_types().execute(show_native=system):
            typer.echo(name)


# ---------------------------------------------------------------------------
# cliptools copy
# ---------------------------------------------------------------------------


@app.command()
def copy(
    ctx: typer.Context,
    type_name: Annotated[
        Optional[str],
        typer.Option(
            "--type",
            "-t",
            help="Type to store stdin under: url, html, pdf, png, rtf, text or @<native-name>.",
        ),
    ] = None,
    system_type: Annotated[
        Optional[str],
        typer.Option(
            "--system-type",
            "--custom-type",
            help="Platform-native type to store stdin under, passed as is.",
        ),
    ] = None,
    json_input: Annotated[
        bool,
        typer.Option(
            "--json",
            help='Read a JSON object mapping type names to strings, e.g. {"text": "hi"}.',
        ),
    ] = False,
) -> None:
    """Replace the clipboard with standard input."""
    container: Container = ctx.obj
    with _reported_errors(ctx):
        request = _validated(
            CopyRequest,
            type_name=type_name,
            system_type_name=system_type,
            json_input=json_input,
        )
        container.copy_content().execute(request, typer.get_binary_stream("stdin"))


# ---------------------------------------------------------------------------
# cliptools config show / path / set / reset
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the active settings."""
    container: Container = ctx.obj
    json_panel(container.settings.model_dump_json(indent=2))


@config_app.command("path")
def config_path(ctx: typer.Context) -> None:
    """Print the location of the settings file."""
    container: Container = ctx.obj
    typer.echo(str(container.settings_manager.settings_path))


@config_app.command("set")
def config_set(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting name, e.g. color or binary.")],
    value: Annotated[str, typer.Argument(help="New value.")],
) -> None:
    """Change one setting and persist it."""
    container: Container = ctx.obj
    with _reported_errors(ctx):
        try:
            container.settings_manager.update(key, value)
        except ValidationError as exc:
            raise as_argument_error(exc) from exc
    success_message(f"{key} = {value}")


@config_app.command("reset")
def config_reset(ctx: typer.Context) -> None:
    """Delete persisted settings and restore the defaults."""
    container: Container = ctx.obj
    container.settings_manager.reset_to_defaults()
    success_message(f"Settings reset: {container.settings_manager.settings_path}")
