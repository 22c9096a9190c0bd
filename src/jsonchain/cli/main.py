"""
Main CLI entry point for jsonchain.

Provides the command-line interface using Click. Every command reads JSON
from files or stdin and writes JSON to stdout; nothing is written to disk.
"""

import json as _json
import logging as _logging
import os as _os
import sys as _sys
import typing as _typing

import click as _click
import pydantic as _pydantic
import rich.console as _rich_console
import rich.syntax as _rich_syntax

import jsonchain
import jsonchain.chain as chain
import jsonchain.config as config

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _fail(message: str) -> _typing.NoReturn:
    """Print an error to stderr and exit with status 1."""
    _click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


class _EchoHandler(_logging.Handler):
    """Log handler that writes through click.echo, so stderr is looked up per record."""

    def emit(self, record: _logging.LogRecord) -> None:
        try:
            _click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(level: str) -> None:
    """Send jsonchain log records to stderr at the given level."""
    handler = _EchoHandler()
    handler.setFormatter(_logging.Formatter(_LOG_FORMAT))
    package_logger = _logging.getLogger("jsonchain")
    package_logger.handlers = [handler]
    package_logger.setLevel(level)


def _should_use_color(cli_flag: bool | None) -> tuple[bool, bool]:
    """Determine whether to use color output.

    Priority:
    1. CLI flag (--color / --no-color) if specified
    2. NO_COLOR env var (if set, disable color) - standard convention
    3. Auto-detect: color if stdout is a TTY

    Returns:
        Tuple of (color_enabled, force_color).
        force_color is True when color was explicitly requested (not auto-detected).
    """
    if cli_flag is not None:
        return (cli_flag, cli_flag)

    if _os.environ.get("NO_COLOR") is not None:
        return (False, False)

    return (_sys.stdout.isatty(), False)


def _print_json(text: str, *, color: bool = False, force_color: bool = False) -> None:
    """Print JSON text, optionally with syntax highlighting."""
    if color:
        console = _rich_console.Console(
            force_terminal=force_color,
            no_color=False if force_color else None,
            color_system="truecolor" if force_color else "auto",
        )
        syntax = _rich_syntax.Syntax(
            text.rstrip(),
            "json",
            theme="monokai",
            background_color="default",
        )
        console.print(syntax)
        return

    _click.echo(text.rstrip())


def _emit(
    result: chain.JsonChain[str, _typing.Any],
    settings: config.Settings,
    *,
    pretty: bool,
) -> None:
    """Write a chain to stdout, compact or indented."""
    try:
        output = result.to_json()
    except chain.EncodeError as e:
        _fail(str(e))
    if pretty:
        _print_json(output.pretty(settings.indent))
    else:
        _click.echo(output.text(), nl=not output.endswith(b"\n"))


def _source_name(source: _typing.BinaryIO) -> str:
    """Name of an input file for error messages."""
    return str(getattr(source, "name", "<stdin>"))


def _read_chain(
    source: _typing.BinaryIO,
    settings: config.Settings,
    **kwargs: _typing.Any,
) -> chain.JsonChain[str, _typing.Any]:
    """Decode a JSON object from a file, exiting on malformed input."""
    try:
        return chain.JsonChain.from_bytes(source.read(), settings=settings, **kwargs)
    except chain.DecodeError as e:
        _fail(f"{_source_name(source)}: {e}")


def _parse_value(raw: str) -> _typing.Any:
    """Parse a command-line value as JSON, falling back to a plain string."""
    try:
        return _json.loads(raw)
    except ValueError:
        return raw


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(jsonchain.__version__, "-v", "--version", prog_name="jsonchain")
@_click.option("--verbose", is_flag=True, help="Enable debug logging")
@_click.pass_context
def cli(ctx: _click.Context, verbose: bool) -> None:
    """jsonchain - build, merge and pretty-print JSON objects."""
    try:
        settings = config.get_settings()
    except _pydantic.ValidationError as e:
        _fail(f"invalid configuration: {e}")

    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@cli.command()
@_click.argument("source", type=_click.File("rb"), default="-")
@_click.option(
    "--indent",
    type=_click.IntRange(min=0),
    default=None,
    help="Spaces per level (default: JSONCHAIN_INDENT or 2)",
)
@_click.option(
    "--color/--no-color",
    default=None,
    help="Force or disable syntax highlighting (default: auto-detect)",
)
@_click.pass_obj
def pretty(
    settings: config.Settings,
    source: _typing.BinaryIO,
    indent: int | None,
    color: bool | None,
) -> None:
    """Pretty-print JSON from SOURCE (default: stdin)."""
    output = chain.JsonOutput(source.read())
    text = output.pretty(settings.indent if indent is None else indent)
    if not text:
        _fail(f"{_source_name(source)}: not valid JSON")

    color_enabled, force_color = _should_use_color(color)
    _print_json(text, color=color_enabled, force_color=force_color)


@cli.command()
@_click.argument("key")
@_click.argument("source", type=_click.File("rb"), default="-")
@_click.option(
    "--allow-null",
    is_flag=True,
    help="Print null values instead of treating them as missing",
)
@_click.pass_obj
def get(
    settings: config.Settings,
    key: str,
    source: _typing.BinaryIO,
    allow_null: bool,
) -> None:
    """Print the value of KEY from the JSON object in SOURCE."""
    data = _read_chain(source, settings, strict_presence=allow_null)
    try:
        value = data.get_with_error(key)
    except chain.KeyNotExistError as e:
        _fail(str(e))

    _click.echo(_json.dumps(value, ensure_ascii=settings.ensure_ascii))


@cli.command()
@_click.argument("sources", type=_click.File("rb"), nargs=-1, required=True)
@_click.option(
    "--policy",
    type=_click.Choice(["copy", "append"]),
    default="copy",
    show_default=True,
    help="copy: later files win on collisions; append: earlier files win",
)
@_click.option("--pretty", "pretty_output", is_flag=True, help="Indent the result")
@_click.pass_obj
def merge(
    settings: config.Settings,
    sources: tuple[_typing.BinaryIO, ...],
    policy: str,
    pretty_output: bool,
) -> None:
    """Shallow-merge the JSON objects in SOURCES."""
    result: chain.JsonChain[str, _typing.Any] = chain.JsonChain(settings=settings)
    for source in sources:
        other = _read_chain(source, settings)
        if policy == "append":
            result.append(other)
        else:
            result.copy(other)

    _emit(result, settings, pretty=pretty_output)


@cli.command("set")
@_click.argument("key")
@_click.argument("value")
@_click.argument("source", type=_click.File("rb"), required=False)
@_click.option(
    "--no-overwrite",
    is_flag=True,
    help="Fail if KEY already exists",
)
@_click.option("--pretty", "pretty_output", is_flag=True, help="Indent the result")
@_click.pass_obj
def set_cmd(
    settings: config.Settings,
    key: str,
    value: str,
    source: _typing.BinaryIO | None,
    no_overwrite: bool,
    pretty_output: bool,
) -> None:
    """Set KEY to VALUE in the JSON object from SOURCE (default: empty object).

    VALUE is parsed as JSON when possible, otherwise used as a string.
    """
    if source is None:
        data: chain.JsonChain[str, _typing.Any] = chain.JsonChain(settings=settings)
    else:
        data = _read_chain(source, settings)

    parsed = _parse_value(value)
    if no_overwrite:
        try:
            data.set_with_error(key, parsed)
        except chain.KeyAlreadyExistError as e:
            _fail(str(e))
    else:
        data.set(key, parsed)

    _emit(data, settings, pretty=pretty_output)


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="jsonchain")


if __name__ == "__main__":
    main()
