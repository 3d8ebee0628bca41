"""
Command line interface for zulip-markdown.

Reads Markdown from a file or standard input and writes Zulip-ready Markdown
to standard output.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import click

from . import __version__
from .blocks import code_block, spoiler, spoiler_escaped
from .config import ConfigError, ZlmdConfig, build_config
from .constants import BACKTICK_FENCE, TILDE_FENCE
from .escaper import escape_markdown_strict
from .exceptions import UnbalancedFenceError
from .filesystem import get_max_file_size, normalize_filepath, read_text, write_atomic
from .zulip import format_time

__all__ = ["cli"]


def _load_input(
    filepath: str | None, **overrides: object
) -> tuple[ZlmdConfig, str, Path | None, os.stat_result | None]:
    """Resolve configuration and read the input document.

    Args:
        filepath: Path given on the command line, or None to read stdin.
        overrides: Command line overrides for configuration values.

    Returns:
        tuple: The configuration, the input text, the resolved path (None for
            stdin), and the file stat taken before reading (None for stdin).

    Raises:
        click.BadParameter: If the path or configuration is invalid.
        click.ClickException: If the file cannot be read safely.
    """
    base_dir = Path.cwd().resolve()
    path: Path | None = None
    if filepath is not None:
        try:
            path = normalize_filepath(filepath, base_dir)
        except ValueError as error:
            raise click.BadParameter(str(error)) from error

    try:
        config = build_config(path.parent if path is not None else base_dir, **overrides)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    if path is None:
        return config, sys.stdin.read(), None, None

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        content, stat_result = read_text(path, max_file_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    return config, content, path, stat_result


def _warn(message: str) -> None:
    click.echo(message, err=True)


@click.group()
@click.version_option(version=__version__, prog_name="zlmd")
def cli():
    """Format Zulip-flavored Markdown."""


@cli.command()
@click.argument("filepath", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--in-place", "-i", is_flag=True, help="Rewrite FILEPATH instead of printing")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail when code fences do not balance instead of passing the text through",
)
def escape(filepath: str | None, in_place: bool = False, strict: bool | None = None):
    """
    Rewrite code fences nested inside spoiler blocks to tildes.

    Args:
        filepath: Markdown file to read; standard input when omitted.
        in_place: Overwrite the file with the escaped text.
        strict: Override for the `strict` configuration value.

    Raises:
        click.BadParameter: If `--in-place` is used without a file, or the path
            or configuration is invalid.
        click.ClickException: If reading or writing fails, or fences do not
            balance in strict mode.

    Examples:
        zlmd escape reply.md --strict
        cat reply.md | zlmd escape
    """
    if in_place and filepath is None:
        raise click.BadParameter("--in-place requires a FILEPATH")

    config, content, path, stat_result = _load_input(filepath, strict=strict)
    source = path if path is not None else "<stdin>"

    try:
        escaped = escape_markdown_strict(content)
    except UnbalancedFenceError as error:
        if config.strict:
            raise click.ClickException(f"{source}: unbalanced code fences ({error})") from error
        _warn(f"Warning: {source}: unbalanced code fences ({error}); text left unchanged")
        escaped = content

    if not in_place:
        click.echo(escaped, nl=False)
        return

    if escaped == content:
        return
    try:
        write_atomic(path, escaped, stat_result, warn=_warn)
    except IOError as error:
        raise click.ClickException(str(error)) from error


@cli.command(name="spoiler")
@click.argument("heading")
@click.argument("filepath", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--fence",
    type=click.Choice([BACKTICK_FENCE, TILDE_FENCE]),
    help="Fence used for the spoiler block",
)
def spoiler_command(heading: str, filepath: str | None, fence: str | None = None):
    """
    Wrap the input in a spoiler block titled HEADING.

    Examples:
        zlmd spoiler "Stack trace" trace.txt
    """
    config, content, _, _ = _load_input(filepath, spoiler_fence=fence)
    text = content.removesuffix("\n")

    if config.spoiler_fence == BACKTICK_FENCE:
        click.echo(spoiler(heading, text))
    else:
        click.echo(spoiler_escaped(heading, text, config.spoiler_fence))


@cli.command(name="code")
@click.argument("filepath", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--language", "-l", help="Language tag for syntax highlighting")
def code_command(filepath: str | None, language: str | None = None):
    """
    Wrap the input in a fenced code block.

    Examples:
        zlmd code -l python script.py
    """
    config, content, _, _ = _load_input(filepath, code_language=language)
    click.echo(code_block(config.code_language, content.removesuffix("\n")))


@cli.command(name="time")
@click.argument("timestamp", required=False)
def time_command(timestamp: str | None):
    """
    Print a Zulip time tag for an ISO 8601 TIMESTAMP (default: now).

    Examples:
        zlmd time 2024-03-01T09:30:00+01:00
    """
    if timestamp is None:
        moment = datetime.now(timezone.utc)
    else:
        try:
            moment = datetime.fromisoformat(timestamp)
        except ValueError as error:
            raise click.BadParameter(f"Invalid ISO 8601 timestamp: {timestamp}") from error
    click.echo(format_time(moment))


if __name__ == "__main__":
    cli()
