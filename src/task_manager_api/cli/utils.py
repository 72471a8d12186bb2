"""Output helpers shared by the task-manager commands."""

import json
import sys
from collections.abc import Callable
from typing import Any

import click


def _flag(ctx: click.Context, name: str) -> bool:
    """Read a global flag (verbose, quiet, json) set by the main group."""
    return bool(ctx.obj and ctx.obj.get(name))


def handle_error(message: str, exit_code: int = 1) -> None:
    """Print an error in red on stderr and exit."""
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(exit_code)


def verbose_echo(ctx: click.Context, message: str) -> None:
    """Print a diagnostic line on stderr when --verbose is set."""
    if _flag(ctx, "verbose"):
        click.secho(f"[VERBOSE] {message}", fg="blue", err=True)


def quiet_echo(ctx: click.Context, message: str) -> None:
    """Print a status line unless --quiet is set."""
    if not _flag(ctx, "quiet"):
        click.echo(message)


def format_output(
    ctx: click.Context,
    data: dict[str, Any],
    human_format_func: Callable[[dict[str, Any]], None] | None = None,
) -> None:
    """Print command results as JSON with --json, otherwise for humans.

    Without a formatter each top-level key is printed as ``key: value``.
    """
    if _flag(ctx, "json"):
        click.echo(json.dumps(data, indent=2, default=str))
        return

    if human_format_func is not None:
        human_format_func(data)
        return

    for key, value in data.items():
        click.echo(f"{key}: {value}")
