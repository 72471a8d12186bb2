"""Configuration management commands."""

from pathlib import Path
from typing import Any

import click

from ..config.loader import TaskManagerConfig, load_config, save_config
from .utils import format_output, handle_error, quiet_echo, verbose_echo


def _load_from_context(ctx: click.Context) -> TaskManagerConfig:
    obj = ctx.obj or {}
    return load_config(obj.get("config"), obj.get("profile"), obj.get("cli_overrides"))


@click.group()
def config() -> None:
    """Manage configuration settings."""
    pass


@config.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show current configuration."""
    try:
        config_obj = _load_from_context(ctx)
    except Exception as e:
        handle_error(f"Failed to load configuration: {e}")
        return

    def human_format(data: dict[str, Any]) -> None:
        click.echo("Current configuration:")
        for key, value in sorted(data["configuration"].items()):
            click.echo(f"  {key}: {value}")

    format_output(ctx, {"configuration": config_obj.model_dump()}, human_format)


@config.command()
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Get a configuration value."""
    try:
        config_obj = _load_from_context(ctx)
    except Exception as e:
        handle_error(f"Failed to load configuration: {e}")
        return

    if key not in TaskManagerConfig.model_fields:
        handle_error(f"Unknown configuration key: {key}")
        return

    value = getattr(config_obj, key)
    format_output(ctx, {key: value}, lambda data: click.echo(data[key]))


@config.command()
@click.option("--path", help="Path for the configuration file")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_context
def init(ctx: click.Context, path: str | None, force: bool) -> None:
    """Write a configuration file with default values."""
    target = Path(path).expanduser() if path else None
    if target is not None and target.exists() and not force:
        handle_error(f"Configuration file already exists: {target} (use --force)")
        return

    verbose_echo(ctx, f"Writing default configuration to {target or 'default path'}")
    saved_path = save_config(TaskManagerConfig(), str(target) if target else None)
    quiet_echo(ctx, f"Configuration initialized at: {saved_path}")
