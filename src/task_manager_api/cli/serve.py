"""Web server command."""

import click

from ..config.loader import load_config
from ..web.server import get_server_config, run_server
from .utils import handle_error, quiet_echo


@click.command()
@click.option("--port", "-p", type=int, default=None, help="Port to run on")
@click.option("--host", "-h", default=None, help="Host to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, port: int | None, host: str | None, reload: bool) -> None:
    """Start the task API server."""
    obj = ctx.obj or {}
    try:
        config = load_config(
            obj.get("config"), obj.get("profile"), obj.get("cli_overrides")
        )
        server_config = get_server_config(config)
    except Exception as e:
        handle_error(f"Failed to load configuration: {e}")
        return

    quiet_echo(
        ctx,
        "Starting Task Manager API on "
        f"{host or server_config['host']}:{port or server_config['port']}",
    )
    if reload:
        quiet_echo(ctx, "Development mode: auto-reload enabled")

    try:
        run_server(host=host, port=port, reload=reload or None, config=config)
    except KeyboardInterrupt:
        click.echo("\nShutting down Task Manager API...")
