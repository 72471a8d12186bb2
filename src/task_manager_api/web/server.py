"""
Web server startup script for the Task Manager API.

Provides utilities for starting the FastAPI server with proper configuration.
"""

import os
from pathlib import Path
from typing import Any

import uvicorn

from ..config.loader import TaskManagerConfig, load_config
from ..utils.logging import ConfigurationError, LogContext, get_logger, setup_logging
from .app import create_app

logger = get_logger(__name__, LogContext.WEB)

APP_FACTORY = "task_manager_api.web.app:app_factory"


def get_server_config(config: TaskManagerConfig | None = None) -> dict[str, Any]:
    """
    Get server configuration from environment and config files.

    Args:
        config: Already loaded configuration (loaded from disk when omitted)

    Returns:
        Dictionary containing server configuration
    """
    config = config or load_config()

    server_config: dict[str, Any] = {
        "host": config.web_host,
        "port": config.web_port,
        "reload": False,
        "log_level": config.log_level.lower(),
    }

    # PORT is the conventional variable set by hosting platforms
    if "PORT" in os.environ:
        try:
            server_config["port"] = int(os.environ["PORT"])
        except ValueError:
            raise ConfigurationError(
                f"PORT must be an integer, got {os.environ['PORT']!r}"
            ) from None

    if "TASK_MANAGER_WEB_RELOAD" in os.environ:
        server_config["reload"] = os.environ["TASK_MANAGER_WEB_RELOAD"].lower() in (
            "true",
            "1",
            "yes",
        )

    return server_config


def run_server(
    host: str | None = None,
    port: int | None = None,
    reload: bool | None = None,
    log_level: str | None = None,
    config: TaskManagerConfig | None = None,
) -> None:
    """
    Run the FastAPI server with specified or default configuration.

    Args:
        host: Host to bind to (overrides config)
        port: Port to bind to (overrides config)
        reload: Enable auto-reload (overrides config)
        log_level: Log level (overrides config)
        config: Already loaded configuration
    """
    config = config or load_config()
    server_config = get_server_config(config)

    if host is not None:
        server_config["host"] = host
    if port is not None:
        server_config["port"] = port
    if reload is not None:
        server_config["reload"] = reload
    if log_level is not None:
        server_config["log_level"] = log_level.lower()

    setup_logging(
        log_level=server_config["log_level"],
        log_file=Path(config.log_file).expanduser() if config.log_file else None,
        enable_structured=config.structured_logging,
    )

    logger.info(
        "Starting Task Manager web server",
        host=server_config["host"],
        port=server_config["port"],
        reload=server_config["reload"],
        log_level=server_config["log_level"],
    )
    logger.info(
        f"Server running on http://{server_config['host']}:{server_config['port']}"
    )

    # Reload needs an import string, which rebuilds the app from disk config
    app: Any = APP_FACTORY if server_config["reload"] else create_app(config)

    # Single worker: each process would hold its own task store
    uvicorn.run(
        app,
        factory=server_config["reload"],
        host=server_config["host"],
        port=server_config["port"],
        reload=server_config["reload"],
        log_level=server_config["log_level"],
        log_config=None,
        access_log=False,
    )


def main() -> None:
    """Main entry point for web server script."""
    run_server()


if __name__ == "__main__":
    main()
