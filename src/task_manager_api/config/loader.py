"""Configuration loading and management."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..utils.logging import ConfigurationError, LogContext, LogLevel, get_logger

logger = get_logger(__name__, LogContext.CONFIG)

ENV_PREFIX = "TASK_MANAGER_"


class TaskManagerConfig(BaseModel):
    """Configuration model for the Task Manager API."""

    # Web interface
    web_host: str = Field(default="localhost", description="Web interface host")
    web_port: int = Field(default=3000, description="Web interface port")
    cors_origins: list[str] = Field(
        default_factory=list, description="Origins allowed by CORS (empty disables)"
    )

    # Store
    seed_tasks: bool = Field(
        default=True, description="Load the starter tasks on startup"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: str | None = Field(default=None, description="Log file path")
    structured_logging: bool = Field(
        default=True, description="Emit JSON structured log lines"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and check the log level name."""
        level = value.upper()
        if level not in LogLevel.__members__:
            raise ValueError(
                f"log_level must be one of {', '.join(LogLevel.__members__)}"
            )
        return level

    @field_validator("web_port")
    @classmethod
    def validate_web_port(cls, value: int) -> int:
        """Check the port is in the TCP range."""
        if not 0 < value < 65536:
            raise ValueError("web_port must be between 1 and 65535")
        return value


def find_config_file(custom_path: str | None = None) -> Path | None:
    """Find configuration file in standard locations."""
    if custom_path:
        path = Path(custom_path).expanduser()
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {custom_path}")

    search_paths = [
        Path.cwd() / "task-manager.yaml",
        Path.cwd() / "task-manager.yml",
        Path.home() / ".config" / "task-manager" / "config.yaml",
        Path.home() / ".task-manager.yaml",
    ]

    for path in search_paths:
        if path.exists():
            return path

    return None


def load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration from YAML file."""
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {config_path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to read config file {config_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping at the top level"
        )

    logger.debug("Configuration file loaded", path=str(config_path))
    return data


def load_env_vars() -> dict[str, Any]:
    """Load configuration from environment variables."""
    config: dict[str, Any] = {}

    env_mappings = {
        f"{ENV_PREFIX}WEB_HOST": "web_host",
        f"{ENV_PREFIX}WEB_PORT": "web_port",
        f"{ENV_PREFIX}CORS_ORIGINS": "cors_origins",
        f"{ENV_PREFIX}SEED_TASKS": "seed_tasks",
        f"{ENV_PREFIX}LOG_LEVEL": "log_level",
        f"{ENV_PREFIX}LOG_FILE": "log_file",
        f"{ENV_PREFIX}STRUCTURED_LOGGING": "structured_logging",
    }

    for env_var, config_key in env_mappings.items():
        if env_var not in os.environ:
            continue
        env_value = os.environ[env_var]
        if config_key == "web_port":
            try:
                config[config_key] = int(env_value)
            except ValueError:
                continue
        elif config_key in ("seed_tasks", "structured_logging"):
            config[config_key] = env_value.lower() in ("true", "1", "yes", "on")
        elif config_key == "cors_origins":
            config[config_key] = [
                origin.strip() for origin in env_value.split(",") if origin.strip()
            ]
        else:
            config[config_key] = env_value

    return config


def load_config(
    config_path: str | None = None,
    profile: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> TaskManagerConfig:
    """Load configuration from file and environment variables.

    Precedence order (highest to lowest):
    1. CLI flag overrides
    2. Environment variables
    3. Configuration file (with profile support)
    4. Default values
    """
    config_data: dict[str, Any] = {}

    config_file = find_config_file(config_path)
    if config_file:
        file_data = load_config_file(config_file)
        config_data.update({k: v for k, v in file_data.items() if k != "profiles"})

        profiles = file_data.get("profiles") or {}
        if profile and profile in profiles:
            config_data.update(profiles[profile])

    config_data.update(load_env_vars())

    if cli_overrides:
        config_data.update(cli_overrides)

    try:
        return TaskManagerConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def save_config(config: TaskManagerConfig, config_path: str | None = None) -> Path:
    """Save configuration to file."""
    if config_path:
        path = Path(config_path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
    else:
        config_dir = Path.home() / ".config" / "task-manager"
        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / "config.yaml"

    with open(path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=True)

    return path
