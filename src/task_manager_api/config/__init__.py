"""Configuration management module."""

from .loader import TaskManagerConfig, find_config_file, load_config, save_config

__all__ = ["TaskManagerConfig", "load_config", "save_config", "find_config_file"]
