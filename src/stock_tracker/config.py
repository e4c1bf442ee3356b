"""
Configuration loading and validation for Stock Tracker.

This module handles configuration file parsing, validation, and provides
sensible defaults for all configuration options.
"""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

from stock_tracker.store.inventory_store import DEFAULT_STORAGE_KEY

CONFIG_FILE_NAMES = [".stock-tracker.yaml", ".stock-tracker.yml"]


class StorageConfig(BaseModel):
    """Configuration for local storage."""
    
    path: Path = Field(
        default=Path("~/.stock-tracker/storage.json"),
        description="Location of the key-value storage file.",
    )
    key: str = Field(
        default=DEFAULT_STORAGE_KEY,
        min_length=1,
        description="Name of the storage slot holding the inventory.",
    )
    
    class Config:
        extra = "forbid"


class OutputConfig(BaseModel):
    """Configuration for output formatting."""
    
    colorize: bool = Field(
        default=True,
        description="Use colors in terminal output.",
    )
    default_format: Literal["text", "json", "yaml", "markdown"] = Field(
        default="text",
        description="Format used by 'list' when --format is not given.",
    )
    
    class Config:
        extra = "forbid"


class LoggingConfig(BaseModel):
    """Configuration for diagnostic logging."""
    
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level used when --verbose is not given.",
    )
    
    class Config:
        extra = "forbid"


class Config(BaseModel):
    """Root configuration model for Stock Tracker."""
    
    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    
    class Config:
        """Pydantic model configuration."""
        
        extra = "forbid"


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from a YAML file.
    
    Args:
        config_path: Path to the configuration file. If None, returns defaults.
        
    Returns:
        Config object with loaded or default values.
        
    Raises:
        FileNotFoundError: If the specified config file doesn't exist.
        ValueError: If the config file is invalid.
    """
    if config_path is None:
        return Config()
    
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return Config(**data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}") from e
    except Exception as e:
        raise ValueError(f"Failed to load configuration: {e}") from e


def find_config_file(start_path: Path) -> Optional[Path]:
    """
    Search for a configuration file starting from the given path.
    
    Searches for `.stock-tracker.yaml` or `.stock-tracker.yml`
    in the start path and parent directories.
    
    Args:
        start_path: Directory to start searching from.
        
    Returns:
        Path to the config file if found, None otherwise.
    """
    current = start_path.resolve()
    while current != current.parent:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.exists():
                return config_path
        current = current.parent
    
    return None
