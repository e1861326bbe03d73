"""
Configuration management for elbow_router with Pydantic validation
"""

from typing import Any, Dict, Literal, Optional, Union
from pathlib import Path
import os
import re
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..routing.grid import GRID_SIZE
from .exceptions import ConfigError


# ============================================================================
# Pydantic Models for Configuration Validation
# ============================================================================

class OutputConfig(BaseModel):
    """Output configuration"""
    format: Literal['points', 'svg', 'json'] = Field('points', description="How routed paths are printed")
    indent: Optional[int] = Field(2, ge=0, description="JSON indentation (None for compact)")


class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR'] = Field('INFO', description="Console log level")


class RouterConfig(BaseModel):
    """Pydantic model for router configuration"""
    model_config = ConfigDict(extra='ignore')  # Ignore extra fields in YAML

    version: Optional[Union[int, float, str]] = None
    grid_size: int = Field(GRID_SIZE, gt=0, description="Grid spacing all coordinates are snapped to")
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ============================================================================
# Environment Variable Substitution
# ============================================================================

def _substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values

    Supports:
    - ${VAR_NAME}
    - $VAR_NAME
    - ${VAR_NAME:-default_value}

    Args:
        value: Configuration value (can be str, dict, list, or other)

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        def replace_with_default(match):
            var_name = match.group(1)
            default_value = match.group(3) if match.group(2) else None
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            elif default_value is not None:
                return default_value
            else:
                raise ConfigError(f"Environment variable '{var_name}' is not set and no default value provided")

        value = re.sub(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(:-([^}]*))?\}', replace_with_default, value)

        def replace_simple(match):
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            raise ConfigError(f"Environment variable '{var_name}' is not set")

        return re.sub(r'\$([A-Za-z_][A-Za-z0-9_]*)', replace_simple, value)

    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]

    return value


# ============================================================================
# Loading
# ============================================================================

def config_from_dict(config_dict: Optional[Dict]) -> RouterConfig:
    """Validate a configuration dictionary (parsed from YAML)"""
    config_dict = _substitute_env_vars(config_dict or {})

    try:
        return RouterConfig(**config_dict)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e


def load_yaml(path: Union[str, Path]) -> Any:
    """
    Read a YAML file

    Raises:
        ConfigError: If the file is missing or is not valid YAML
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"File not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def load_config(path: Optional[Union[str, Path]] = None) -> RouterConfig:
    """
    Load router configuration from a YAML file

    Args:
        path: Path to the YAML file (defaults are used when None)

    Returns:
        Validated RouterConfig
    """
    if path is None:
        return RouterConfig()

    data = load_yaml(path)
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"Configuration root must be a mapping, got {type(data).__name__}")

    return config_from_dict(data)
