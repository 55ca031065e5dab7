"""
Environment-aware configuration builder combining TypedDict + python-decouple
for type-safe configuration management.
"""

from typing import Optional, Any, Union
from pathlib import Path
from decouple import Config as DecoupleConfig, RepositoryEmpty, RepositoryEnv

from tinypipe.config.loaders import load_config_file
from tinypipe.config.types import (
    COPY_MODES,
    TinyPipeConfig,
    LogConfig,
    PipelineDefaults,
)
from tinypipe.core.results import ConfigurationError

DEFAULT_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}"


def get_decouple_config(env_file: str = ".env") -> DecoupleConfig:
    """Get decouple config with proper fallbacks"""
    if Path(env_file).is_file():
        return DecoupleConfig(RepositoryEnv(env_file))
    # Environment variables only
    return DecoupleConfig(RepositoryEmpty())


def build_config(
    config_overrides: Optional[dict[str, Any]] = None,
    env_file: str = ".env",
    config_file: Optional[Union[str, Path]] = None,
) -> TinyPipeConfig:
    """Build configuration from environment variables, a config file and overrides.

    Later layers win: environment, then ``config_file``, then ``config_overrides``.
    """
    decouple_config = get_decouple_config(env_file)
    
    log_file = decouple_config("TINYPIPE_LOG_FILE", default="")
    log_config: LogConfig = {
        "level": decouple_config("TINYPIPE_LOG_LEVEL", default="WARNING").upper(),
        "format": decouple_config("TINYPIPE_LOG_FORMAT", default=DEFAULT_LOG_FORMAT),
        "file": Path(log_file) if log_file else None,
    }
    
    pipeline_defaults: PipelineDefaults = {
        "copy_mode": decouple_config("TINYPIPE_COPY_MODE", default="shallow").lower(),
    }
    
    config: TinyPipeConfig = {
        "log": log_config,
        "pipeline": pipeline_defaults,
    }
    
    if config_file:
        config = _deep_merge_config(config, load_config_file(config_file))
    
    if config_overrides:
        config = _deep_merge_config(config, config_overrides)
    
    validate_config(config)
    return config


def validate_config(config: TinyPipeConfig) -> None:
    """Raise ConfigurationError when a setting has an unsupported value"""
    copy_mode = config["pipeline"]["copy_mode"]
    if copy_mode not in COPY_MODES:
        raise ConfigurationError(
            f"Unsupported copy mode {copy_mode!r}, expected one of {COPY_MODES}"
        )


def _deep_merge_config(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge configuration dictionaries"""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge_config(result[key], value)
        else:
            result[key] = value
    return result
