"""Configuration types, loaders and the environment-aware builder."""

from tinypipe.config.types import TinyPipeConfig, LogConfig, PipelineDefaults
from tinypipe.config.defaults import build_config

__all__ = ["TinyPipeConfig", "LogConfig", "PipelineDefaults", "build_config"]
