"""
Configuration type definitions using TypedDict for type safety
with python-decouple integration for environment variables.
"""

from typing import TypedDict, Optional, Literal
from pathlib import Path

CopyMode = Literal["shallow", "deep"]

COPY_MODES: tuple[str, ...] = ("shallow", "deep")

class LogConfig(TypedDict):
    """Logging configuration"""
    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: str                      # loguru format string, used by the file sink
    file: Optional[Path]

class PipelineDefaults(TypedDict):
    """Defaults applied to pipelines built through create_pipeline"""
    copy_mode: CopyMode              # how run() copies its input

class TinyPipeConfig(TypedDict):
    """Main tinypipe configuration"""
    log: LogConfig
    pipeline: PipelineDefaults
