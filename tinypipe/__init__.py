"""
tinypipe: reusable, linear pipelines of single-value steps.

Define a transformation once as a list of steps and run it over every item
you need, e.g. each line of a log file. A step returning None stops the
pipeline early.
"""

__version__ = "1.0.0"

from loguru import logger

from tinypipe.api.pipeline import create_pipeline, compose_pipelines
from tinypipe.config.defaults import build_config
from tinypipe.config.types import TinyPipeConfig
from tinypipe.core.logging import configure_logging
from tinypipe.core.pipeline import Pipeline, Step
from tinypipe.core.results import (
    Maybe,
    Some,
    Nothing,
    TinyPipeError,
    ConfigurationError,
    from_maybe,
    to_maybe,
)

# Silent until configure_logging() is called
logger.disable("tinypipe")

__all__ = [
    "Pipeline",
    "Step",
    "create_pipeline",
    "compose_pipelines",
    "build_config",
    "configure_logging",
    "TinyPipeConfig",
    "Maybe",
    "Some",
    "Nothing",
    "TinyPipeError",
    "ConfigurationError",
    "from_maybe",
    "to_maybe",
]
