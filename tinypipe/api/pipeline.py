"""
High-level pipeline API for creating and composing pipelines.
"""

from typing import Optional, Iterable

from tinypipe.config.defaults import build_config
from tinypipe.config.types import TinyPipeConfig
from tinypipe.core.pipeline import Pipeline, Step


def create_pipeline(
    steps: Iterable[Step],
    config: Optional[TinyPipeConfig] = None,
    name: Optional[str] = None,
) -> Pipeline:
    """
    Create a pipeline using configured defaults.
    
    Args:
        steps: Ordered steps to run
        config: Configuration, built from the environment when omitted
        name: Optional pipeline name used in log events
        
    Returns:
        Pipeline ready to run
    """
    if config is None:
        config = build_config()
    
    return Pipeline(steps, copy_mode=config["pipeline"]["copy_mode"], name=name)


def compose_pipelines(*pipelines: Pipeline, name: Optional[str] = None) -> Pipeline:
    """Compose multiple pipelines into one, running them left to right"""
    if not pipelines:
        raise ValueError("No pipelines provided")

    steps: list[Step] = []
    for pipeline in pipelines:
        steps.extend(pipeline.steps)

    # Use first pipeline's copy mode
    return Pipeline(
        steps,
        copy_mode=pipelines[0].copy_mode,
        name=name or "+".join(p.name for p in pipelines),
    )
