"""
Reusable linear pipeline of single-input/single-output steps.

A Pipeline is built once from an ordered sequence of steps and then applied
to any number of items, e.g. every line of a log file. Each step receives
the previous step's result. A step returning ``None`` ends the run early and
the pipeline returns ``None``; exceptions raised by steps reach the caller
untouched.
"""

import copy
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from tinypipe.config.types import COPY_MODES, CopyMode
from tinypipe.core.logging import get_logger
from tinypipe.core.results import ConfigurationError, Maybe

logger = get_logger(__name__)

# A step maps one value to another, or to None to stop the pipeline
Step = Callable[[Any], Any]

_COPIERS: dict[str, Callable[[Any], Any]] = {
    "shallow": copy.copy,
    "deep": copy.deepcopy,
}


class Pipeline:
    """Ordered, immutable sequence of steps applied by ``run``"""
    
    def __init__(
        self,
        steps: Iterable[Step] = (),
        *,
        copy_mode: CopyMode = "shallow",
        name: Optional[str] = None,
    ):
        if copy_mode not in COPY_MODES:
            raise ConfigurationError(
                f"Unsupported copy mode {copy_mode!r}, expected one of {COPY_MODES}"
            )
        self._steps: tuple[Step, ...] = tuple(steps)
        self._copy_mode = copy_mode
        self._copy = _COPIERS[copy_mode]
        self._name = name or f"pipeline-{id(self):x}"

        self._log_event("built", {"steps": len(self._steps), "copy_mode": copy_mode})
    
    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps
    
    @property
    def copy_mode(self) -> CopyMode:
        return self._copy_mode
    
    @property
    def name(self) -> str:
        return self._name
    
    def run(self, item: Any) -> Any:
        """
        Thread a copy of ``item`` through every step in order.
        
        Args:
            item: Input value, accepted by the first step
            
        Returns:
            The last step's result, or None if any step returned None
        """
        try:
            working = self._copy(item)
        except TypeError:
            # Files, generators and sockets cannot be copied
            working = item

        for step in self._steps:
            if working is None:
                return None
            working = step(working)
        
        return working
    
    def run_maybe(self, item: Any) -> Maybe[Any]:
        """Like ``run`` but returns Some(result) or Nothing"""
        return Maybe.from_optional(self.run(item))
    
    def run_all(self, items: Iterable[Any], *, drop_absent: bool = False) -> Iterator[Any]:
        """
        Lazily run the pipeline over every item, preserving input order.
        
        Args:
            items: Iterable of input values (lines of a file, records, ...)
            drop_absent: Skip items whose result is None instead of yielding None
            
        Yields:
            One result per input item (fewer when ``drop_absent`` is set)
        """
        processed = 0
        absent = 0
        
        for item in items:
            result = self.run(item)
            processed += 1
            if result is None:
                absent += 1
                if drop_absent:
                    continue
            yield result
        
        self._log_event("exhausted", {"processed": processed, "absent": absent})

    def _log_event(self, event_type: str, details: dict[str, Any]) -> None:
        logger.bind(
            event_type=event_type,
            pipeline=self._name,
            details=details
        ).debug(f"Pipeline {self._name} {event_type}: {details}")

    def __call__(self, item: Any) -> Any:
        return self.run(item)

    def __add__(self, other: Union["Pipeline", Iterable[Step]]) -> "Pipeline":
        """Return a new pipeline running this pipeline's steps, then ``other``'s"""
        if isinstance(other, Pipeline):
            other_steps = other.steps
            other_name = other.name
        elif isinstance(other, (str, bytes)):
            return NotImplemented
        else:
            try:
                other_steps = tuple(other)
            except TypeError:
                return NotImplemented
            other_name = "steps"
        return Pipeline(
            self._steps + other_steps,
            copy_mode=self._copy_mode,
            name=f"{self._name}+{other_name}",
        )
    
    def __len__(self) -> int:
        return len(self._steps)
    
    def __repr__(self) -> str:
        names = ", ".join(getattr(s, "__name__", repr(s)) for s in self._steps)
        return f"Pipeline(name={self._name!r}, copy_mode={self._copy_mode!r}, steps=[{names}])"
