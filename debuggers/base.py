"""
Shared step-machine contract for the debuggers.
Steps are an ordered table of pure functions; the engine only sequences them.
"""

import copy
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from common.constants import PATHS
from common.utils import setup_logging

from .errors import AlreadyCompleteError, InvalidInputError, NotActiveError

logger = setup_logging(__name__, PATHS["app_log_file"])

# (prior trace, dataset context) -> (next trace, display detail)
StepFunction = Callable[[Dict[str, Any], Dict[str, Any]], Tuple[Dict[str, Any], str]]


class StepEngine:
    """
    Drives one algorithm run one step at a time.
    Subclasses provide the step table, titles and the input field name.
    """

    name = "engine"
    max_steps = 0
    input_field = "input"
    step_titles: Sequence[str] = ()
    steps: Sequence[StepFunction] = ()

    def __init__(self, context):
        self.context = context
        self.current_step = 0
        self.is_active = False
        self._input: Optional[str] = None
        self._trace: Dict[str, Any] = {}
        self._step_log: List[Dict[str, Any]] = []

    def initialize(self, value) -> Dict[str, Any]:
        """Start a new run on value and execute step 1."""
        if self.is_active and value == self._input:
            logger.debug(f"[{self.name}] initialize skipped, already active on the same input")
            return self.snapshot()

        self._validate_input(value)

        trace, detail = self._run_step(1, {self.input_field: value})

        self._input = value
        self._trace = trace
        self._step_log = [self._log_entry(1, detail)]
        self.current_step = 1
        self.is_active = True
        logger.info(f"[{self.name}] Initialized: step 1/{self.max_steps} - {detail}")
        return self.snapshot()

    def advance(self) -> Dict[str, Any]:
        """Execute the next step and return the updated snapshot."""
        if not self.is_active:
            raise NotActiveError(f"{self.name} debugger has not been initialized")
        if self.is_complete():
            raise AlreadyCompleteError(f"{self.name} debugger already finished all {self.max_steps} steps")

        step = self.current_step + 1
        trace, detail = self._run_step(step, self._trace)

        self._trace = trace
        self._step_log.append(self._log_entry(step, detail))
        self.current_step = step
        logger.info(f"[{self.name}] Step {step}/{self.max_steps} - {detail}")
        return self.snapshot()

    def reset(self) -> None:
        self.current_step = 0
        self.is_active = False
        self._input = None
        self._trace = {}
        self._step_log = []
        logger.info(f"[{self.name}] Reset")

    def is_complete(self) -> bool:
        return self.current_step == self.max_steps

    def snapshot(self) -> Dict[str, Any]:
        """Deep copy of the trace plus progress fields. Never mutates the engine."""
        snapshot = copy.deepcopy(self._trace)
        snapshot.update(
            {
                "current_step": self.current_step,
                "max_steps": self.max_steps,
                "completed": self.is_complete(),
                "active": self.is_active,
                "step_title": self.step_titles[self.current_step - 1] if self.current_step else None,
                "step_log": copy.deepcopy(self._step_log),
            }
        )
        return snapshot

    def _validate_input(self, value) -> None:
        if value is None or not isinstance(value, str) or not value.strip():
            raise InvalidInputError(f"{self.name} debugger needs a non-empty {self.input_field}")

    def _run_step(self, step: int, trace: Dict[str, Any]) -> Tuple[Dict[str, Any], str]:
        # Steps work on a private copy so a failure leaves the committed trace untouched
        step_function = self.steps[step - 1]
        return step_function(copy.deepcopy(trace), self.context)

    def _log_entry(self, step: int, detail: str) -> Dict[str, Any]:
        return {"step": step, "title": self.step_titles[step - 1], "detail": detail}
