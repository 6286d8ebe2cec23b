"""
Snap & Solve pipeline: extraction followed by evaluation.

SnapSolvePipeline is stateless and safe to share between requests.
SolveSession tracks the idle/processing/success/error state of one user's
actions and drops the outcome of any action superseded by a newer one.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from app.projects.snap_solve.core.evaluator import Evaluator
from app.projects.snap_solve.core.extractor import Extractor
from app.projects.snap_solve.core.payload import ImagePayload
from app.projects.snap_solve.core.result import is_tagged_error

logger = logging.getLogger(__name__)


class ProcessState(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SolveOutcome:
    state: ProcessState
    expression: str | None = None
    result: str | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "expression": self.expression,
            "result": self.result,
            "error": self.error,
        }


class SnapSolvePipeline:
    def __init__(self, extractor: Extractor, evaluator: Evaluator):
        self.extractor = extractor
        self.evaluator = evaluator

    async def solve(self, image: ImagePayload) -> SolveOutcome:
        """Extract the expression from image, then evaluate it."""
        expression = await self.extractor.extract(image)
        if is_tagged_error(expression):
            return SolveOutcome(ProcessState.ERROR, error=expression)
        return await self.recalculate(expression)

    async def recalculate(self, expression: str) -> SolveOutcome:
        """Evaluate an (optionally user-edited) expression."""
        result = await self.evaluator.evaluate(expression)
        if is_tagged_error(result):
            return SolveOutcome(ProcessState.ERROR, expression=expression, error=result)
        return SolveOutcome(ProcessState.SUCCESS, expression=expression, result=result)


class SolveSession:
    def __init__(self, pipeline: SnapSolvePipeline):
        self.pipeline = pipeline
        self.outcome = SolveOutcome(ProcessState.IDLE)
        self._generation = 0

    @property
    def state(self) -> ProcessState:
        return self.outcome.state

    async def submit(self, image: ImagePayload) -> SolveOutcome | None:
        """Run the full pipeline. Returns None if a newer action superseded this one."""
        return await self._run(self.pipeline.solve(image))

    async def recalculate(self, expression: str) -> SolveOutcome | None:
        return await self._run(self.pipeline.recalculate(expression))

    def reset(self):
        """Back to idle; in-flight actions become stale."""
        self._generation += 1
        self.outcome = SolveOutcome(ProcessState.IDLE)

    async def _run(self, work) -> SolveOutcome | None:
        self._generation += 1
        generation = self._generation
        self.outcome = SolveOutcome(ProcessState.PROCESSING)

        outcome = await work
        if generation != self._generation:
            logger.debug(f"Discarding stale outcome from action {generation}")
            return None
        self.outcome = outcome
        return outcome
