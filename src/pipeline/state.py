# src/pipeline/state.py — v1
"""Pipeline state machine for one checksum run.

    IDLE → DISPATCHING → AWAITING_COMPLETION → AGGREGATING → WRITING → DONE

Any started, unfinished phase may move to FAILED: DISPATCHING when the
directory is unreadable, WRITING when the report cannot be written, and
AWAITING_COMPLETION or AGGREGATING only on an unexpected error or
cancellation. Per-file hashing errors never fail a run.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

from dirdigest.core.errors import PipelineStateError


class Phase(str, Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"
    AWAITING_COMPLETION = "awaiting_completion"
    AGGREGATING = "aggregating"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


_TRANSITIONS: dict[Phase, frozenset[Phase]] = {
    Phase.IDLE: frozenset({Phase.DISPATCHING}),
    Phase.DISPATCHING: frozenset({Phase.AWAITING_COMPLETION, Phase.FAILED}),
    Phase.AWAITING_COMPLETION: frozenset({Phase.AGGREGATING, Phase.FAILED}),
    Phase.AGGREGATING: frozenset({Phase.WRITING, Phase.FAILED}),
    Phase.WRITING: frozenset({Phase.DONE, Phase.FAILED}),
    Phase.DONE: frozenset(),
    Phase.FAILED: frozenset(),
}


class PipelineState(BaseModel):
    """Mutable state of a run: current phase, history, failure reason."""

    run_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    directory: str = ""
    phase: Phase = Phase.IDLE
    history: list[Phase] = Field(default_factory=lambda: [Phase.IDLE])
    error: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_terminal(self) -> bool:
        return self.phase in (Phase.DONE, Phase.FAILED)

    def can_transition(self, target: Phase) -> bool:
        return target in _TRANSITIONS[self.phase]

    def transition(self, target: Phase, error: str = "") -> None:
        """Move to ``target``.

        Raises:
            PipelineStateError: If the move is not allowed from the current phase.
        """
        if not self.can_transition(target):
            raise PipelineStateError(
                f"Illegal transition {self.phase.value} -> {target.value}"
            )
        self.phase = target
        self.history.append(target)
        if error:
            self.error = error
