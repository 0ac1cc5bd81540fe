from dataclasses import dataclass, field

from buildrun.errors import InvalidStateTransition, PipelineError
from .artifact import Artifact
from .pipeline_state import PipelineState, TRANSITIONS
from .process_handle import ProcessHandle


@dataclass
class PipelineResult:
    state: PipelineState = PipelineState.PENDING
    history: list[PipelineState] = field(default_factory=lambda: [PipelineState.PENDING])
    artifact: Artifact | None = None
    handle: ProcessHandle | None = None
    error: PipelineError | None = None

    @property
    def exit_code(self) -> int | None:
        if self.state == PipelineState.RUNNING:
            return 0
        if self.state == PipelineState.FAILED and self.error is not None:
            return self.error.exit_code
        return None

    def transition(self, state: PipelineState) -> None:
        if state not in TRANSITIONS[self.state]:
            raise InvalidStateTransition(f"Cannot move from {self.state.value} to {state.value}")
        self.state = state
        self.history.append(state)
