from enum import Enum


class PipelineState(str, Enum):
    PENDING = "pending"
    BUILDING = "building"
    PACKAGING = "packaging"
    LAUNCHING = "launching"
    RUNNING = "running"
    FAILED = "failed"


TRANSITIONS: dict[PipelineState, set[PipelineState]] = {
    PipelineState.PENDING: {PipelineState.BUILDING},
    PipelineState.BUILDING: {PipelineState.PACKAGING, PipelineState.FAILED},
    PipelineState.PACKAGING: {PipelineState.LAUNCHING, PipelineState.FAILED},
    PipelineState.LAUNCHING: {PipelineState.RUNNING, PipelineState.FAILED},
    PipelineState.RUNNING: set(),
    PipelineState.FAILED: set(),
}
