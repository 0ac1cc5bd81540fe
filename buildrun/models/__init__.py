from .artifact import Artifact
from .build_spec import BuildSpec
from .package_spec import PackageSpec
from .runtime_config import RuntimeConfig
from .pipeline_state import PipelineState
from .process_handle import ProcessHandle
from .pipeline_result import PipelineResult
from .wrappers import PipelineConfig

__all__ = [
    "Artifact",
    "BuildSpec",
    "PackageSpec",
    "RuntimeConfig",
    "PipelineState",
    "ProcessHandle",
    "PipelineResult",
    "PipelineConfig",
]
