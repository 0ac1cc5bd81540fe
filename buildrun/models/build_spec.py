from typing import Annotated

from pydantic import Field
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class BuildSpec:
    source_path: str
    artifact_path: str
    tool: str = "maven"
    build_command: list[str] | None = None
    skip_tests: bool = False
    timeout_seconds: Annotated[float, Field(gt=0)] | None = 600
    environment: dict[str, str] = Field(default_factory=dict)

    def __post_init__(self):
        if self.tool == "command" and not self.build_command:
            raise ValueError("build_command is required when tool is 'command'")
