import glob
import logging
import os
from typing import override

from buildrun.clients.build_tool_client import BuildTool, get_build_tool
from buildrun.errors import BuildFailure
from buildrun.models import Artifact, BuildSpec
from buildrun.services.service import Service
from buildrun.utils.logging import setup_logger


class BuildStageService(Service[Artifact]):
    def __init__(self, spec: BuildSpec, tool: BuildTool | None = None):
        self.spec: BuildSpec = spec
        self.tool: BuildTool = tool or get_build_tool(spec.tool)
        self.logger: logging.Logger = setup_logger("BuildStageService")

    @override
    def run(self) -> Artifact:
        if not os.path.isdir(self.spec.source_path):
            raise BuildFailure(None, f"Source path {self.spec.source_path} does not exist")

        skip = " (tests skipped)" if self.spec.skip_tests else ""
        self.logger.info(f"Building {self.spec.source_path} with {self.spec.tool}{skip}")
        self.tool.build(self.spec)

        artifact = Artifact.from_path(self.resolve_artifact_path())
        self.logger.info(f"Build produced {artifact.path}")
        return artifact

    def resolve_artifact_path(self) -> str:
        pattern = os.path.join(self.spec.source_path, self.spec.artifact_path)
        if not glob.has_magic(pattern):
            return pattern
        matches = [m for m in glob.glob(pattern) if os.path.isfile(m)]
        if not matches:
            self.logger.warning(f"No file matches {pattern}")
            return pattern
        return max(matches, key=os.path.getmtime)
