import logging
from typing import override

from buildrun.clients.build_tool_client import BuildTool
from buildrun.clients.health_check_client import HealthCheckClient
from buildrun.clients.process_client import ProcessClient
from buildrun.errors import PipelineError
from buildrun.models import PipelineConfig, PipelineResult, PipelineState
from buildrun.services.artifact_packager_service import ArtifactPackagerService
from buildrun.services.build_stage_service import BuildStageService
from buildrun.services.process_launcher_service import ProcessLauncherService
from buildrun.services.service import Service
from buildrun.utils.logging import setup_logger


class PipelineService(Service[PipelineResult]):
    """Builds, packages and launches a service, one stage after the other.

    Every call to run() is an independent one-shot run: it starts from
    ``pending`` and ends in ``running`` or ``failed``. Nothing is retried.
    """

    def __init__(
        self,
        config: PipelineConfig,
        build_tool: BuildTool | None = None,
        processes: ProcessClient | None = None,
        health: HealthCheckClient | None = None,
    ):
        self.config: PipelineConfig = config
        self.builder: BuildStageService = BuildStageService(config.build, build_tool)
        self.packager: ArtifactPackagerService = ArtifactPackagerService(config.package)
        self.launcher: ProcessLauncherService = ProcessLauncherService(processes, health)
        self.logger: logging.Logger = setup_logger("PipelineService")

    @override
    def run(self) -> PipelineResult:
        result = PipelineResult()
        try:
            result.transition(PipelineState.BUILDING)
            artifact = self.builder.run()

            result.transition(PipelineState.PACKAGING)
            result.artifact = self.packager.package(artifact)

            result.transition(PipelineState.LAUNCHING)
            runtime = self.config.runtime.with_artifact(result.artifact)
            result.handle = self.launcher.launch(runtime)

            result.transition(PipelineState.RUNNING)
        except PipelineError as e:
            self.logger.error(f"Pipeline failed while {result.state.value}: {e}")
            result.error = e
            result.transition(PipelineState.FAILED)
        return result
