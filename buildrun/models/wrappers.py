from dataclasses import replace

from pydantic.dataclasses import dataclass

from buildrun.models.build_spec import BuildSpec
from buildrun.models.package_spec import PackageSpec
from buildrun.models.runtime_config import RuntimeConfig


@dataclass(frozen=True)
class PipelineConfig:
    build: BuildSpec
    package: PackageSpec
    runtime: RuntimeConfig

    def with_overrides(self, skip_tests: bool | None = None, port: int | None = None) -> "PipelineConfig":
        build = self.build if skip_tests is None else replace(self.build, skip_tests=skip_tests)
        runtime = self.runtime if port is None else self.runtime.with_port(port)
        return replace(self, build=build, runtime=runtime)
