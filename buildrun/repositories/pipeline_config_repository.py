import os
from dataclasses import replace

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from buildrun.models import PipelineConfig
from buildrun.utils.yaml_loader import get_yaml_instance


class PipelineConfigRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find(self) -> PipelineConfig:
        if not os.path.isfile(self.file_path):
            raise ValueError(f"Invalid pipeline.yaml: {self.file_path} does not exist")
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = self.yaml.load(f)
        except (OSError, UnicodeDecodeError, YAMLError) as e:
            raise ValueError(f"Invalid pipeline.yaml: cannot parse {self.file_path}: {e}") from e
        try:
            parsed = PipelineConfig(**data)
        except Exception as e:
            raise ValueError(f"Invalid pipeline.yaml structure: {e}") from e
        return self._resolve_paths(parsed)

    # relative paths in the file are relative to the file itself
    def _resolve_paths(self, config: PipelineConfig) -> PipelineConfig:
        base = os.path.dirname(os.path.abspath(self.file_path))
        runtime = config.runtime
        if runtime.working_dir is not None:
            runtime = replace(runtime, working_dir=os.path.join(base, runtime.working_dir))
        return replace(
            config,
            build=replace(config.build, source_path=os.path.join(base, config.build.source_path)),
            package=replace(config.package, runtime_root=os.path.join(base, config.package.runtime_root)),
            runtime=runtime,
        )
