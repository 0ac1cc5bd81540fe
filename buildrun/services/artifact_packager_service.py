import logging
import os
import shutil

from buildrun.errors import ArtifactEmpty, ArtifactMissing, ArtifactStagingFailure
from buildrun.models import Artifact, PackageSpec
from buildrun.utils.logging import setup_logger


class ArtifactPackagerService:
    def __init__(self, spec: PackageSpec):
        self.spec: PackageSpec = spec
        self.logger: logging.Logger = setup_logger("ArtifactPackagerService")

    def package(self, artifact: Artifact) -> Artifact:
        self.validate(artifact)

        source = os.path.abspath(artifact.path)
        target = os.path.join(os.path.abspath(self.spec.runtime_root), os.path.basename(artifact.path))
        if source == target:
            self.logger.info(f"Artifact {source} already staged")
            return artifact

        try:
            self.stage(source, target)
        except OSError as e:
            self.logger.error(f"Staging {source} into {self.spec.runtime_root} failed: {e}")
            raise ArtifactStagingFailure(target, e) from e
        self.logger.info(f"Staged {source} -> {target} ({self.spec.mode})")
        return Artifact(name=artifact.name, path=target, version=artifact.version)

    def stage(self, source: str, target: str) -> None:
        os.makedirs(self.spec.runtime_root, exist_ok=True)
        # a previously staged artifact is only replaced once the new one is complete
        staging = f"{target}.staging"
        if os.path.lexists(staging):
            os.remove(staging)
        try:
            match self.spec.mode:
                case "copy":
                    shutil.copy2(source, staging)
                case "link":
                    os.symlink(source, staging)
            os.replace(staging, target)
        except OSError:
            if os.path.lexists(staging):
                os.remove(staging)
            raise

    def validate(self, artifact: Artifact) -> None:
        if not os.path.isfile(artifact.path):
            raise ArtifactMissing(artifact.path)
        size = os.path.getsize(artifact.path)
        if size < self.spec.min_size_bytes:
            raise ArtifactEmpty(artifact.path, size, self.spec.min_size_bytes)
