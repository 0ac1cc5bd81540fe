import re
from dataclasses import replace
from typing import Annotated

from pydantic import Field
from pydantic.dataclasses import dataclass

from .artifact import Artifact

# only these placeholders are substituted; any other braces are passed through
PLACEHOLDER = re.compile(r"\{(artifact|port|host)\}")


@dataclass(frozen=True)
class RuntimeConfig:
    command: Annotated[list[str], Field(min_length=1)]
    port: int = Field(default=8080, ge=1, le=65535)
    host: str = "0.0.0.0"
    environment: dict[str, str] = Field(default_factory=dict)
    working_dir: str | None = None
    archive_path: str | None = None
    health_check_path: str | None = None
    startup_timeout_seconds: float = Field(default=30, gt=0)

    def with_artifact(self, artifact: Artifact) -> "RuntimeConfig":
        return replace(self, archive_path=artifact.path)

    def with_port(self, port: int) -> "RuntimeConfig":
        return replace(self, port=port)

    def render_command(self) -> list[str]:
        if self.archive_path is None:
            raise ValueError("RuntimeConfig does not reference an artifact yet")
        values = {"artifact": self.archive_path, "port": str(self.port), "host": self.host}
        return [PLACEHOLDER.sub(lambda m: values[m.group(1)], part) for part in self.command]
