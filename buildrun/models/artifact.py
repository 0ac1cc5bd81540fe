import re
from pathlib import Path

from pydantic.dataclasses import dataclass

# app-1.2.0.jar, app-1.2.0-SNAPSHOT.jar
VERSIONED_NAME = re.compile(r"^(?P<name>.+?)-(?P<version>\d+(?:\.\d+)*(?:[-.][A-Za-z0-9]+)*)$")


@dataclass(frozen=True)
class Artifact:
    name: str
    path: str
    version: str | None = None

    @classmethod
    def from_path(cls, path: str) -> "Artifact":
        stem = Path(path).stem
        match = VERSIONED_NAME.match(stem)
        if match:
            return cls(name=match.group("name"), path=path, version=match.group("version"))
        return cls(name=stem, path=path)
