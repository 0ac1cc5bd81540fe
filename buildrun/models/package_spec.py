from typing import Literal

from pydantic import Field
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class PackageSpec:
    runtime_root: str
    mode: Literal["copy", "link"] = "copy"
    min_size_bytes: int = Field(default=1024, ge=1)
