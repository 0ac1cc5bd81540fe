import contextlib
import logging
import os
import signal
import subprocess
import time
from typing import Protocol

from buildrun.errors import BuildFailure, BuildTimeout
from buildrun.models import BuildSpec

logger = logging.getLogger(__name__)


class BuildTool(Protocol):
    def build(self, spec: BuildSpec) -> str:
        """Run the build in spec.source_path and return the combined output."""
        ...


class CommandClient:
    def commands(self, spec: BuildSpec) -> list[list[str]]:
        if not spec.build_command:
            raise ValueError("The command build tool requires build_command")
        return [list(spec.build_command)]

    def build(self, spec: BuildSpec) -> str:
        env = {**os.environ, **spec.environment}
        deadline = None if spec.timeout_seconds is None else time.monotonic() + spec.timeout_seconds
        output: list[str] = []
        for cmd in self.commands(spec):
            remaining = None if deadline is None else max(deadline - time.monotonic(), 0.001)
            logger.info(f"Running {' '.join(cmd)} in {spec.source_path}")
            try:
                process = subprocess.Popen(
                    cmd,
                    cwd=spec.source_path,
                    env=env,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                    start_new_session=True,
                )
            except OSError as e:
                output.append(f"{' '.join(cmd)}: {e}")
                logger.error(f"Could not execute {cmd[0]}: {e}")
                raise BuildFailure(None, "".join(output)) from e
            try:
                stdout, _ = process.communicate(timeout=remaining)
            except subprocess.TimeoutExpired as e:
                # the whole session, so processes forked by the tool stop writing too
                _kill_session(process)
                stdout, _ = process.communicate()
                output.append(stdout or "")
                logger.error(f"{cmd[0]} timed out after {spec.timeout_seconds}s")
                raise BuildTimeout(spec.timeout_seconds, "".join(output)) from e
            output.append(stdout or "")
            if process.returncode != 0:
                logger.error(f"{cmd[0]} failed with code {process.returncode}")
                raise BuildFailure(process.returncode, "".join(output))
        return "".join(output)


class MavenClient(CommandClient):
    def commands(self, spec: BuildSpec) -> list[list[str]]:
        cmd = list(spec.build_command or ["mvn", "clean", "package"])
        if spec.skip_tests:
            cmd.append("-DskipTests")
        return [cmd]


class NpmClient(CommandClient):
    def commands(self, spec: BuildSpec) -> list[list[str]]:
        if spec.build_command:
            return [list(spec.build_command)]
        return [["npm", "install"], ["npm", "run", "build"]]


BUILD_TOOLS: dict[str, type[CommandClient]] = {
    "command": CommandClient,
    "maven": MavenClient,
    "npm": NpmClient,
}


def get_build_tool(name: str) -> BuildTool:
    try:
        return BUILD_TOOLS[name]()
    except KeyError:
        raise ValueError(f"Unsupported build tool: {name}") from None


def _kill_session(process: subprocess.Popen) -> None:
    with contextlib.suppress(ProcessLookupError):
        os.killpg(process.pid, signal.SIGKILL)
