LOG_TAIL_LINES = 50


def tail(log: str, lines: int = LOG_TAIL_LINES) -> str:
    return "\n".join(log.splitlines()[-lines:])


class PipelineError(Exception):
    exit_code: int = 1


class InvalidStateTransition(Exception):
    pass


class BuildError(PipelineError):
    exit_code = 1


class BuildFailure(BuildError):
    def __init__(self, exit_code: int | None, log: str):
        self.tool_exit_code: int | None = exit_code
        self.log: str = tail(log)
        super().__init__(f"Build failed with code {exit_code}:\n{self.log}")


class BuildTimeout(BuildError):
    def __init__(self, timeout: float, log: str):
        self.timeout: float = timeout
        self.log: str = tail(log)
        super().__init__(f"Build did not finish within {timeout}s:\n{self.log}")


class PackagingError(PipelineError):
    exit_code = 2


class ArtifactMissing(PackagingError):
    def __init__(self, path: str):
        self.path: str = path
        super().__init__(f"Artifact {path} does not exist")


class ArtifactEmpty(PackagingError):
    def __init__(self, path: str, size: int, min_size: int):
        self.path: str = path
        self.size: int = size
        super().__init__(f"Artifact {path} is empty ({size} bytes, expected at least {min_size})")


class ArtifactStagingFailure(PackagingError):
    def __init__(self, path: str, cause: Exception):
        self.path: str = path
        self.cause: Exception = cause
        super().__init__(f"Could not stage artifact into {path}: {cause}")


class LaunchError(PipelineError):
    exit_code = 3


class PortUnavailable(LaunchError):
    def __init__(self, host: str, port: int):
        self.host: str = host
        self.port: int = port
        super().__init__(f"Port {host}:{port} is already in use")


class ProcessStartFailure(LaunchError):
    def __init__(self, cause: Exception | str):
        self.cause: Exception | str = cause
        super().__init__(f"Failed to start process: {cause}")
