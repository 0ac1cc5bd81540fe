import subprocess


class ProcessHandle:
    """Supervision handle for a launched service process.

    The pipeline only keeps the handle; the process itself runs in its own
    session and outlives the pipeline run.
    """

    def __init__(self, process: subprocess.Popen, port: int, command: list[str]):
        self.process: subprocess.Popen = process
        self.port: int = port
        self.command: list[str] = command

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def returncode(self) -> int | None:
        return self.process.poll()

    def is_running(self) -> bool:
        return self.process.poll() is None

    def wait(self, timeout: float | None = None) -> int:
        return self.process.wait(timeout=timeout)

    def terminate(self, timeout: float = 10) -> int:
        if self.is_running():
            self.process.terminate()
            try:
                return self.process.wait(timeout=timeout)
            except subprocess.TimeoutExpired:
                self.process.kill()
        return self.process.wait()

    def __repr__(self) -> str:
        return f"ProcessHandle(pid={self.pid}, port={self.port})"
