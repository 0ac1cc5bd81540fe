import logging
import os
import time

from buildrun.clients.health_check_client import HealthCheckClient
from buildrun.clients.process_client import ProcessClient
from buildrun.errors import PortUnavailable, ProcessStartFailure
from buildrun.models import ProcessHandle, RuntimeConfig
from buildrun.utils.logging import setup_logger

POLL_INTERVAL_SECONDS = 0.5


class ProcessLauncherService:
    def __init__(self, processes: ProcessClient | None = None, health: HealthCheckClient | None = None):
        self.processes: ProcessClient = processes or ProcessClient()
        self.health: HealthCheckClient = health or HealthCheckClient()
        self.logger: logging.Logger = setup_logger("ProcessLauncherService")

    def launch(self, config: RuntimeConfig) -> ProcessHandle:
        if config.archive_path is None:
            raise ValueError("Cannot launch a runtime config without an artifact")

        # fail fast, no retry
        if not self.processes.port_available(config.host, config.port):
            raise PortUnavailable(config.host, config.port)

        env = {**os.environ, **config.environment, "PORT": str(config.port)}
        try:
            command = config.render_command()
            handle = self.processes.spawn(command, config.port, env, cwd=config.working_dir)
        except (OSError, ValueError) as e:
            raise ProcessStartFailure(e) from e

        if config.health_check_path:
            self.wait_until_healthy(handle, config)
        self.logger.info(f"Service running with pid {handle.pid} on port {config.port}")
        return handle

    def wait_until_healthy(self, handle: ProcessHandle, config: RuntimeConfig) -> None:
        deadline = time.monotonic() + config.startup_timeout_seconds
        while time.monotonic() < deadline:
            if not handle.is_running():
                raise ProcessStartFailure(f"process exited with code {handle.returncode} before becoming healthy")
            if self.health.is_healthy(config.port, config.health_check_path):
                return
            time.sleep(POLL_INTERVAL_SECONDS)
        handle.terminate()
        raise ProcessStartFailure(
            f"{config.health_check_path} on port {config.port} not healthy after {config.startup_timeout_seconds}s"
        )
