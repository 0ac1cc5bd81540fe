import logging
import socket
import subprocess

from buildrun.models.process_handle import ProcessHandle

logger = logging.getLogger(__name__)


class ProcessClient:
    def port_available(self, host: str, port: int) -> bool:
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        with socket.socket(family, socket.SOCK_STREAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            try:
                sock.bind((host, port))
                return True
            except OSError as e:
                logger.warning(f"Cannot bind {host}:{port}: {e}")
                return False

    def spawn(self, command: list[str], port: int, env: dict[str, str], cwd: str | None = None) -> ProcessHandle:
        process = subprocess.Popen(
            command,
            cwd=cwd,
            env=env,
            stdin=subprocess.DEVNULL,
            start_new_session=True,
        )
        logger.info(f"Started pid {process.pid}: {' '.join(command)}")
        return ProcessHandle(process=process, port=port, command=command)
