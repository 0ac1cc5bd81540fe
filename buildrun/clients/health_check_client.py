import logging

import requests

logger = logging.getLogger(__name__)


class HealthCheckClient:
    def __init__(self, base_url: str = "http://127.0.0.1"):
        self.base_url: str = base_url

    def is_healthy(self, port: int, path: str) -> bool:
        url = f"{self.base_url}:{port}/{path.lstrip('/')}"
        try:
            response = requests.get(url=url, timeout=2)
            return response.status_code < 400
        except requests.RequestException as e:
            logger.debug(f"Health check {url} not ready: {e}")
            return False
