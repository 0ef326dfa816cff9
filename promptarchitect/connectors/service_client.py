"""
Prompt Architect - CONNECTOR: Service Client
Talks to a running Prompt Architect service over HTTP
"""

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .. import config

logger = logging.getLogger(__name__)


class ServiceUnavailable(Exception):
    """The remote service could not be reached or answered with an error."""
    pass


class ServiceClient:
    """Thin JSON client for the /api endpoints."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 5.0):
        self.base_url = (base_url or config.SERVICE_URL).rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            r = requests.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise ServiceUnavailable(f"Cannot reach {url}: {e}") from e

        if not r.ok:
            try:
                detail = r.json().get("detail", r.text)
            except ValueError:
                detail = r.text
            raise ServiceUnavailable(f"{method} {path} failed ({r.status_code}): {detail}")
        return r.json()

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/api/health")

    def is_online(self) -> bool:
        try:
            return self.health().get("status") == "ok"
        except ServiceUnavailable as e:
            logger.info(f"Service offline: {e}")
            return False

    def analyze(self, prompt: str) -> Dict[str, Any]:
        return self._request("POST", "/api/analyze", {"prompt": prompt})

    def optimize(self, prompt: str, model: str = "claude", level: str = "medium",
                 style: str = "markdown", overrides: Optional[Mapping[str, bool]] = None) -> Dict[str, Any]:
        payload = {"prompt": prompt, "model": model, "level": level, "style": style}
        if overrides:
            payload["overrides"] = dict(overrides)
        return self._request("POST", "/api/optimize", payload)

    def questions(self, prompt: str) -> Dict[str, Any]:
        return self._request("POST", "/api/questions", {"prompt": prompt})
