"""
Prompt Architect - Runtime configuration

Everything here is read once from the environment at import time.
"""

import os
from pathlib import Path

SERVICE_DIR = Path.home() / ".promptarchitect"

HOST = os.environ.get("PROMPTARCHITECT_HOST", "127.0.0.1")
PORT = int(os.environ.get("PROMPTARCHITECT_PORT", "9997"))
SERVICE_URL = os.environ.get("PROMPTARCHITECT_SERVICE_URL", f"http://{HOST}:{PORT}")

DEFAULT_MODEL = os.environ.get("PROMPTARCHITECT_DEFAULT_MODEL", "claude")
DEFAULT_LEVEL = os.environ.get("PROMPTARCHITECT_DEFAULT_LEVEL", "medium")
DEFAULT_STYLE = os.environ.get("PROMPTARCHITECT_DEFAULT_STYLE", "markdown")

# Boundary gate for the HTTP service and CLI; the core never rejects input.
MIN_PROMPT_LENGTH = int(os.environ.get("PROMPTARCHITECT_MIN_PROMPT_LENGTH", "5"))

LOG_LEVEL = os.environ.get("PROMPTARCHITECT_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("PROMPTARCHITECT_LOG_FILE") or None


def _read_version() -> str:
    """Read version from VERSION file."""
    version_paths = [
        Path(__file__).parent.parent / "VERSION",
        Path.cwd() / "VERSION",
        SERVICE_DIR / "VERSION",
    ]
    for vp in version_paths:
        if vp.exists():
            return vp.read_text().strip()
    return "0.0.0"


VERSION = _read_version()
