"""
Prompt Architect v1.0
Prompt analysis, scoring and model-aware rewriting
"""

from pathlib import Path as _Path
_version_file = _Path(__file__).parent.parent / "VERSION"
__version__ = _version_file.read_text().strip() if _version_file.exists() else "0.0.0"

from .main import main

__all__ = ["main", "__version__"]
