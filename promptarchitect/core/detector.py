"""Component detection - which of the ten prompt building blocks are present.

Each component has one regex in the pattern table; a component is present
when the regex matches anywhere in the text. A single word may satisfy
several components (e.g. "style" is both tone and format vocabulary) and
that overlap is kept as-is.
"""

from __future__ import annotations
import re
from functools import lru_cache
from typing import Optional, Pattern

from .patterns import COMPONENT_KEYS, DEFAULT_CONFIG, PatternConfig
from .types import ComponentResult, ComponentStatus


@lru_cache(maxsize=256)
def _compile(pattern: str) -> Pattern:
    return re.compile(pattern, re.IGNORECASE)


def detect_component(text: str, key: str, config: Optional[PatternConfig] = None) -> ComponentStatus:
    cfg = config or DEFAULT_CONFIG
    pattern = cfg.component_patterns.get(key)
    if not pattern or not text:
        return ComponentStatus(present=False, matches=[])
    matches = [m.group(0) for m in _compile(pattern).finditer(text)]
    return ComponentStatus(present=bool(matches), matches=matches)


def detect_components(text: str, config: Optional[PatternConfig] = None) -> ComponentResult:
    """Detect every component, keyed in canonical order."""
    cfg = config or DEFAULT_CONFIG
    keys = [k for k in COMPONENT_KEYS if k in cfg.component_patterns]
    keys += [k for k in cfg.component_patterns if k not in COMPONENT_KEYS]
    return {key: detect_component(text, key, cfg) for key in keys}
