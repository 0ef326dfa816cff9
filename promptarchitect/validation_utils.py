#!/usr/bin/env python3
"""
Validation and degradation helpers for Prompt Architect

Enum-like inputs (model, level, style) never raise: unknown values fall back
to a documented default and the fallback is logged. Only boundary checks on
the prompt itself and programming errors raise ValidationError.
"""

import logging
from typing import Any, Optional, Tuple

from . import config

logger = logging.getLogger(__name__)

LEVELS: Tuple[str, ...] = ("low", "medium", "high")
STYLES: Tuple[str, ...] = ("markdown", "json", "bullets", "prose")
MODELS: Tuple[str, ...] = ("claude", "gpt", "gemini")


class ValidationError(Exception):
    """Invalid input at an API or CLI boundary"""
    pass


def _coerce(value: Any, allowed: Tuple[str, ...], default: str, kind: str) -> str:
    normalized = str(value).strip().lower() if value is not None else ""
    if normalized in allowed:
        return normalized
    if value is not None:
        logger.warning(f"Unknown {kind} '{value}', falling back to '{default}'")
    return default


def coerce_level(level: Optional[str]) -> str:
    return _coerce(level, LEVELS, "medium", "optimization level")


def coerce_style(style: Optional[str]) -> str:
    return _coerce(style, STYLES, "markdown", "output style")


def coerce_model(model: Optional[str]) -> Optional[str]:
    """Lowercased model id if known, None otherwise (caller picks the fallback)."""
    normalized = str(model).strip().lower() if model is not None else ""
    if normalized in MODELS:
        return normalized
    logger.warning(f"Unknown model '{model}', using default behavior")
    return None


class Validator:
    """Input validation for prompts arriving from outside the core"""

    def __init__(self, min_length: Optional[int] = None):
        self.min_length = config.MIN_PROMPT_LENGTH if min_length is None else min_length

    def validate_prompt(self, prompt: Any) -> str:
        """Return the prompt unchanged if it is usable, raise otherwise."""
        if not isinstance(prompt, str):
            raise ValidationError("Prompt must be a string")
        if not prompt.strip():
            raise ValidationError("Empty prompt")
        if len(prompt.strip()) < self.min_length:
            raise ValidationError(
                f"Prompt too short ({len(prompt.strip())} chars, minimum {self.min_length})"
            )
        return prompt

    def validate_component_key(self, key: str) -> str:
        from .core.patterns import COMPONENT_KEYS
        if key not in COMPONENT_KEYS:
            raise ValidationError(
                f"Unknown component '{key}'. Expected one of: {', '.join(COMPONENT_KEYS)}"
            )
        return key
