"""
Prompt Architect - ENGINE Module
Token estimation
"""

from .tokens import (
    TOKEN_RATIOS,
    DEFAULT_RATIO,
    get_ratio,
    estimate_tokens,
)

__all__ = ["TOKEN_RATIOS", "DEFAULT_RATIO", "get_ratio", "estimate_tokens"]
