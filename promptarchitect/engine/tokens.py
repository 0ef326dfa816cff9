"""
Token Estimation - character-based approximation per model family
"""
import math
import logging
from typing import Dict

logger = logging.getLogger(__name__)

# Characters per token, from benchmark averages on English text
TOKEN_RATIOS: Dict[str, float] = {
    "claude": 3.5,
    "gpt": 4.0,
    "gemini": 4.1,
}
DEFAULT_RATIO = 4.0

# Below this length a 10% overhead covers system-template tokens
SHORT_TEXT_CHARS = 100
SHORT_TEXT_OVERHEAD = 1.1


def get_ratio(model: str) -> float:
    """Characters-per-token ratio for a model, DEFAULT_RATIO if unknown."""
    ratio = TOKEN_RATIOS.get((model or "").lower())
    if ratio is None:
        logger.warning(f"Unknown model '{model}' for token estimation, using ratio {DEFAULT_RATIO}")
        return DEFAULT_RATIO
    return ratio


def estimate_tokens(text: str, model: str = "claude") -> int:
    """Estimate token count for text sent to the given model."""
    if not text:
        return 0

    char_count = len(text)
    tokens = math.ceil(char_count / get_ratio(model))

    if char_count < SHORT_TEXT_CHARS:
        tokens = math.ceil(tokens * SHORT_TEXT_OVERHEAD)

    return tokens
