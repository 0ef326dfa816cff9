"""Prompt analysis - quality score, altitude and component report.

SCORING (0-100):
- Component density: present / total * 60
- Structure bonus, +10 each:
  more than 3 non-blank lines, more than 50 words, more than 150 words,
  any semantic delimiter ([ ] < > { } _)

ALTITUDE:
- shorter than 50 chars -> too-high (vague), regardless of content
- low markers > high markers + 2 -> too-low (over-prescribed)
- otherwise just-right
"""

from __future__ import annotations
import re
from typing import List, Optional

from .detector import detect_components
from .patterns import DEFAULT_CONFIG, PatternConfig
from .types import Altitude, AnalysisReport, ComponentResult, round_half_up


def count_words(text: str) -> int:
    """Whitespace-delimited tokens of the trimmed text."""
    return len(text.split()) if text else 0


def count_lines(text: str) -> int:
    """Non-blank lines."""
    return sum(1 for line in text.split("\n") if line.strip())


def _count_markers(text: str, markers: List[str]) -> int:
    if not markers:
        return 0
    pattern = "|".join(re.escape(m) for m in markers)
    return len(re.findall(pattern, text, re.IGNORECASE))


def calculate_score(
    text: str,
    components: Optional[ComponentResult] = None,
    config: Optional[PatternConfig] = None,
) -> int:
    cfg = config or DEFAULT_CONFIG
    if components is None:
        components = detect_components(text, cfg)

    total = len(components)
    found = sum(1 for status in components.values() if status.present)
    score = (found * cfg.component_weight / total) if total else 0.0

    words = count_words(text)
    low_words, high_words = cfg.word_thresholds

    if count_lines(text) > cfg.min_lines:
        score += cfg.structure_bonus
    if words > low_words:
        score += cfg.structure_bonus
    if words > high_words:
        score += cfg.structure_bonus
    if re.search(cfg.delimiter_pattern, text):
        score += cfg.structure_bonus

    return round_half_up(min(score, 100))


def get_altitude(text: str, config: Optional[PatternConfig] = None) -> Altitude:
    cfg = config or DEFAULT_CONFIG

    # Length wins over marker counting
    if len(text) < cfg.short_prompt_length:
        return "too-high"

    low_count = _count_markers(text, cfg.low_altitude_markers)
    high_count = _count_markers(text, cfg.high_altitude_markers)

    if low_count > high_count + 2:
        return "too-low"
    return "just-right"


def full_report(text: str, config: Optional[PatternConfig] = None) -> AnalysisReport:
    """Run the full analysis package for one prompt."""
    cfg = config or DEFAULT_CONFIG
    text = text or ""
    components = detect_components(text, cfg)
    return AnalysisReport(
        score=calculate_score(text, components, cfg),
        altitude=get_altitude(text, cfg),
        components=components,
        word_count=count_words(text),
    )
