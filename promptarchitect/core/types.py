"""Type definitions for prompt analysis and optimization."""

from __future__ import annotations
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Literal, Mapping, Tuple, get_args

from .patterns import COMPONENT_KEYS
from ..validation_utils import ValidationError, Validator

Altitude = Literal["too-low", "just-right", "too-high"]
Level = Literal["low", "medium", "high"]
Style = Literal["markdown", "json", "bullets", "prose"]

ALTITUDES: Tuple[str, ...] = get_args(Altitude)


def round_half_up(value: float) -> int:
    """Round .5 towards +infinity, matching how scores were always rounded."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class ComponentStatus:
    """Detection result for a single component."""
    present: bool
    matches: List[str] = field(default_factory=list)


ComponentResult = Dict[str, ComponentStatus]


@dataclass(frozen=True)
class AnalysisReport:
    """Result of analyzing one prompt.

    Reports are values: overriding a component produces a new report and
    leaves this one untouched, so a report can be reused across optimize()
    calls without aliasing surprises.
    """
    score: int  # [0, 100]
    altitude: Altitude
    components: ComponentResult
    word_count: int

    def with_component_override(self, key: str, present: bool) -> "AnalysisReport":
        Validator().validate_component_key(key)
        components = dict(self.components)
        previous = components.get(key)
        matches = list(previous.matches) if previous else []
        components[key] = ComponentStatus(present=bool(present), matches=matches)
        return replace(self, components=components)

    def with_overrides(self, overrides: Mapping[str, bool]) -> "AnalysisReport":
        report = self
        for key, present in overrides.items():
            report = report.with_component_override(key, present)
        return report

    def present_components(self) -> List[str]:
        return [key for key, status in self.components.items() if status.present]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "altitude": self.altitude,
            "components": {
                key: {"present": status.present, "matches": list(status.matches)}
                for key, status in self.components.items()
            },
            "wordCount": self.word_count,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalysisReport":
        """Rebuild a report sent back by a client (e.g. after checklist edits).

        Malformed input raises ValidationError so the boundary can reject it.
        """
        try:
            raw_components = data.get("components") or {}
            components: ComponentResult = {}
            for key in COMPONENT_KEYS:
                raw = raw_components.get(key) or {}
                components[key] = ComponentStatus(
                    present=bool(raw.get("present", False)),
                    matches=[str(m) for m in raw.get("matches") or []],
                )
            word_count = data.get("word_count", data.get("wordCount", 0))
            score = int(data.get("score", 0))
            word_count = int(word_count or 0)
        except (AttributeError, TypeError, ValueError) as e:
            raise ValidationError(f"Malformed analysis report: {e}") from e

        altitude = data.get("altitude", "just-right")
        if altitude not in ALTITUDES:
            raise ValidationError(
                f"Unknown altitude '{altitude}'. Expected one of: {', '.join(ALTITUDES)}"
            )
        return cls(
            score=score,
            altitude=altitude,
            components=components,
            word_count=word_count,
        )


@dataclass(frozen=True)
class TokenMetrics:
    original_tokens: int
    optimized_tokens: int
    efficiency: int  # percent, negative when the rewrite grew the prompt


@dataclass(frozen=True)
class OptimizationResult:
    optimized_text: str
    techniques: List[str]
    metrics: TokenMetrics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "optimized": self.optimized_text,
            "techniques": list(self.techniques),
            "metrics": {
                "originalTokens": self.metrics.original_tokens,
                "optimizedTokens": self.metrics.optimized_tokens,
                "efficiency": self.metrics.efficiency,
            },
        }


@dataclass(frozen=True)
class Question:
    """Clarifying follow-up question for a vague prompt."""
    id: str
    label: str
    question: str
    placeholder: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "label": self.label,
            "question": self.question,
            "placeholder": self.placeholder,
        }
