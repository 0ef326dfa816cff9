"""
Prompt Architect - CORE: Rewrite Engine

PIPELINE (fixed order, each step feeds the next):
1. Redundancy removal        always
2. Structural injection      medium / high
3. Altitude adjustment       medium / high
4. Model polish (adapter)    always

Injection only fires for components the report marks present whose
indicator is missing from the text, so a reviewer can switch a component
on (or off) in the report and re-run optimize() to get a different build.
"""

import logging
import re
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .patterns import DEFAULT_CONFIG, PatternConfig
from .types import AnalysisReport, Level, OptimizationResult, Style, TokenMetrics, round_half_up
from ..engine.tokens import estimate_tokens
from ..validation_utils import coerce_level, coerce_style

if TYPE_CHECKING:
    from ..connectors.adapters import ModelAdapter

logger = logging.getLogger(__name__)


def detect_expert_role(text: str, config: Optional[PatternConfig] = None) -> str:
    """Infer a professional role from keyword hits; ties keep the earlier role."""
    cfg = config or DEFAULT_CONFIG
    lower = text.lower()

    best_match = cfg.fallback_role
    max_score = 0
    for archetype in cfg.role_archetypes:
        score = sum(1 for kw in archetype.keywords if kw in lower)
        if score > max_score:
            max_score = score
            best_match = archetype.role

    return best_match


def compute_efficiency(original_tokens: int, optimized_tokens: int) -> int:
    if original_tokens == 0:
        return 0
    return round_half_up((original_tokens - optimized_tokens) / original_tokens * 100)


class PromptOptimizer:
    """Rewrites one prompt for one target model.

    A fresh technique log is started on every optimize() call, so the same
    optimizer can be re-run after the report has been overridden.
    """

    def __init__(self, prompt: str, report: AnalysisReport, adapter: "ModelAdapter",
                 config: Optional[PatternConfig] = None):
        self.original = prompt or ""
        self.report = report
        self.adapter = adapter
        self.config = config or DEFAULT_CONFIG
        self.applied_techniques: List[str] = []

    def optimize(self, level: Level = "medium", style: Style = "markdown") -> OptimizationResult:
        level = coerce_level(level)
        style = coerce_style(style)
        self.applied_techniques = []

        result = self.remove_redundancy(self.original)

        if level != "low":
            result = self.inject_missing_structure(result, style)
            result = self.adjust_altitude(result)

        result = self.adapter.optimize(result, self.report)

        model = self.adapter.model
        original_tokens = estimate_tokens(self.original, model)
        optimized_tokens = estimate_tokens(result, model)

        logger.debug(
            f"Optimized for {model or 'default'} at {level} "
            f"(present: {', '.join(self.report.present_components()) or 'none'}): {self.applied_techniques}"
        )

        return OptimizationResult(
            optimized_text=result,
            techniques=list(self.applied_techniques),
            metrics=TokenMetrics(
                original_tokens=original_tokens,
                optimized_tokens=optimized_tokens,
                efficiency=compute_efficiency(original_tokens, optimized_tokens),
            ),
        )

    def remove_redundancy(self, text: str) -> str:
        result = text
        found = False
        for phrase in self.config.filler_phrases:
            pattern = re.compile(re.escape(phrase), re.IGNORECASE)
            if pattern.search(result):
                result = pattern.sub("", result)
                found = True

        if found:
            self.applied_techniques.append("Signal Amplification")

        return result[:1].upper() + result[1:]

    def inject_missing_structure(self, text: str, style: str = "markdown") -> str:
        header_blocks: List[str] = []
        footer_blocks: List[str] = []
        components = self.report.components

        for rule in self.config.injection_rules:
            status = components.get(rule.component)
            if not status or not status.present:
                continue
            if re.search(rule.indicator, text, re.IGNORECASE):
                continue

            block, technique = self._build_block(rule.component, rule.technique, text, style)
            if rule.placement == "header":
                header_blocks.append(block)
            else:
                footer_blocks.append(block)
            self.applied_techniques.append(technique)

        final = ""
        if header_blocks:
            final += "\n\n".join(header_blocks) + "\n\n---\n\n"
        final += f"{self.config.task_label} {text}"
        if footer_blocks:
            final += "\n\n---\n\n" + "\n\n".join(footer_blocks)

        return final

    def _build_block(self, component: str, technique: str, text: str, style: str):
        if component == "role":
            role = detect_expert_role(text, self.config)
            return self.config.role_template.format(role=role), technique
        if component == "format":
            formats = self.config.format_templates
            template = formats.get(style) or formats["markdown"]
            return template, f"{technique} ({style})"
        return self.config.templates[component], technique

    def adjust_altitude(self, text: str) -> str:
        if self.report.altitude != "too-high":
            return text

        self.applied_techniques.append("Altitude Elevation")
        label = self.config.task_label
        elevated = self.config.elevated_task_label
        if label in text:
            return text.replace(label, elevated, 1)
        return f"{elevated} {text}"


def optimize_prompt(prompt: str, report: AnalysisReport, adapter: "ModelAdapter",
                    level: Level = "medium", style: Style = "markdown",
                    config: Optional[PatternConfig] = None) -> OptimizationResult:
    """One-shot helper around PromptOptimizer."""
    return PromptOptimizer(prompt, report, adapter, config).optimize(level, style)


def optimize_for_model(prompt: str, model: Optional[str] = None, level: Optional[str] = None,
                       style: Optional[str] = None, report: Optional[AnalysisReport] = None,
                       overrides: Optional[Dict[str, bool]] = None) -> Dict[str, Any]:
    """
    Analyze (unless a report is given), apply overrides, rewrite.

    Returns the payload shared by the HTTP API and the CLI:
        {"original", "model", "analysis", "result"}
    """
    from .. import config
    from .analyzer import full_report
    from ..connectors.adapters import get_adapter

    if report is None:
        report = full_report(prompt)
    if overrides:
        report = report.with_overrides(overrides)

    adapter = get_adapter(model or config.DEFAULT_MODEL)
    result = PromptOptimizer(prompt, report, adapter).optimize(
        level or config.DEFAULT_LEVEL,
        style or config.DEFAULT_STYLE,
    )
    return {
        "original": prompt,
        "model": adapter.model or "default",
        "analysis": report.to_dict(),
        "result": result.to_dict(),
    }
