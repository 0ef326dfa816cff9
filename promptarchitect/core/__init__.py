"""
Prompt Architect - CORE Module
Detection, scoring, follow-up questions and rewriting
"""

from .patterns import COMPONENT_KEYS, DEFAULT_CONFIG, PatternConfig
from .types import (
    AnalysisReport,
    ComponentStatus,
    OptimizationResult,
    Question,
    TokenMetrics,
)
from .detector import detect_components
from .analyzer import calculate_score, get_altitude, full_report, count_words
from .advisor import suggest_questions, detect_topic
from .heuristics import calculate_quick_score, get_score_feedback
from .optimizer import PromptOptimizer, optimize_prompt, optimize_for_model, detect_expert_role
from .composer import compose_prompt, ComposeOptions

__all__ = [
    # Patterns
    "COMPONENT_KEYS", "DEFAULT_CONFIG", "PatternConfig",
    # Types
    "AnalysisReport", "ComponentStatus", "OptimizationResult", "Question", "TokenMetrics",
    # Analysis
    "detect_components", "calculate_score", "get_altitude", "full_report", "count_words",
    # Follow-up
    "suggest_questions", "detect_topic",
    "calculate_quick_score", "get_score_feedback",
    # Rewriting
    "PromptOptimizer", "optimize_prompt", "optimize_for_model", "detect_expert_role",
    "compose_prompt", "ComposeOptions",
]
