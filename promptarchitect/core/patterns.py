"""Pattern tables for prompt analysis and rewriting.

Every keyword list, regex and template the analyzer and optimizer rely on
lives here, so a caller can swap the whole table (tests, other locales)
without touching pipeline code.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple


COMPONENT_KEYS: Tuple[str, ...] = (
    "role", "task", "context", "constraints", "examples",
    "format", "thinking", "tone", "variables", "audience",
)


@dataclass
class RoleArchetype:
    role: str
    keywords: List[str]


@dataclass
class InjectionRule:
    """When a component is marked present but its indicator is missing."""
    component: str
    indicator: str  # regex searched case-insensitively in the rewritten text
    placement: str  # "header" or "footer"
    technique: str


@dataclass
class PatternConfig:
    """Full pattern table for detection, scoring and rewriting."""

    # Component detection (regex per key, canonical order)
    component_patterns: Dict[str, str]

    # Altitude markers
    low_altitude_markers: List[str]
    high_altitude_markers: List[str]
    short_prompt_length: int

    # Scoring
    component_weight: float
    structure_bonus: int
    min_lines: int
    word_thresholds: Tuple[int, int]
    delimiter_pattern: str

    # Rewriting
    filler_phrases: List[str]
    role_archetypes: List[RoleArchetype]
    fallback_role: str
    role_template: str
    injection_rules: List[InjectionRule]
    templates: Dict[str, str]
    format_templates: Dict[str, str]
    task_label: str
    elevated_task_label: str


DEFAULT_CONFIG = PatternConfig(
    component_patterns={
        "role": r"act as|you are|senior|expert|role|persona|identity",
        "task": r"task|goal|objective|your mission|write|create|analyze|build|develop",
        "context": r"context|background|situation|the user is|given that|scenario",
        "constraints": r"constraint|rule|never|always|must|should|don't|skip|avoid",
        "examples": r"example|few-shot|sample|instance|here's how|reference",
        "format": r"format|output|markdown|json|xml|structure|style guide",
        "thinking": r"think step-by-step|reasoning|thinking|chain of thought|<thinking>",
        "tone": r"tone|voice|style|personality|audience|friendly|professional",
        "variables": r"\{\{.*?\}\}|\[.*?\]|<.*?>",
        "audience": r"target audience|users|readers|customers|demographic",
    },

    low_altitude_markers=["step by step", "detailed", "every", "exactly", "how to"],
    high_altitude_markers=["be helpful", "do your best", "summarize", "write"],
    short_prompt_length=50,

    component_weight=60.0,
    structure_bonus=10,
    min_lines=3,
    word_thresholds=(50, 150),
    delimiter_pattern=r"[\[\]<>{}_]",

    # Order matters: each phrase is stripped from the output of the previous one.
    filler_phrases=[
        "please ",
        "i want you to ",
        "can you ",
        "i need help with ",
        "write a ",
        "help me ",
        "basically ",
        "just ",
    ],

    role_archetypes=[
        RoleArchetype(
            "Senior Software Engineer",
            ["code", "app", "bug", "react", "function", "develop", "script", "python", "javascript"],
        ),
        RoleArchetype(
            "Conversion-Focused Marketing Strategist",
            ["marketing", "landing page", "sales", "ad", "conversion", "campaign", "brand"],
        ),
        RoleArchetype(
            "Senior Copywriter & Communications Expert",
            ["write", "email", "blog", "article", "prose", "letter", "tone"],
        ),
        RoleArchetype(
            "Data Science & Analysis Specialist",
            ["data", "analyze", "science", "spreadsheet", "graph", "json", "csv", "sql"],
        ),
        RoleArchetype(
            "Strategic Legal & Compliance Consultant",
            ["legal", "contract", "terms", "privacy", "agreement", "clause"],
        ),
        RoleArchetype(
            "Full-Stack UI/UX Designer",
            ["pretty", "beautiful", "ui", "ux", "design", "layout", "graphic", "visual"],
        ),
    ],
    fallback_role="Senior Subject Matter Expert",
    role_template="Act as a {role} with deep knowledge in this domain.",

    injection_rules=[
        InjectionRule("role", r"act as|you are|expert", "header", "Contextual Role Inference"),
        InjectionRule("context", r"context", "header", "Context Architecture"),
        InjectionRule("thinking", r"think", "footer", "Chain of Thought Injection"),
        InjectionRule("constraints", r"constraint", "footer", "Constraint Structuring"),
        InjectionRule("format", r"format", "footer", "Format Injection"),
    ],
    templates={
        "context": "CONTEXT: Provide background information and the specific situation requiring this task.",
        "constraints": "CONSTRAINTS: \n- Follow best practices.\n- Avoid generic or filler content.\n- [ADD SPECIFIC RULES HERE]",
        "thinking": "Provide a detailed step-by-step reasoning process in a <thinking> section before the final response.",
    },
    format_templates={
        "markdown": "OUTPUT FORMAT:\nPresent the final response in [Markdown/JSON/Bullet Points].",
        "json": "OUTPUT FORMAT:\nProvide the final output in valid RFC-8259 JSON format. Do not include markdown code blocks or preambles.",
        "bullets": "OUTPUT FORMAT:\nPresent the information as a clean, hierarchical list of bullet points.",
        "prose": "OUTPUT FORMAT:\nWrite in professional, flowing prose suitable for formal correspondence.",
    },
    task_label="TASK:",
    elevated_task_label="ARCHITECTED MISSION:",
)
