"""
Prompt Composer - compile follow-up answers into a sectioned prompt

Takes the raw prompt plus the answers keyed by question id (see advisor.py)
and produces a bracket-sectioned prompt:

    [ROLE] [TASK] [CONTEXT] [HARD CONSTRAINTS] [NEVER] [THINKING RULE] [OUTPUT]

[CONTEXT] and [NEVER] only appear when there is something to put in them.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from ..validation_utils import coerce_model

logger = logging.getLogger(__name__)

OUTPUT_FORMATS: Dict[str, str] = {
    "standard": "Markdown",
    "article": "well-structured paragraphs with headings",
    "data": "raw JSON format",
    "bullets": "a clear bulleted list",
}

THINKING_RULES: Dict[str, str] = {
    "claude": "Before providing the final output, analyze the logic in a <thinking> block, identifying potential edge cases.",
    "gpt": "Think step-by-step. First draft the core logic, then review it for flaws, then provide the final optimized output.",
    "gemini": "Strict Grounding: Use ONLY the context provided or implied by the core task. If details are missing, state them rather than guessing.",
}

DEFAULT_ROLE = "[ROLE]: You are a Senior Expert Architect.\n"


@dataclass
class ComposeOptions:
    no_yapping: bool = False
    keep_short: bool = False
    output_format: str = "standard"

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "ComposeOptions":
        data = data or {}
        return cls(
            no_yapping=bool(data.get("no_yapping", data.get("noYapping", False))),
            keep_short=bool(data.get("keep_short", data.get("keepShort", False))),
            output_format=str(data.get("output_format", data.get("customFormat", "standard"))),
        )


def _role_line(answers: Mapping[str, str]) -> str:
    if answers.get("tone"):
        return f"[ROLE]: You are an expert at communication with a {answers['tone']} tone.\n"
    if answers.get("language"):
        return f"[ROLE]: You are a Senior {answers['language']} Engineer with 15+ years of experience.\n"
    return DEFAULT_ROLE


def compose_prompt(initial: str, answers: Optional[Mapping[str, str]] = None,
                   model: str = "claude", options: Optional[ComposeOptions] = None) -> str:
    answers = {k: v for k, v in (answers or {}).items() if v}
    options = options or ComposeOptions()

    output_format = OUTPUT_FORMATS.get(options.output_format)
    if output_format is None:
        logger.warning(f"Unknown output format '{options.output_format}', using standard")
        output_format = OUTPUT_FORMATS["standard"]

    final = _role_line(answers)
    final += f"[TASK]: {initial}\n\n"

    context = []
    if answers.get("recipient"):
        context.append(f"Target: {answers['recipient']}")
    if answers.get("goal"):
        context.append(f"Main Priority: {answers['goal']}")
    if answers.get("style"):
        context.append(f"Style Guide: {answers['style']}")
    if context:
        final += "[CONTEXT]:\n" + "\n".join(f"- {c}" for c in context) + "\n\n"

    hard = []
    if answers.get("length"):
        hard.append(answers["length"])
    if options.keep_short:
        hard.append("Be concise and avoid filler words.")
    hard.append(f"Output MUST be in {output_format}.")
    final += "[HARD CONSTRAINTS]:\n" + "\n".join(f"{i}. {h}" for i, h in enumerate(hard, 1)) + "\n"

    negative = []
    if answers.get("negative"):
        negative.append(answers["negative"])
    if options.no_yapping:
        negative.append("No preamble, no conversational filler, go straight to the answer.")
    if negative:
        final += "[NEVER]:\n" + "\n".join(f"- {n}" for n in negative) + "\n"

    final += "\n[THINKING RULE]:\n"
    model_key = coerce_model(model)
    if model_key:
        final += THINKING_RULES[model_key]

    final += f"\n\n[OUTPUT]: Provide the result in {output_format}. No preamble."

    return final
