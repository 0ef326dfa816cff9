"""
Analysis Router - prompt analysis, optimization and follow-up questions
"""
from fastapi import APIRouter
from typing import Dict, Any, Optional
from pydantic import BaseModel

from ... import config
from ...validation_utils import Validator
from ...core.analyzer import full_report
from ...core.advisor import suggest_questions
from ...core.heuristics import calculate_quick_score, get_score_feedback
from ...core.optimizer import optimize_for_model
from ...core.composer import compose_prompt, ComposeOptions
from ...core.types import AnalysisReport

router = APIRouter(prefix="/api", tags=["analysis"])

validator = Validator()


class PromptRequest(BaseModel):
    prompt: str


class OptimizeRequest(BaseModel):
    prompt: str
    model: Optional[str] = None
    level: Optional[str] = None
    style: Optional[str] = None
    overrides: Optional[Dict[str, bool]] = None
    report: Optional[Dict[str, Any]] = None


class ComposeRequest(BaseModel):
    prompt: str
    answers: Optional[Dict[str, str]] = None
    options: Optional[Dict[str, Any]] = None
    model: Optional[str] = None


@router.post("/analyze")
async def analyze_prompt(request: PromptRequest):
    """Score a prompt and report its components and altitude."""
    prompt = validator.validate_prompt(request.prompt)
    return full_report(prompt).to_dict()


@router.post("/optimize")
async def optimize_prompt(request: OptimizeRequest):
    """
    Rewrite a prompt for a target model.

    A client may send back the report it received from /analyze (with
    edited `present` flags) or just a map of `overrides`; otherwise the
    prompt is analyzed fresh.
    """
    prompt = validator.validate_prompt(request.prompt)
    report = AnalysisReport.from_dict(request.report) if request.report else None
    return optimize_for_model(
        prompt,
        model=request.model,
        level=request.level,
        style=request.style,
        report=report,
        overrides=request.overrides,
    )


@router.post("/questions")
async def follow_up_questions(request: PromptRequest):
    """Clarifying questions for the prompt's topic."""
    prompt = validator.validate_prompt(request.prompt)
    return {"questions": [q.to_dict() for q in suggest_questions(prompt)]}


@router.post("/score")
async def quick_score(request: PromptRequest):
    """Live 0-10 score; blank prompts score 0 instead of being rejected."""
    score = calculate_quick_score(request.prompt)
    return {"score": score, "max": 10, **get_score_feedback(score)}


@router.post("/compose")
async def compose(request: ComposeRequest):
    """Build a sectioned prompt from follow-up answers."""
    prompt = validator.validate_prompt(request.prompt)
    composed = compose_prompt(
        prompt,
        answers=request.answers,
        model=request.model or config.DEFAULT_MODEL,
        options=ComposeOptions.from_dict(request.options),
    )
    return {"prompt": composed}
