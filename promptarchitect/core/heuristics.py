"""
Quick Score - lightweight 0-10 rating for live feedback while typing

Cheaper and coarser than analyzer.calculate_score(); meant to be re-run
on every keystroke.
"""

import re
from typing import Dict

from .types import round_half_up

SPECIFIC_KEYWORDS = [
    "format", "style", "avoid", "never", "must", "should",
    "json", "markdown", "code", "python", "javascript",
    "audience", "persona", "expert", "detailed", "brief",
]

GOAL_MARKERS = ["write", "create", "explain", "analyze", "solve", "help", "act as"]

STRUCTURE_MARKS = re.compile(r"[\[\]()\->:]")

# (upper bound, color, label, message)
FEEDBACK_BANDS = [
    (3, "#ef4444", "Weak (Vague)", "Add more details about the task and format."),
    (6, "#f59e0b", "Moderate", "Good, but could use more constraints."),
    (8, "#38bdf8", "Strong", "Solid prompt! The optimizer will polish it further."),
    (10, "#10b981", "Pro Architect", "Excellent specificity and structure."),
]


def calculate_quick_score(text: str) -> int:
    """Score 0 for blank text, otherwise 1-10."""
    if not text or not text.strip():
        return 0

    score = 1.0
    lower = text.lower()
    words = len(text.split())

    # Length (up to 3)
    if words > 10:
        score += 1
    if words > 30:
        score += 1
    if words > 60:
        score += 1

    # Specificity (up to 4)
    found = [kw for kw in SPECIFIC_KEYWORDS if kw in lower]
    score += min(len(found) / 2, 4)

    # Structure (up to 2)
    if "\n" in text:
        score += 1
    if STRUCTURE_MARKS.search(text):
        score += 1

    # Clear goal (1)
    if any(marker in lower for marker in GOAL_MARKERS):
        score += 1

    return round_half_up(min(score, 10))


def get_score_feedback(score: int) -> Dict[str, str]:
    for upper, color, label, message in FEEDBACK_BANDS:
        if score <= upper:
            return {"color": color, "label": label, "message": message}
    _, color, label, message = FEEDBACK_BANDS[-1]
    return {"color": color, "label": label, "message": message}
