"""
Follow-up Advisor - clarifying questions for an underspecified prompt

Topic routing is first-match-wins (code, then correspondence, then long-form
writing); generic questions top the list up to three.
"""

from typing import Dict, List, Tuple

from .types import Question


QUESTION_BANK: Dict[str, Question] = {
    "language": Question(
        id="language",
        label="Technical Stack",
        question="Which programming language or framework should be used?",
        placeholder="e.g., Python 3.12, React, Vanilla JS...",
    ),
    "library": Question(
        id="library",
        label="External Tools",
        question="Are there any specific libraries allowed (or forbidden)?",
        placeholder="e.g., Use only standard library, or: use Pandas...",
    ),
    "tone": Question(
        id="tone",
        label="Voice & Tone",
        question="How should the message sound?",
        placeholder="e.g., Professional, friendly, apologetic, urgent...",
    ),
    "recipient": Question(
        id="recipient",
        label="Target Audience",
        question="Who exactly is receiving this?",
        placeholder="e.g., My boss, a customer who is angry, a close friend...",
    ),
    "length": Question(
        id="length",
        label="Desired Length",
        question="What is the word count or structure requirement?",
        placeholder="e.g., Under 300 words, 3 distinct paragraphs...",
    ),
    "style": Question(
        id="style",
        label="Writing Style",
        question="Is there a specific person's style to mimic?",
        placeholder="e.g., Like Hemingway, academic, or high-energy marketing...",
    ),
    "goal": Question(
        id="goal",
        label="Primary Goal",
        question="What is the single most important thing the AI must get right?",
        placeholder="e.g., Accuracy of facts, speed of code, or matching the tone...",
    ),
    "negative": Question(
        id="negative",
        label="Strict Boundary",
        question="What should the AI specifically NOT do?",
        placeholder="e.g., No jargon, no preamble, don't mention competitors...",
    ),
}

# (topic, keywords, question ids) in priority order
TOPIC_ROUTES: List[Tuple[str, List[str], List[str]]] = [
    ("code", ["code", "script", "program", "app"], ["language", "library"]),
    ("correspondence", ["email", "letter", "message"], ["tone", "recipient"]),
    ("writing", ["write", "article", "blog", "summary"], ["length", "style"]),
]

MAX_QUESTIONS = 3


def detect_topic(text: str) -> str:
    """First matching topic, or 'generic'."""
    lower = (text or "").lower()
    for topic, keywords, _ in TOPIC_ROUTES:
        if any(kw in lower for kw in keywords):
            return topic
    return "generic"


def suggest_questions(text: str) -> List[Question]:
    topic = detect_topic(text)
    questions: List[Question] = []

    for route_topic, _, question_ids in TOPIC_ROUTES:
        if route_topic == topic:
            questions.extend(QUESTION_BANK[qid] for qid in question_ids)
            break

    if len(questions) < 2:
        questions.append(QUESTION_BANK["goal"])
    if len(questions) < 3:
        questions.append(QUESTION_BANK["negative"])

    return questions[:MAX_QUESTIONS]
