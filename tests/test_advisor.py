"""
Tests for follow-up questions, quick score and the composer.
"""
import pytest


class TestAdvisor:
    """core/advisor.py"""

    def _ids(self, text):
        from promptarchitect.core.advisor import suggest_questions
        return [q.id for q in suggest_questions(text)]

    def test_code_topic(self):
        assert self._ids("Build a python script to parse logs") == ["language", "library", "negative"]

    def test_python_csv_script(self):
        assert self._ids("Write a Python script that parses CSV files") == ["language", "library", "negative"]

    def test_correspondence_topic(self):
        assert self._ids("Draft an email to my landlord about the broken heater") == \
            ["tone", "recipient", "negative"]

    def test_writing_topic(self):
        assert self._ids("Write an article about urban gardening") == ["length", "style", "negative"]

    def test_generic_topic(self):
        assert self._ids("Plan a birthday party for ten kids") == ["goal", "negative"]

    def test_code_wins_over_writing(self):
        from promptarchitect.core.advisor import detect_topic
        assert detect_topic("Write a script that emails me") == "code"

    def test_question_fields(self):
        from promptarchitect.core.advisor import suggest_questions
        first = suggest_questions("Fix my app")[0].to_dict()
        assert first["id"] == "language"
        assert first["label"] == "Technical Stack"
        assert set(first) == {"id", "label", "question", "placeholder"}

    def test_never_more_than_three(self):
        from promptarchitect.core.advisor import suggest_questions, MAX_QUESTIONS
        for text in ["code", "email", "write", "", "anything"]:
            assert len(suggest_questions(text)) <= MAX_QUESTIONS


class TestQuickScore:
    """core/heuristics.py"""

    def test_blank_scores_zero(self):
        from promptarchitect.core.heuristics import calculate_quick_score
        assert calculate_quick_score("") == 0
        assert calculate_quick_score("   ") == 0

    def test_minimum_is_one(self):
        from promptarchitect.core.heuristics import calculate_quick_score
        assert calculate_quick_score("hi") == 1

    def test_half_point_rounds_up(self):
        """1 base + 0.5 keyword (python) + 1 goal (write) = 2.5 -> 3"""
        from promptarchitect.core.heuristics import calculate_quick_score
        assert calculate_quick_score("Write a Python script") == 3

    def test_capped_at_ten(self):
        from promptarchitect.core.heuristics import calculate_quick_score, SPECIFIC_KEYWORDS
        text = "Act as an expert: write (detailed)\n" + " ".join(SPECIFIC_KEYWORDS) + " filler" * 70
        assert calculate_quick_score(text) == 10

    @pytest.mark.parametrize("score,label", [
        (0, "Weak (Vague)"), (3, "Weak (Vague)"), (4, "Moderate"), (6, "Moderate"),
        (7, "Strong"), (8, "Strong"), (9, "Pro Architect"), (10, "Pro Architect"),
    ])
    def test_feedback_bands(self, score, label):
        from promptarchitect.core.heuristics import get_score_feedback
        feedback = get_score_feedback(score)
        assert feedback["label"] == label
        assert set(feedback) == {"color", "label", "message"}


class TestComposer:
    """core/composer.py"""

    def test_code_answers(self):
        from promptarchitect.core.composer import compose_prompt, ComposeOptions, THINKING_RULES
        out = compose_prompt(
            "Build a todo app", {"language": "Python"}, "claude",
            ComposeOptions(keep_short=True, output_format="data"),
        )
        assert out == (
            "[ROLE]: You are a Senior Python Engineer with 15+ years of experience.\n"
            "[TASK]: Build a todo app\n\n"
            "[HARD CONSTRAINTS]:\n"
            "1. Be concise and avoid filler words.\n"
            "2. Output MUST be in raw JSON format.\n"
            "\n[THINKING RULE]:\n"
            + THINKING_RULES["claude"]
            + "\n\n[OUTPUT]: Provide the result in raw JSON format. No preamble."
        )

    def test_tone_takes_precedence_over_language(self):
        from promptarchitect.core.composer import compose_prompt
        out = compose_prompt("Reply to the client", {"tone": "warm", "language": "Go"})
        assert out.startswith("[ROLE]: You are an expert at communication with a warm tone.\n")

    def test_default_role(self):
        from promptarchitect.core.composer import compose_prompt, DEFAULT_ROLE
        assert compose_prompt("Plan a trip").startswith(DEFAULT_ROLE)

    def test_context_and_never_sections(self):
        from promptarchitect.core.composer import compose_prompt, ComposeOptions
        out = compose_prompt(
            "Write a note",
            {"recipient": "my boss", "goal": "clarity", "negative": "no jargon", "length": "Under 100 words"},
            "gpt",
            ComposeOptions(no_yapping=True),
        )
        assert "[CONTEXT]:\n- Target: my boss\n- Main Priority: clarity\n\n" in out
        assert "[HARD CONSTRAINTS]:\n1. Under 100 words\n2. Output MUST be in Markdown.\n" in out
        assert "[NEVER]:\n- no jargon\n- No preamble" in out
        assert "Think step-by-step." in out

    def test_empty_sections_omitted(self):
        from promptarchitect.core.composer import compose_prompt
        out = compose_prompt("Plan a trip", {"recipient": ""})
        assert "[CONTEXT]" not in out
        assert "[NEVER]" not in out

    def test_unknown_model_has_empty_thinking_rule(self):
        from promptarchitect.core.composer import compose_prompt
        out = compose_prompt("Plan a trip", model="llama")
        assert "[THINKING RULE]:\n\n\n[OUTPUT]" in out

    def test_unknown_format_falls_back(self):
        from promptarchitect.core.composer import compose_prompt, ComposeOptions
        out = compose_prompt("Plan a trip", options=ComposeOptions(output_format="haiku"))
        assert out.endswith("Provide the result in Markdown. No preamble.")

    def test_options_from_camel_case(self):
        from promptarchitect.core.composer import ComposeOptions
        opts = ComposeOptions.from_dict({"noYapping": True, "keepShort": True, "customFormat": "bullets"})
        assert opts == ComposeOptions(no_yapping=True, keep_short=True, output_format="bullets")
        assert ComposeOptions.from_dict(None) == ComposeOptions()
