"""
Tests for component detection and prompt analysis (core/detector.py, core/analyzer.py).
"""
import dataclasses

import pytest

from promptarchitect.core.patterns import COMPONENT_KEYS, DEFAULT_CONFIG
from promptarchitect.core.detector import detect_component, detect_components
from promptarchitect.core.analyzer import (
    calculate_score, count_lines, count_words, full_report, get_altitude,
)

SCENARIO_PROMPT = "Act as an expert. Please help me write a poem."

FULL_PROMPT = (
    "You are an expert. Your task: write with context, must follow the example,\n"
    "output json, use reasoning, friendly tone, {{name}}, for the target audience.\n"
    + "\n".join(" ".join(["lorem"] * 40) for _ in range(4))
)


@pytest.fixture
def structure_only():
    """Config with no component patterns: the score is pure structure bonus."""
    return dataclasses.replace(DEFAULT_CONFIG, component_patterns={})


class TestDetector:
    """detect_component / detect_components"""

    def test_all_keys_in_canonical_order(self):
        result = detect_components("anything")
        assert list(result.keys()) == list(COMPONENT_KEYS)

    def test_scenario_prompt(self):
        result = detect_components(SCENARIO_PROMPT)
        present = [k for k, v in result.items() if v.present]
        assert present == ["role", "task"]
        assert result["role"].matches == ["Act as", "expert"]
        assert result["task"].matches == ["write"]

    def test_matches_keep_original_case(self):
        status = detect_component("YOU ARE a bot", "role")
        assert status.present
        assert status.matches == ["YOU ARE"]

    def test_absent_component_has_no_matches(self):
        status = detect_component("hello there", "format")
        assert not status.present
        assert status.matches == []

    def test_variables(self):
        status = detect_component("Hello {{name}}, see [file] and <tag>", "variables")
        assert status.matches == ["{{name}}", "[file]", "<tag>"]

    def test_single_phrase_can_satisfy_two_components(self):
        result = detect_components("Written for the target audience")
        assert result["tone"].present
        assert result["audience"].present

    def test_empty_text(self):
        result = detect_components("")
        assert not any(v.present for v in result.values())

    def test_deterministic(self):
        assert detect_components(FULL_PROMPT) == detect_components(FULL_PROMPT)


class TestCounting:
    """count_words / count_lines"""

    def test_words_ignore_surrounding_whitespace(self):
        assert count_words("  hello   world  ") == 2

    def test_blank_text_has_no_words(self):
        assert count_words("") == 0
        assert count_words("   \n  ") == 0

    def test_blank_lines_are_not_counted(self):
        assert count_lines("a\n\n  \nb\nc") == 3


class TestScore:
    """calculate_score"""

    def test_empty_text_scores_zero(self):
        assert calculate_score("") == 0

    def test_scenario_prompt_scores_twelve(self):
        """2 of 10 components, no structure bonus."""
        assert calculate_score(SCENARIO_PROMPT) == 12

    def test_line_bonus(self, structure_only):
        assert calculate_score("a\nb\nc\nd", config=structure_only) == 10
        assert calculate_score("a\nb\nc", config=structure_only) == 0

    def test_word_bonuses(self, structure_only):
        assert calculate_score(" ".join(["word"] * 51), config=structure_only) == 10
        assert calculate_score(" ".join(["word"] * 151), config=structure_only) == 20

    def test_delimiter_bonus(self, structure_only):
        assert calculate_score("snake_case", config=structure_only) == 10
        assert calculate_score("plain words", config=structure_only) == 0

    def test_everything_present_caps_at_100(self):
        report = full_report(FULL_PROMPT)
        assert all(v.present for v in report.components.values())
        assert report.score == 100

    def test_score_range(self):
        for text in ["", "x", SCENARIO_PROMPT, FULL_PROMPT]:
            assert 0 <= calculate_score(text) <= 100


class TestAltitude:
    """get_altitude"""

    def test_short_prompt_is_too_high(self):
        assert get_altitude("Write code.") == "too-high"

    def test_short_prompt_ignores_markers(self):
        assert get_altitude("step by step, exactly, every detail") == "too-high"

    def test_over_prescribed_is_too_low(self):
        text = "Explain step by step, in detailed form, exactly how to configure every option."
        assert get_altitude(text) == "too-low"

    def test_every_marker_occurrence_counts(self):
        text = "Check every line, every word, and every comma in the attached document please."
        assert get_altitude(text) == "too-low"

    def test_just_right(self):
        text = "Summarize the attached quarterly report for the board in plain language."
        assert get_altitude(text) == "just-right"


class TestFullReport:
    """full_report"""

    def test_empty_report(self):
        report = full_report("")
        assert report.score == 0
        assert report.word_count == 0
        assert report.altitude == "too-high"

    def test_none_is_treated_as_empty(self):
        assert full_report(None) == full_report("")

    def test_to_dict_shape(self):
        data = full_report(SCENARIO_PROMPT).to_dict()
        assert data["score"] == 12
        assert data["altitude"] == "too-high"
        assert data["wordCount"] == 10
        assert data["components"]["role"] == {"present": True, "matches": ["Act as", "expert"]}

    def test_from_dict_rebuilds_the_same_report(self):
        from promptarchitect.core.types import AnalysisReport
        report = full_report(SCENARIO_PROMPT)
        assert AnalysisReport.from_dict(report.to_dict()) == report


class TestOverrides:
    """AnalysisReport.with_component_override"""

    def test_override_returns_new_report(self):
        report = full_report(SCENARIO_PROMPT)
        changed = report.with_component_override("format", True)
        assert changed.components["format"].present
        assert not report.components["format"].present

    def test_override_keeps_matches(self):
        report = full_report(SCENARIO_PROMPT)
        changed = report.with_component_override("role", False)
        assert not changed.components["role"].present
        assert changed.components["role"].matches == ["Act as", "expert"]

    def test_override_leaves_score_alone(self):
        report = full_report(SCENARIO_PROMPT)
        assert report.with_overrides({"context": True, "format": True}).score == report.score

    def test_unknown_key_raises(self):
        from promptarchitect.validation_utils import ValidationError
        report = full_report(SCENARIO_PROMPT)
        with pytest.raises(ValidationError):
            report.with_component_override("mood", True)

    def test_present_components(self):
        report = full_report(SCENARIO_PROMPT)
        assert report.present_components() == ["role", "task"]
        assert report.with_component_override("role", False).present_components() == ["task"]


class TestReportFromDict:
    """AnalysisReport.from_dict on client-sent reports"""

    def test_word_count_alias(self):
        from promptarchitect.core.types import AnalysisReport
        report = AnalysisReport.from_dict({"score": 40, "altitude": "too-low", "word_count": 7})
        assert report.word_count == 7
        assert report.present_components() == []

    @pytest.mark.parametrize("data", [
        {"score": "high"},
        {"score": None},
        {"wordCount": "many"},
        {"components": ["role", "task"]},
        {"components": {"role": "yes"}},
        {"components": {"role": {"present": True, "matches": 3}}},
        {"altitude": "sideways"},
    ])
    def test_malformed_report_is_rejected(self, data):
        from promptarchitect.core.types import AnalysisReport
        from promptarchitect.validation_utils import ValidationError
        with pytest.raises(ValidationError):
            AnalysisReport.from_dict(data)
