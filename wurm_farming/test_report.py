"""
Unit tests for report.py - formatting, input validation and the farming report.
"""
import pytest
from wurm_farming.core import classify
from wurm_farming.report import (
    format_fixed,
    format_number,
    format_skill_label,
    validate_skill_inputs,
    build_farming_report,
)


class TestFormatting:

    def test_fixed_pads_to_four(self):
        assert format_fixed(5.0) == "05.0"
        assert format_fixed(0) == "00.0"

    def test_fixed_two_digits(self):
        assert format_fixed(32) == "32.0"
        assert format_fixed(52.46) == "52.5"

    def test_fixed_hundred_not_truncated(self):
        assert format_fixed(100) == "100.0"

    def test_skill_label(self):
        assert format_skill_label("Farming skill: ... ", 7) == "Farming skill: ... 07"
        assert format_skill_label("Tool QL: ........... ", 50.5) == "Tool QL: ........... 50.5"
        assert format_skill_label("Tool QL: ........... ", 100) == "Tool QL: ........... 100"


class TestValidation:

    def test_valid_inputs(self):
        validate_skill_inputs(0, 100, 50, 25.5)

    def test_out_of_range_names_field(self):
        with pytest.raises(ValueError, match="tool_quality"):
            validate_skill_inputs(50, 101, 50, 50)

    def test_negative(self):
        with pytest.raises(ValueError, match="skill"):
            validate_skill_inputs(-1, 50, 50, 50)

    def test_nan(self):
        with pytest.raises(ValueError, match="parent_skill"):
            validate_skill_inputs(50, 50, 50, float('nan'))


class TestFarmingReport:

    def test_no_secondary_skills(self):
        report = build_farming_report(50, 50, 0, 0)
        assert report.result.difficulty == 32
        assert report.modified_skill_text == "50.0"
        assert report.difficulty_text == "32.0"
        assert report.farm_group == classify(32)
        assert report.farm_group.challenge == "wheat at 30 difficulty."

    def test_input_labels(self):
        report = build_farming_report(7, 50, 0, 0)
        labels = report.input_labels()
        assert labels[0] == "Farming skill: ... 07"
        assert labels[1] == "Tool QL: ........... 50"
        assert len(labels) == 4

    def test_lines(self):
        lines = build_farming_report(50, 50, 0, 0).lines()
        assert len(lines) == 12
        assert any("wheat at 30 difficulty." in line for line in lines)
        assert any(line.startswith("Difficulty:") and line.endswith("32.0") for line in lines)

    def test_zero_skill_report(self):
        report = build_farming_report(0, 0, 0, 0)
        assert report.difficulty_text == "00.0"
        assert report.farm_group.easy == "nothing at 0 difficulty."


class TestFormatNumber:
    """format_number() prints numbers the way the panel does."""

    def test_whole_numbers(self):
        assert format_number(7) == "7"
        assert format_number(100.0) == "100"

    def test_many_digits_not_shortened(self):
        assert format_number(1234567) == "1234567"
        assert format_number(1234567.5) == "1234567.5"
        assert format_skill_label("Tool QL: ........... ", 1234567.5) == "Tool QL: ........... 1234567.5"

    def test_non_finite(self):
        assert format_number(float('nan')) == "NaN"
        assert format_number(float('inf')) == "Infinity"
        assert format_number(float('-inf')) == "-Infinity"
