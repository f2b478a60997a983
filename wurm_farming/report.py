"""
Farming Calculator Report
=========================
Everything the farming panel shows for one set of slider values: modified
skill, optimal difficulty and the easy/challenge/hard crops.

The panel (or the console entry point) validates inputs here, then calls
build_farming_report() and displays the strings as-is.
"""

import math
from dataclasses import dataclass
from typing import List

from .core import (
    SKILL_MIN,
    SKILL_MAX,
    INPUT_FIELDS,
    FarmGroup,
    DifficultyResult,
    optimal_difficulty,
    classify,
)


# =============================================================================
# FORMATTING
# =============================================================================

def format_fixed(value: float) -> str:
    """One decimal, zero padded to four characters (5.0 -> '05.0')."""
    return f"{value:.1f}".rjust(4, '0')


def format_number(value: float) -> str:
    """Number as the panel prints it: whole values without a decimal point, others in full."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def format_skill_label(label: str, value: float) -> str:
    """Slider label with its value padded to two characters ('... ' + '07')."""
    return label + format_number(value).rjust(2, '0')


# =============================================================================
# VALIDATION
# =============================================================================

def validate_skill_inputs(
    skill: float,
    tool_quality: float,
    tool_skill: float,
    parent_skill: float,
) -> None:
    """
    Check every calculator input is a number within [0, 100].

    The core accepts anything; this is the check callers run first.

    Raises:
        ValueError: naming the first offending input
    """
    values = {
        'skill': skill,
        'tool_quality': tool_quality,
        'tool_skill': tool_skill,
        'parent_skill': parent_skill,
    }
    for field in INPUT_FIELDS:
        value = values[field.key]
        if math.isnan(value) or not SKILL_MIN <= value <= SKILL_MAX:
            raise ValueError(
                f"{field.key} must be between {SKILL_MIN:g} and {SKILL_MAX:g}, got {value}"
            )


# =============================================================================
# REPORT
# =============================================================================

@dataclass(frozen=True)
class FarmingReport:
    """Calculator output for one set of inputs."""
    skill: float
    tool_quality: float
    tool_skill: float
    parent_skill: float
    result: DifficultyResult
    farm_group: FarmGroup

    @property
    def modified_skill_text(self) -> str:
        return format_fixed(self.result.eff)

    @property
    def difficulty_text(self) -> str:
        return format_fixed(self.result.difficulty)

    def input_labels(self) -> List[str]:
        """Slider labels in panel order."""
        values = {
            'skill': self.skill,
            'tool_quality': self.tool_quality,
            'tool_skill': self.tool_skill,
            'parent_skill': self.parent_skill,
        }
        return [format_skill_label(field.label, values[field.key]) for field in INPUT_FIELDS]

    def lines(self) -> List[str]:
        """Report as printable lines."""
        lines = self.input_labels()
        lines.append("-" * 40)
        lines.append(f"{'Modified skill:':<18}{self.modified_skill_text}")
        lines.append(f"{'Difficulty:':<18}{self.difficulty_text}")
        lines.append(f"{'Bonus:':<18}{self.result.bonus:.2f}")
        lines.append("-" * 40)
        lines.append(f"{'Easy:':<18}{self.farm_group.easy}")
        lines.append(f"{'Challenge:':<18}{self.farm_group.challenge}")
        lines.append(f"{'Hard:':<18}{self.farm_group.hard}")
        return lines


def build_farming_report(
    skill: float,
    tool_quality: float,
    tool_skill: float,
    parent_skill: float,
) -> FarmingReport:
    """
    Run the difficulty search and look up the crops for its result.

    Args:
        skill: Farming skill
        tool_quality: Tool QL
        tool_skill: Skill with the tool (e.g. Rake)
        parent_skill: Nature skill

    Returns:
        FarmingReport
    """
    result = optimal_difficulty(skill, tool_quality, tool_skill, parent_skill)
    return FarmingReport(
        skill=skill,
        tool_quality=tool_quality,
        tool_skill=tool_skill,
        parent_skill=parent_skill,
        result=result,
        farm_group=classify(result.difficulty),
    )
