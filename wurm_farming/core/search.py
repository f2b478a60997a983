"""
Wurm Farming - Optimal Difficulty Search
========================================
Finds the crop difficulty whose expected gain is closest to the target rate.

Once both secondary skills feed the bonus there is no closed-form inverse,
so every integer difficulty in a small window below the effective skill is
scored and the best one is kept.
"""

import math
from dataclasses import dataclass
from typing import List

from .constants import TARGET_GAIN, SEARCH_WINDOW, SENTINEL_ORDER
from .skill import effective_skill, expected_gain, aggregate_bonus


# =============================================================================
# RESULT DATACLASSES
# =============================================================================

@dataclass(frozen=True)
class DifficultyCandidate:
    """One scored difficulty from the search window."""
    order: float       # |mean - TARGET_GAIN|, lower is better
    bonus: float
    eff: float
    mean: float
    difficulty: int


# Default candidate, first in every scan
SENTINEL_CANDIDATE = DifficultyCandidate(
    order=SENTINEL_ORDER,
    bonus=0.0,
    eff=0.0,
    mean=0.0,
    difficulty=0,
)


@dataclass(frozen=True)
class DifficultyResult:
    """Winning candidate of a difficulty search."""
    eff: float
    difficulty: int
    bonus: float

    def breakdown(self) -> str:
        """Return formatted breakdown of the search result."""
        return f"""
Optimal Difficulty
==================
Effective Skill:    {self.eff:.2f}
Bonus:              {self.bonus:.2f}
----------------------------
= Difficulty:       {self.difficulty}
"""


# =============================================================================
# SEARCH
# =============================================================================

def candidate_window(baseline_eff: float) -> range:
    """
    Integer difficulties scanned for a given (bonus-free) effective skill.

    Window is [floor(eff) - 30, floor(eff)), starting at 0 when the
    effective skill is below 30. Empty when the effective skill is below 1
    or not finite.
    """
    if not math.isfinite(baseline_eff):
        return range(0)
    end = math.floor(baseline_eff)
    start = max(0, end - SEARCH_WINDOW)
    return range(start, end)


def score_candidate(
    difficulty: int,
    skill: float,
    tool_quality: float,
    tool_craft_skill: float,
    nature_skill: float,
) -> DifficultyCandidate:
    """Score a single difficulty: bonus, effective skill and distance to the target gain."""
    diff = float(difficulty)
    bonus = aggregate_bonus(diff, nature_skill, tool_craft_skill)
    eff = effective_skill(skill, tool_quality, bonus)
    mean = expected_gain(diff, eff)
    return DifficultyCandidate(
        order=abs(mean - TARGET_GAIN),
        bonus=bonus,
        eff=eff,
        mean=mean,
        difficulty=difficulty,
    )


def scan_difficulty_candidates(
    skill: float,
    tool_quality: float,
    tool_craft_skill: float,
    nature_skill: float,
) -> List[DifficultyCandidate]:
    """
    Score every difficulty in the search window.

    Args:
        skill: Farming skill
        tool_quality: Tool QL
        tool_craft_skill: Skill with the tool (e.g. Rake)
        nature_skill: Parent skill (Nature)

    Returns:
        Candidates in scan order: the sentinel first, then ascending difficulty
    """
    baseline = effective_skill(skill, tool_quality, 0)

    candidates = [SENTINEL_CANDIDATE]
    for difficulty in candidate_window(baseline):
        candidates.append(
            score_candidate(difficulty, skill, tool_quality, tool_craft_skill, nature_skill)
        )
    return candidates


def best_candidate(candidates: List[DifficultyCandidate]) -> DifficultyCandidate:
    """Lowest order wins; on a tie the earliest candidate is kept."""
    return min(candidates, key=lambda c: c.order)


def optimal_difficulty(
    skill: float,
    tool_quality: float,
    tool_craft_skill: float,
    nature_skill: float,
) -> DifficultyResult:
    """
    Find the difficulty whose expected gain is closest to 20.

    Algorithm:
        1. baseline = effective_skill(skill, tool_quality) without bonus
        2. For each integer d in [max(0, floor(baseline) - 30), floor(baseline)):
             bonus = aggregate_bonus(d, nature_skill, tool_craft_skill)
             eff   = effective_skill(skill, tool_quality, bonus)
             order = |expected_gain(d, eff) - 20|
        3. Keep the lowest order, first one wins ties

    Never raises. With an empty window (effective skill below 1) the
    sentinel is returned: difficulty 0, eff 0, bonus 0.

    Args:
        skill: Farming skill
        tool_quality: Tool QL
        tool_craft_skill: Skill with the tool (e.g. Rake)
        nature_skill: Parent skill (Nature)

    Returns:
        DifficultyResult with the winning eff, difficulty and bonus
    """
    candidates = scan_difficulty_candidates(skill, tool_quality, tool_craft_skill, nature_skill)
    best = best_candidate(candidates)
    return DifficultyResult(eff=best.eff, difficulty=best.difficulty, bonus=best.bonus)
