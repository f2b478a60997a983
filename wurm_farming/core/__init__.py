"""
Wurm Farming - Core Math Module
===============================
Single source of truth for the farming difficulty calculator: effective
skill, expected gain, bonus aggregation, difficulty search, the cubic
difficulty solver and crop recommendations.

Every function here is pure. Nothing raises for out-of-range inputs;
callers validate the domain (see report.validate_skill_inputs).
"""

from .constants import (
    # Model constants
    GAIN_CUBIC_DIVISOR,
    TARGET_GAIN,
    BONUS_CAP,
    SEARCH_WINDOW,
    SENTINEL_ORDER,
    SKILL_MIN,
    SKILL_MAX,
    # Farm groups
    FarmGroup,
    FARM_GROUP_BANDS,
    EMPTY_FARM_GROUP,
    # Inputs
    InputField,
    INPUT_FIELDS,
)

from .skill import (
    effective_skill,
    expected_gain,
    aggregate_bonus,
)

from .search import (
    DifficultyCandidate,
    DifficultyResult,
    SENTINEL_CANDIDATE,
    candidate_window,
    score_candidate,
    scan_difficulty_candidates,
    best_candidate,
    optimal_difficulty,
)

from .solver import (
    round_half_up,
    solver_target,
    solve_monotonic_cubic,
    solve_difficulty_from_skill,
)

from .farm_groups import classify

__all__ = [
    # Constants
    'GAIN_CUBIC_DIVISOR',
    'TARGET_GAIN',
    'BONUS_CAP',
    'SEARCH_WINDOW',
    'SENTINEL_ORDER',
    'SKILL_MIN',
    'SKILL_MAX',
    'FarmGroup',
    'FARM_GROUP_BANDS',
    'EMPTY_FARM_GROUP',
    'InputField',
    'INPUT_FIELDS',
    # Skill model
    'effective_skill',
    'expected_gain',
    'aggregate_bonus',
    # Search
    'DifficultyCandidate',
    'DifficultyResult',
    'SENTINEL_CANDIDATE',
    'candidate_window',
    'score_candidate',
    'scan_difficulty_candidates',
    'best_candidate',
    'optimal_difficulty',
    # Solver
    'round_half_up',
    'solver_target',
    'solve_monotonic_cubic',
    'solve_difficulty_from_skill',
    # Farm groups
    'classify',
]
