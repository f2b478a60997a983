"""
Wurm Farming - Difficulty From Modified Skill
=============================================
Direct difficulty estimate from a single modified skill value.

Solves the cubic

    x^3 + 50000x = target

which is strictly increasing (derivative 3x^2 + 50000 > 0), so it has exactly
one real root for any target. Newton-Raphson converges to it without a
general polynomial root finder.
"""

import math

from .constants import (
    SOLVER_LINEAR_COEFF,
    SOLVER_OFFSET,
    SOLVER_MAX_ITERATIONS,
    SOLVER_TOLERANCE,
)


def round_half_up(value: float) -> float:
    """Round .5 towards +inf (builtin round() rounds half to even).

    Non-finite values pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def solver_target(modified_skill: float) -> float:
    """
    Right-hand side of the difficulty cubic for a modified skill.

    Formula:
        target = round(-(skill^3) - 50000 * skill + 1000000)

    Note:
        The target falls as skill rises, so solve_difficulty_from_skill()
        decreases with skill and is 0 from about 19.84 up. Callers rely on
        this direction; the sign is not meant to be flipped.
    """
    skill = float(modified_skill)
    return round_half_up(-(skill * skill * skill) - SOLVER_LINEAR_COEFF * skill + SOLVER_OFFSET)


def solve_monotonic_cubic(target: float) -> float:
    """
    Real root of x^3 + 50000x - target = 0.

    Newton-Raphson seeded at cbrt(target). The cubic is convex on the seed's
    side of the root, so iterates approach it monotonically.

    Args:
        target: Right-hand side, any real

    Returns:
        The unique real root (negative when target is negative)
    """
    target = float(target)
    if target == 0:
        return 0.0

    x = math.copysign(abs(target) ** (1 / 3), target)
    for _ in range(SOLVER_MAX_ITERATIONS):
        f = x * x * x + SOLVER_LINEAR_COEFF * x - target
        step = f / (3 * x * x + SOLVER_LINEAR_COEFF)
        x -= step
        if abs(step) < SOLVER_TOLERANCE:
            break
    return x


def solve_difficulty_from_skill(modified_skill: float) -> float:
    """
    Difficulty for a modified skill, via the monotonic cubic.

    Args:
        modified_skill: Effective (modified) farming skill

    Returns:
        Positive root of the cubic, or 0.0 when there is none
    """
    root = solve_monotonic_cubic(solver_target(modified_skill))
    if root > 0:
        return root
    return 0.0
