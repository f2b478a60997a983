"""
Wurm Farming - Skill Gain Model
===============================
Effective skill, expected skill gain and the secondary-skill bonus.

Expected gain is a deterministic cubic, not a probability distribution:

    gain = (eff^3 - diff^3) / 50000 + (eff - diff)
"""

from .constants import (
    GAIN_CUBIC_DIVISOR,
    BONUS_CAP,
    BONUS_FLOOR,
    NATURE_SKILL_WEIGHT,
)


# =============================================================================
# EFFECTIVE SKILL
# =============================================================================

def effective_skill(skill: float, tool_quality: float, bonus: float = 0) -> float:
    """
    Calculate the skill actually used for a farming action.

    Formula:
        tool_quality < skill:  eff = (skill + tool_quality) / 2
        otherwise:             eff = skill + skill * (tool_quality - skill) / 100

    The bonus (capped at 70) then closes part of the gap towards the linear
    ceiling (100 + eff) / 2:
        eff += min(eff, ceiling - eff) * bonus / 100

    Args:
        skill: Raw farming skill (0-100)
        tool_quality: Quality of the rake/scythe (0-100)
        bonus: Secondary-skill bonus, see aggregate_bonus()

    Returns:
        Effective skill

    Note:
        Bonus is only capped from above. A negative bonus is ignored rather
        than floored, callers should pass aggregate_bonus() output.
    """
    if tool_quality < skill:
        eff = (skill + tool_quality) / 2
    else:
        linear_max = tool_quality - skill
        eff = skill + skill * linear_max / 100

    bonus = min(bonus, BONUS_CAP)

    linear_max = (100 + eff) / 2
    headroom = min(eff, linear_max - eff)

    if bonus > 0:
        eff += headroom * bonus / 100

    return eff


# =============================================================================
# EXPECTED GAIN
# =============================================================================

def expected_gain(difficulty: float, effective_skill: float) -> float:
    """
    Expected skill gain for an action of the given difficulty.

    Formula:
        gain = (eff^3 - diff^3) / 50000 + (eff - diff)

    Args:
        difficulty: Action difficulty
        effective_skill: Skill used for the action

    Returns:
        Expected gain rate (20 is the sweet spot)

    Note:
        Cubes are taken as float products so huge inputs give inf or nan
        instead of raising OverflowError.
    """
    eff = float(effective_skill)
    diff = float(difficulty)
    return (eff * eff * eff - diff * diff * diff) / GAIN_CUBIC_DIVISOR + (eff - diff)


# =============================================================================
# SECONDARY SKILL BONUS
# =============================================================================

def aggregate_bonus(difficulty_candidate: float, nature_skill: float, tool_craft_skill: float) -> float:
    """
    Combine parent (nature) skill and tool skill into one capped bonus.

    Formula:
        raw = gain(diff, nature) / 10 + gain(diff, tool_skill)
        bonus = clamp(raw, 0, 70)

    Only the sum is clamped, so a negative contribution from one skill
    cancels part of the other before the floor applies.

    Args:
        difficulty_candidate: Difficulty being evaluated
        nature_skill: Parent skill (Nature)
        tool_craft_skill: Skill with the tool used (e.g. Rake)

    Returns:
        Bonus in [0, 70]
    """
    raw = expected_gain(difficulty_candidate, nature_skill) / NATURE_SKILL_WEIGHT
    raw += expected_gain(difficulty_candidate, tool_craft_skill)
    return max(BONUS_FLOOR, min(BONUS_CAP, raw))
