"""
Crop recommendations by difficulty.
"""

import math

from .constants import FarmGroup, FARM_GROUP_BANDS, EMPTY_FARM_GROUP


def classify(difficulty: float) -> FarmGroup:
    """
    Easy/challenge/hard crops for a farming difficulty.

    Bands are checked in order and the first one whose upper bound the
    difficulty is below wins. Negative difficulties land in the first band,
    anything from 82.5 up (infinity included) in the last. NaN matches no band.

    Args:
        difficulty: Result of optimal_difficulty() or solve_difficulty_from_skill()

    Returns:
        FarmGroup for that band
    """
    if math.isnan(difficulty):
        return EMPTY_FARM_GROUP

    for upper_bound, group in FARM_GROUP_BANDS:
        if difficulty < upper_bound:
            return group
    return FARM_GROUP_BANDS[-1][1]
