"""
Wurm Farming - Core Constants
=============================
Single source of truth for the skill-gain model constants and the crop
difficulty table.

Values match the in-game farming calculator panel.
"""

from dataclasses import dataclass
from typing import Tuple


# =============================================================================
# EXPECTED GAIN MODEL
# =============================================================================

# Expected gain is a cubic in skill and difficulty:
#   gain = (eff^3 - diff^3) / GAIN_CUBIC_DIVISOR + (eff - diff)
GAIN_CUBIC_DIVISOR = 50000

# Gain rate the search aims for (the "optimal" farming tick)
TARGET_GAIN = 20.0


# =============================================================================
# BONUS AGGREGATION
# =============================================================================

BONUS_CAP = 70.0        # Hard cap on the secondary-skill bonus
BONUS_FLOOR = 0.0
NATURE_SKILL_WEIGHT = 10  # Parent skill contributes gain / 10


# =============================================================================
# DIFFICULTY SEARCH
# =============================================================================

# Candidates scanned: [floor(eff) - SEARCH_WINDOW, floor(eff))
SEARCH_WINDOW = 30

# Score of the default candidate, always present so a search never comes back empty
SENTINEL_ORDER = 1000.0


# =============================================================================
# CUBIC SOLVER
# =============================================================================

# Solves x^3 + SOLVER_LINEAR_COEFF * x = target
SOLVER_LINEAR_COEFF = 50000
SOLVER_OFFSET = 1_000_000
SOLVER_MAX_ITERATIONS = 100
SOLVER_TOLERANCE = 1e-9


# =============================================================================
# NOMINAL INPUT DOMAIN
# =============================================================================

SKILL_MIN = 0.0
SKILL_MAX = 100.0


# =============================================================================
# FARM GROUPS
# =============================================================================

@dataclass(frozen=True)
class FarmGroup:
    """Crops to farm for a difficulty: one below, one at, one above."""
    easy: str
    challenge: str
    hard: str


EMPTY_FARM_GROUP = FarmGroup(easy="", challenge="", hard="")

# Ordered (upper_bound, group) bands. A difficulty falls into the first band
# whose upper bound it is below. Labels are kept exactly as the game panel
# shows them.
FARM_GROUP_BANDS: Tuple[Tuple[float, FarmGroup], ...] = (
    (5.5, FarmGroup(
        easy="nothing at 0 difficulty.",
        challenge="potato at 4 difficulty.",
        hard="cotton at 7 difficulty.",
    )),
    (8.5, FarmGroup(
        easy="potato at 4 difficulty.",
        challenge="cotton at 7 difficulty.",
        hard="wemp and rye at 10 difficulty.",
    )),
    (12.5, FarmGroup(
        easy="cotton at 7 difficulty.",
        challenge="wemp and rye at 10 difficulty.",
        hard="oat, cucumber, and pumpkin at 15 difficulty.",
    )),
    (17.5, FarmGroup(
        easy="wemp and rye at 10 difficulty.",
        challenge="oat, cucumber, and pumpkin at 15 difficulty.",
        hard="barley and reed at 20 difficulty.",
    )),
    (22.5, FarmGroup(
        easy="oat, cucumber, and pumpkin at 15 difficulty.",
        challenge="barley and reed at 20 difficulty.",
        hard="carrot at 25 difficulty.",
    )),
    (27.5, FarmGroup(
        easy="barley and reed at 20 difficulty.",
        challenge="carrot at 25 difficulty.",
        hard="wheat at 30 difficulty.",
    )),
    (32.5, FarmGroup(
        easy="carrot at 25 difficulty.",
        challenge="wheat at 30 difficulty.",
        hard="cabbage at 35 difficulty.",
    )),
    (37.5, FarmGroup(
        easy="wheat at 30 difficulty.",
        challenge="cabbage at 35 difficulty.",
        hard="corn at 40 difficulty.",
    )),
    (42.5, FarmGroup(
        easy="cabbage at 35 difficulty.",
        challenge="corn at 40 difficulty.",
        hard="tomatoes at 45 difficulty.",
    )),
    (50.0, FarmGroup(
        easy="corn at 40 difficulty.",
        challenge="tomatoes at 45 difficulty.",
        hard="lettuce at 55 difficulty.",
    )),
    (57.5, FarmGroup(
        easy="tomatoes at 45 difficulty.",
        challenge="lettus at 55 difficulty.",
        hard="onion and strawberry at 60 difficulty.",
    )),
    (62.5, FarmGroup(
        easy="lettus at 55 difficulty.",
        challenge="onion and strawberry at 60 difficulty.",
        hard="peas at 65 difficulty.",
    )),
    (67.5, FarmGroup(
        easy="onion and strawberry at 60 difficulty.",
        challenge="peas at 65 difficulty.",
        hard="garlic at 70 difficulty.",
    )),
    (75.0, FarmGroup(
        easy="peas at 65 difficulty.",
        challenge="garlic at 70 difficulty.",
        hard="rice at 80 difficulty.",
    )),
    (82.5, FarmGroup(
        easy="garlic at 70 difficulty.",
        challenge="rice at 80 difficulty.",
        hard="sugar beat at 85 difficulty.",
    )),
    (float('inf'), FarmGroup(
        easy="rice at 80 difficulty.",
        challenge="sugar beat at 85 difficulty.",
        hard="nothing harder then 85 difficulty.",
    )),
)


# =============================================================================
# CALCULATOR INPUTS
# =============================================================================

@dataclass(frozen=True)
class InputField:
    """One slider of the farming calculator."""
    key: str
    label: str


# Label prefixes are dot-padded so values line up in a monospace panel
INPUT_FIELDS: Tuple[InputField, ...] = (
    InputField(key="skill", label="Farming skill: ... "),
    InputField(key="tool_quality", label="Tool QL: ........... "),
    InputField(key="tool_skill", label="Tool skill: ......... "),
    InputField(key="parent_skill", label="Parent skill: ...... "),
)
