"""
Unit tests for core/farm_groups.py - crop recommendations by difficulty band.
"""
import dataclasses
import math

import pytest
from wurm_farming.core import (
    FarmGroup,
    FARM_GROUP_BANDS,
    EMPTY_FARM_GROUP,
    classify,
)


class TestBandTable:
    """Tests for FARM_GROUP_BANDS."""

    def test_sixteen_bands(self):
        assert len(FARM_GROUP_BANDS) == 16

    def test_upper_bounds_ascending(self):
        bounds = [upper for upper, _ in FARM_GROUP_BANDS]
        assert bounds == sorted(bounds)
        assert len(set(bounds)) == len(bounds)

    def test_last_band_open_ended(self):
        assert math.isinf(FARM_GROUP_BANDS[-1][0])

    def test_each_challenge_is_next_easy(self):
        """Crops step up one band at a time."""
        for (_, group), (_, next_group) in zip(FARM_GROUP_BANDS, FARM_GROUP_BANDS[1:]):
            assert group.challenge == next_group.easy

    def test_groups_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            FARM_GROUP_BANDS[0][1].easy = "wheat"


class TestClassify:
    """Tests for classify()."""

    def test_first_band(self):
        group = classify(5.0)
        assert group.easy == "nothing at 0 difficulty."
        assert group.challenge == "potato at 4 difficulty."
        assert group.hard == "cotton at 7 difficulty."

    def test_last_band(self):
        group = classify(90)
        assert group.easy == "rice at 80 difficulty."
        assert group.hard == "nothing harder then 85 difficulty."

    def test_lower_bound_inclusive(self):
        assert classify(5.5).challenge == "cotton at 7 difficulty."
        assert classify(82.5).challenge == "sugar beat at 85 difficulty."
        assert classify(50).challenge == "lettus at 55 difficulty."

    def test_upper_bound_exclusive(self):
        assert classify(49.999).hard == "lettuce at 55 difficulty."
        assert classify(82.49).challenge == "rice at 80 difficulty."

    def test_integer_difficulties(self):
        assert classify(32).challenge == "wheat at 30 difficulty."
        assert classify(15).challenge == "oat, cucumber, and pumpkin at 15 difficulty."

    def test_negative_is_first_band(self):
        assert classify(-3) == FARM_GROUP_BANDS[0][1]

    def test_infinity_is_last_band(self):
        assert classify(float('inf')) == FARM_GROUP_BANDS[-1][1]

    def test_nan_is_empty(self):
        assert classify(float('nan')) == EMPTY_FARM_GROUP

    def test_total_over_range(self):
        """Every difficulty from 0 to 120 maps to a real band."""
        for tenth in range(0, 1201):
            group = classify(tenth / 10)
            assert isinstance(group, FarmGroup)
            assert group != EMPTY_FARM_GROUP
