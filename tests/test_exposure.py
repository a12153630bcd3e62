"""Tests for CEI and hazard distance scoring."""

import numpy as np
import pytest

from config import EPRG, MAX_CEI, MAX_HAZARD_DISTANCE
from models.exposure import compute_cei, compute_hazard_distance, compute_hazard_distances


class TestComputeCEI:
    """Tests for the Chemical Exposure Index."""

    def test_at_eprg2_equals_coefficient(self):
        """AQ equal to EPRG-2 gives sqrt(1), so CEI = 655.1."""
        assert compute_cei(111.0) == pytest.approx(655.1)

    def test_zero_airborne_quantity(self):
        assert compute_cei(0.0) == 0.0

    def test_capped_at_max(self):
        assert compute_cei(1e9) == MAX_CEI

    def test_never_exceeds_cap(self):
        aq = np.logspace(-6, 8, 300)
        assert np.all(compute_cei(aq) <= MAX_CEI)

    def test_monotonic_non_decreasing(self):
        aq = np.linspace(0.0, 1000.0, 500)
        assert np.all(np.diff(compute_cei(aq)) >= 0)

    def test_preserves_shape(self):
        aq = np.ones((3, 4)) * 10.0
        assert compute_cei(aq).shape == (3, 4)

    def test_custom_eprg(self):
        """A substance with a lower EPRG-2 scores higher for the same AQ."""
        toxic = {1: 1, 2: 5, 3: 50}
        assert compute_cei(1.0, eprg=toxic) > compute_cei(1.0)

    def test_negative_airborne_quantity_gives_nan(self):
        with np.errstate(invalid="ignore"):
            assert np.isnan(compute_cei(-1.0))


class TestComputeHazardDistance:
    """Tests for EPRG hazard distances."""

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_at_eprg_equals_coefficient(self, level):
        assert compute_hazard_distance(float(EPRG[level]), level) == pytest.approx(6551.0)

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_capped_at_max(self, level):
        assert compute_hazard_distance(1e9, level) == MAX_HAZARD_DISTANCE

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_monotonic_and_bounded(self, level):
        aq = np.logspace(-6, 8, 300)
        hd = compute_hazard_distance(aq, level)
        assert np.all(np.diff(hd) >= 0)
        assert np.all(hd <= MAX_HAZARD_DISTANCE)

    def test_more_sensitive_levels_reach_further(self):
        """Lower EPRG thresholds are reached further away: HD1 >= HD2 >= HD3."""
        for aq in [1e-4, 0.01, 1.0, 76.4, 5000.0]:
            hd1 = compute_hazard_distance(aq, 1)
            hd2 = compute_hazard_distance(aq, 2)
            hd3 = compute_hazard_distance(aq, 3)
            assert hd1 >= hd2 >= hd3

    @pytest.mark.parametrize("level", [0, 4, -1])
    def test_unknown_level_raises(self, level):
        """Levels outside 1-3 are a caller error and are rejected."""
        with pytest.raises(ValueError, match="Unknown hazard level"):
            compute_hazard_distance(1.0, level)

    def test_idempotent(self):
        assert compute_hazard_distance(12.5, 2) == compute_hazard_distance(12.5, 2)


class TestComputeHazardDistances:
    """Tests for the per-level distance table."""

    def test_keys_are_levels(self):
        assert set(compute_hazard_distances(1.0)) == {1, 2, 3}

    def test_matches_single_level(self):
        table = compute_hazard_distances(3.0)
        for level in (1, 2, 3):
            assert table[level] == compute_hazard_distance(3.0, level)

    def test_follows_supplied_table(self):
        """Only the levels present in a custom table are scored."""
        table = compute_hazard_distances(1.0, eprg={1: 22, 2: 111})
        assert list(table) == [1, 2]
        assert table[2] == compute_hazard_distance(1.0, 2)

    def test_sorted_by_level(self):
        table = compute_hazard_distances(1.0, eprg={3: 11060, 1: 22, 2: 111})
        assert list(table) == [1, 2, 3]
