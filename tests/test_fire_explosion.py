"""Tests for the Fire & Explosion Index helpers."""

import numpy as np
import pytest

from models.fire_explosion import (
    exposure_area,
    exposure_radius,
    fire_explosion_index,
    process_unit_hazard,
    rupture_diameter,
)
from models.process_variables import EquipmentType


class TestProcessUnitHazard:

    def test_product_below_cap(self):
        assert process_unit_hazard(2.0, 3.0) == pytest.approx(6.0)

    def test_capped_at_eight(self):
        assert process_unit_hazard(3.0, 4.0) == 8

    def test_nan_factor_propagates(self):
        """A NaN factor is not clamped to the cap."""
        assert np.isnan(process_unit_hazard(np.nan, 2.0))
        assert np.isnan(process_unit_hazard(2.0, np.nan))

    def test_array_factors(self):
        f1 = np.array([1.0, 2.0, 4.0])
        np.testing.assert_allclose(process_unit_hazard(f1, 3.0), [3.0, 6.0, 8.0])


class TestFireExplosionIndex:

    def test_product(self):
        assert fire_explosion_index(5.0, 24.0) == pytest.approx(120.0)

    def test_exposure_radius(self):
        assert exposure_radius(100.0) == pytest.approx(84.0)

    def test_exposure_area_is_circle(self):
        assert exposure_area(10.0) == pytest.approx(np.pi * 8.4 ** 2)

    def test_exposure_area_grows_quadratically(self):
        assert exposure_area(20.0) / exposure_area(10.0) == pytest.approx(4.0)


class TestRuptureDiameter:

    def test_small_equipment_fixed_size(self):
        assert rupture_diameter(3.0, EquipmentType.PIPE) == 2

    def test_large_equipment_twenty_percent_of_cross_section(self):
        assert rupture_diameter(4.0, EquipmentType.VESSEL) == pytest.approx(np.pi * 0.8)
        assert rupture_diameter(10.0, EquipmentType.VESSEL) == pytest.approx(25 * np.pi * 0.2)

    def test_equipment_type_does_not_change_result(self):
        results = {rupture_diameter(8.0, t) for t in EquipmentType}
        assert len(results) == 1

    def test_equipment_type_defaults(self):
        assert rupture_diameter(8.0) == rupture_diameter(8.0, EquipmentType.PRESSURE_RELIEF_DEVICE)
