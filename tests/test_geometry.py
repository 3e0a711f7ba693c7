import math

import pytest

from jewel_appraiser.geometry import box_volume_cm3, cylinder_volume_cm3, diamond_carats


def test_box_volume_cube():
    assert box_volume_cm3(10, 10, 10) == 1.0


def test_box_volume_never_negative():
    assert box_volume_cm3(-10, 10, 10) == 0.0
    assert box_volume_cm3("", "x", None) == 0.0


def test_cylinder_volume():
    assert cylinder_volume_cm3(10, 10) == pytest.approx(math.pi * 0.25, abs=1e-6)
    assert cylinder_volume_cm3(10, -5) == 0.0


def test_diamond_carats():
    assert diamond_carats(6.5, 4) == pytest.approx(1.0309, abs=1e-3)
    assert diamond_carats("6.5", "4") == pytest.approx(1.0309, abs=1e-3)
    assert diamond_carats(6.5, -1) == 0.0
    assert diamond_carats("", "") == 0.0
