"""
tests/test_axes.py – Plot bounds.
"""

import numpy as np
import pytest

from particlebox.axes import AxisBounds, axis_bounds
from particlebox.sampler import sample_box


class TestAxisBounds:
    @pytest.mark.parametrize("L", [0.1, 1.0, 4.0])
    def test_unnormalized(self, L):
        b = axis_bounds(L, False)
        assert isinstance(b, AxisBounds)
        assert b.wave == pytest.approx((-1.1, 1.1))
        assert b.density == pytest.approx((0.0, 1.1))

    def test_normalized(self):
        b = axis_bounds(0.5, True)
        assert b.wave == pytest.approx((-2.2, 2.2))
        assert b.density == pytest.approx((0.0, 4.4))

    def test_normalized_unit_peak(self):
        b = axis_bounds(2.0, True)
        assert b.wave == pytest.approx((-1.1, 1.1))
        assert b.density == pytest.approx((0.0, 1.1))

    def test_x_axis(self):
        b = axis_bounds(3.0, True)
        assert b.x == (0.0, 3.0)
        assert b.x_tick == pytest.approx(0.3)

    def test_non_positive_length_falls_back(self):
        assert axis_bounds(0.0, True) == axis_bounds(1.0, True)

    @pytest.mark.parametrize("normalized", [False, True])
    @pytest.mark.parametrize("n, L", [(1, 0.1), (3, 1.0), (10, 7.5)])
    def test_curves_stay_inside(self, n, L, normalized):
        s = sample_box(n, L, normalized)
        b = axis_bounds(L, normalized)
        assert np.all(s.psi > b.wave[0]) and np.all(s.psi < b.wave[1])
        assert np.all(s.density < b.density[1])
