from __future__ import annotations

import numpy as np
import pytest

from ssp_spacing.errors import InvalidKnotData, InvalidPointCount
from ssp_spacing.knots import default_knots, sanitize_knots
from ssp_spacing.numerics import compute_si, find_interval
from ssp_spacing.numerics.inversion import exp_segment_offset, series_segment_offset


class TestFindInterval:

    T = [0.0, 0.25, 0.5, 1.0]

    @pytest.mark.parametrize("t, expected", [
        (0.0, 0),
        (-0.1, 0),
        (0.1, 0),
        (0.25, 0),
        (0.2500001, 1),
        (0.5, 1),
        (0.75, 2),
        (1.0, 2),
        (1.5, 2),
    ])
    def test_half_open_intervals(self, t, expected):
        assert find_interval(self.T, t) == expected

    def test_matches_linear_scan(self):
        T = [0.0, 0.1, 0.1, 0.4, 0.4, 0.9, 1.0]
        targets = np.linspace(0.0, 1.0, 41)

        def scan(t):
            if t <= 0:
                return 0
            for j in range(len(T) - 1):
                if T[j] < t <= T[j + 1]:
                    return j
            return len(T) - 2

        np.testing.assert_array_equal(find_interval(T, targets), [scan(t) for t in targets])

    def test_scalar_returns_int(self):
        assert isinstance(find_interval(self.T, 0.3), int)

    def test_needs_two_positions(self):
        with pytest.raises(InvalidKnotData):
            find_interval([0.0], 0.5)


@pytest.mark.parametrize("Bj", [1e-3, -1e-3])
@pytest.mark.parametrize("dt", [0.05, 0.5, 1.0])
def test_branches_agree_at_threshold(Bj, dt):
    Fj = 0.8
    eps = Bj * dt
    assert abs(exp_segment_offset(Fj, Bj, eps) - series_segment_offset(Fj, eps, dt)) < 1e-9


def test_uniform_knots_invert_to_targets():
    si = compute_si(default_knots(), [0.0, 1.0], 5)
    np.testing.assert_allclose(si, [0.0, 0.25, 0.5, 0.75, 1.0], atol=1e-15)


def test_linear_segment_closed_form():
    # F(s) = ln2 * (1 + s) integrates to exactly one over [0, 1]
    ln2 = np.log(2.0)
    knots = sanitize_knots([(0.0, ln2), (1.0, 2.0 * ln2)])
    si = compute_si(knots, [0.0, 1.0], 3)
    assert si[1] == pytest.approx(np.sqrt(2.0) - 1.0, rel=1e-14)


def test_endpoints_assigned_exactly():
    knots = sanitize_knots([(0.0, 0.3), (1.0, 0.9)])
    # deliberately inconsistent T: formula would not land on 1
    si = compute_si(knots, [0.0, 1.0], 4)
    assert si[0] == 0.0
    assert si[-1] == 1.0


@pytest.mark.parametrize("n", [1, 0, -3, 2.5, True, "5"])
def test_invalid_point_count(n):
    with pytest.raises(InvalidPointCount):
        compute_si(default_knots(), [0.0, 1.0], n)


def test_accepts_numpy_integer():
    si = compute_si(default_knots(), [0.0, 1.0], np.int64(3))
    assert si.size == 3
