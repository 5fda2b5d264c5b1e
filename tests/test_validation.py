from __future__ import annotations

import numpy as np
import pytest

from ssp_spacing import compute
from ssp_spacing.validation import check_distribution, spacing_function, spacing_residual


def test_report_flags_problems():
    report = check_distribution([0.0, 0.6, 0.4, 0.9])
    assert not report.monotone
    assert not report.ends_at_one
    assert report.min_gap == pytest.approx(-0.2)
    assert not report.ok


def test_report_checks_expected_size():
    report = check_distribution([0.0, 0.5, 1.0], n=4)
    assert report.monotone and report.starts_at_zero and report.ends_at_one
    assert not report.ok


def test_report_needs_two_points():
    with pytest.raises(ValueError):
        check_distribution([0.0])


def test_spacing_function_is_piecewise_linear(peaked_knots):
    values = spacing_function(peaked_knots, np.array([0.0, 0.25, 0.5, 0.75, 1.0]))
    np.testing.assert_allclose(values, [0.2, 0.6, 1.0, 0.6, 0.2])


def test_local_spacing_follows_target(peaked_knots, mixed_knots):
    for knots in (peaked_knots, mixed_knots):
        si = compute(knots, 201)
        residual = spacing_residual(knots, si)
        assert residual.size == 200
        np.testing.assert_allclose(residual, 1.0, atol=0.02)
