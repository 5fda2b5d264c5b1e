from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from ssp_spacing.knots import KnotSequence, sanitize_knots


@pytest.fixture
def peaked_knots() -> KnotSequence:
    """Fine spacing at both ends, coarse in the middle."""
    return sanitize_knots([(0.0, 0.2), (0.5, 1.0), (1.0, 0.2)])


@pytest.fixture
def mixed_knots() -> KnotSequence:
    return sanitize_knots([(0.0, 0.05), (0.3, 0.5), (0.6, 0.50025), (1.0, 2.0)])
