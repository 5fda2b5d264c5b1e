"""Caller-side state: sanitized knots plus a point count, with uniform fallback."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Sequence

import numpy as np

from ssp_spacing.errors import InvalidPointCount, SSPError
from ssp_spacing.knots import KnotSequence, default_knots, sanitize_knots
from ssp_spacing.knots import add_knot as _add_knot
from ssp_spacing.knots import remove_knot as _remove_knot
from ssp_spacing.knots import update_knot as _update_knot

from .calculator import KnotsLike, compute, uniform_distribution

logger = logging.getLogger(__name__)

DEFAULT_POINTS = 25
MIN_POINTS = 2
MAX_POINTS = 200


def clamp_point_count(n: Any) -> int:
    """Clamp an integral point count into ``[MIN_POINTS, MAX_POINTS]``."""
    if isinstance(n, bool) or not isinstance(n, Real) or not float(n).is_integer():
        raise InvalidPointCount(f"point count must be an integer, got {n!r}")
    return int(max(MIN_POINTS, min(MAX_POINTS, int(n))))


def compute_with_fallback(knots: KnotsLike, n: int) -> np.ndarray:
    """Run :func:`compute`, falling back to uniform spacing when it fails.

    Only computation errors are recovered; an invalid ``n`` still raises,
    since no uniform sequence exists for it.
    """
    try:
        return compute(knots, n)
    except SSPError as err:
        logger.warning("spacing computation failed, using uniform points: %s", err)
        return uniform_distribution(n)


@dataclass(frozen=True)
class SSPState:
    """Knots and point count as held by an editor or importer."""

    knots: KnotSequence = field(default_factory=default_knots)
    n: int = DEFAULT_POINTS

    @classmethod
    def create(cls, knots: Optional[Sequence[Any]] = None, n: Optional[int] = None) -> "SSPState":
        return cls(
            knots=default_knots() if knots is None else sanitize_knots(knots),
            n=DEFAULT_POINTS if n is None else clamp_point_count(n),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], base: Optional["SSPState"] = None) -> "SSPState":
        """Import ``{"knots": [{"S": .., "F": ..}, ...], "n": ..}``.

        Entries that are missing or unusable leave the corresponding field of
        ``base`` untouched: knot lists need at least two entries, and ``n``
        must be a non-zero integral number.
        """
        state = base if base is not None else cls()
        knots = data.get("knots")
        if isinstance(knots, Sequence) and not isinstance(knots, (str, bytes)) and len(knots) >= 2:
            state = state.with_knots(knots)
        n = data.get("n")
        if isinstance(n, Real) and not isinstance(n, bool) and n and float(n).is_integer():
            state = state.with_point_count(n)
        return state

    def as_mapping(self) -> Dict[str, Any]:
        return {
            "knots": [{"S": knot.S, "F": knot.F} for knot in self.knots],
            "n": self.n,
        }

    def with_knots(self, knots: Sequence[Any]) -> "SSPState":
        return replace(self, knots=sanitize_knots(knots))

    def with_point_count(self, n: int) -> "SSPState":
        return replace(self, n=clamp_point_count(n))

    def add_knot(self, S: float, F: float) -> "SSPState":
        return replace(self, knots=_add_knot(self.knots, S, F))

    def remove_knot(self, index: int) -> "SSPState":
        return replace(self, knots=_remove_knot(self.knots, index))

    def update_knot(self, index: int, S: float, F: float) -> "SSPState":
        return replace(self, knots=_update_knot(self.knots, index, S, F))

    def reset(self) -> "SSPState":
        return type(self)()

    def distribution(self) -> np.ndarray:
        return compute_with_fallback(self.knots, self.n)
