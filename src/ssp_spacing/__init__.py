"""按位置指定间距的一维非均匀点分布（spacing vs. position）。"""

from .errors import (
    DegenerateScale,
    InvalidInput,
    InvalidKnotData,
    InvalidPointCount,
    NonPositiveSpacing,
    SSPError,
)
from .knots import Knot, KnotSequence, default_knots, sanitize_knots
from .distribution import SSPResult, SSPState, compute, compute_ssp, compute_with_fallback

__all__ = [
    "knots",
    "numerics",
    "distribution",
    "validation",
    "reporting",
    "SSPError",
    "InvalidInput",
    "InvalidKnotData",
    "InvalidPointCount",
    "NonPositiveSpacing",
    "DegenerateScale",
    "Knot",
    "KnotSequence",
    "default_knots",
    "sanitize_knots",
    "SSPResult",
    "SSPState",
    "compute",
    "compute_ssp",
    "compute_with_fallback",
]
