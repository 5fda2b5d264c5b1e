"""点分布计算入口与调用方状态。"""

from .calculator import SSPResult, compute, compute_ssp, uniform_distribution
from .state import (
    DEFAULT_POINTS,
    MAX_POINTS,
    MIN_POINTS,
    SSPState,
    clamp_point_count,
    compute_with_fallback,
)

__all__ = [
    "SSPResult",
    "compute",
    "compute_ssp",
    "uniform_distribution",
    "DEFAULT_POINTS",
    "MAX_POINTS",
    "MIN_POINTS",
    "SSPState",
    "clamp_point_count",
    "compute_with_fallback",
]
