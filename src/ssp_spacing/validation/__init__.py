"""数值验证工具。"""

from .checks import DistributionReport, check_distribution
from .reference import reference_parametric_positions, spacing_function, spacing_residual

__all__ = [
    "DistributionReport",
    "check_distribution",
    "reference_parametric_positions",
    "spacing_function",
    "spacing_residual",
]
