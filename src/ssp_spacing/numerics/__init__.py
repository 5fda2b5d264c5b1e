"""数值核心：参数坐标积分、缩放与反解。"""

from .integration import EPS_THRESHOLD, compute_tj
from .rescale import rescale
from .inversion import compute_si, find_interval

__all__ = [
    "EPS_THRESHOLD",
    "compute_tj",
    "rescale",
    "compute_si",
    "find_interval",
]
