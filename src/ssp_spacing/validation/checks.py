"""输出点序列的结构性检查。"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np


@dataclass
class DistributionReport:
    """记录一次检查的结果，供测试与命令行输出使用。"""

    size: int
    expected_size: Optional[int]
    starts_at_zero: bool
    ends_at_one: bool
    monotone: bool
    min_gap: float
    max_gap: float

    @property
    def ok(self) -> bool:
        size_ok = self.expected_size is None or self.size == self.expected_size
        return size_ok and self.starts_at_zero and self.ends_at_one and self.monotone


def check_distribution(si: Sequence[float], n: Optional[int] = None) -> DistributionReport:
    """检查长度、端点 ``si[0] = 0``、``si[-1] = 1`` 以及单调不减性。"""
    values = np.asarray(si, dtype=float)
    if values.ndim != 1 or values.size < 2:
        raise ValueError("输出点序列至少需要 2 个元素。")

    gaps = np.diff(values)
    return DistributionReport(
        size=int(values.size),
        expected_size=n,
        starts_at_zero=bool(values[0] == 0.0),
        ends_at_one=bool(values[-1] == 1.0),
        monotone=bool(np.all(gaps >= 0.0)),
        min_gap=float(gaps.min()),
        max_gap=float(gaps.max()),
    )
