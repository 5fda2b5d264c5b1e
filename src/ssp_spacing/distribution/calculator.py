"""串联积分、缩放与反解三个步骤的入口函数。"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Union

import numpy as np

from ssp_spacing.knots.knot import KnotSequence
from ssp_spacing.numerics.integration import compute_tj
from ssp_spacing.numerics.inversion import compute_si, validate_point_count
from ssp_spacing.numerics.rescale import rescale

KnotsLike = Union[KnotSequence, Sequence[Any]]


@dataclass(frozen=True)
class SSPResult:
    """一次计算的全部中间量。

    Attributes
    ----------
    T : np.ndarray
        缩放后的节点参数坐标。
    scaled_knots : KnotSequence
        ``F`` 乘以 ``TN`` 之后的节点。
    si : np.ndarray
        输出点位置。
    """

    T: np.ndarray
    scaled_knots: KnotSequence
    si: np.ndarray


def compute_ssp(knots: KnotsLike, n: int) -> SSPResult:
    """执行完整的间距分布计算。

    输入不做任何修正：节点需已满足 :class:`KnotSequence` 的全部约束，
    否则抛出 :class:`~ssp_spacing.errors.InvalidInput` 的子类。
    """
    if not isinstance(knots, KnotSequence):
        knots = KnotSequence(tuple(knots))
    n = validate_point_count(n)

    T = compute_tj(knots)
    scaled_knots, scaled_T = rescale(knots, T)
    si = compute_si(scaled_knots, scaled_T, n)
    return SSPResult(T=scaled_T, scaled_knots=scaled_knots, si=si)


def compute(knots: KnotsLike, n: int) -> np.ndarray:
    """返回 ``n`` 个位于 ``[0, 1]`` 的输出点，等价于 ``compute_ssp(knots, n).si``。"""
    return compute_ssp(knots, n).si


def uniform_distribution(n: int) -> np.ndarray:
    """均匀分布 ``i / (n - 1)``，调用方在计算失败时的回退结果。"""
    n = validate_point_count(n)
    return np.arange(n, dtype=float) / (n - 1)
