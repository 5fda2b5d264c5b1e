r"""由缩放后的参数坐标反解输出点位置 \(s_i\)。

在第 \(j\) 段内 \(F(s) = F_j + B_j (s - S_j)\)，\(B_j = \Delta F / \Delta S\)。
对均匀分布的 \(t_i = i/(n-1)\)，令 \(\varepsilon = B_j (t_i - T_j)\)：

.. math::

    s_i = S_j + F_j \frac{e^{\varepsilon} - 1}{B_j},
    \qquad |B_j| \ge 10^{-3},

否则使用四项截断级数

.. math::

    s_i = S_j + F_j \left(1 + \frac{\varepsilon}{2} + \frac{\varepsilon^2}{6}
    + \frac{\varepsilon^3}{24}\right) (t_i - T_j).
"""
from __future__ import annotations

from numbers import Integral
from typing import Any, Sequence, Union

import numpy as np

from ssp_spacing.errors import DegenerateScale, InvalidKnotData, InvalidPointCount
from ssp_spacing.knots.knot import KnotSequence

from .integration import EPS_THRESHOLD, ArrayLike, knot_arrays


def validate_point_count(n: Any) -> int:
    """检查输出点数为不小于 2 的整数。"""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidPointCount(f"输出点数 n 必须为整数，收到 {n!r}。")
    if n < 2:
        raise InvalidPointCount(f"输出点数 n 至少为 2，收到 {n}。")
    return int(n)


def find_interval(T: Sequence[float], t: ArrayLike) -> Union[int, np.ndarray]:
    """返回满足 ``T[j] < t <= T[j+1]`` 的段号 ``j``。

    ``t <= 0`` 归入第 0 段；找不到满足条件的段（末端舍入误差）时取最后一段。
    ``searchsorted(side="left")`` 给出首个 ``T[k] >= t`` 的位置，与按顺序
    线性扫描的结果一致，包括落在节点上的 ``t``。
    """
    T = np.asarray(T, dtype=float)
    if T.size < 2:
        raise InvalidKnotData("至少需要 2 个参数坐标才能划分区间。")
    j = np.searchsorted(T, t, side="left") - 1
    j = np.clip(j, 0, T.size - 2)
    if np.ndim(j) == 0:
        return int(j)
    return j


def exp_segment_offset(Fj: ArrayLike, Bj: ArrayLike, eps: ArrayLike) -> ArrayLike:
    """良态分支：``F_j * (exp(eps) - 1) / B_j``，用 ``expm1`` 计算。"""
    return Fj * np.expm1(eps) / Bj


def series_segment_offset(Fj: ArrayLike, eps: ArrayLike, dt: ArrayLike) -> ArrayLike:
    """近常间距分支：``F_j * (1 + eps/2 + eps^2/6 + eps^3/24) * dt``。"""
    return Fj * (1.0 + eps / 2.0 + eps ** 2 / 6.0 + eps ** 3 / 24.0) * dt


def compute_si(knots: Union[KnotSequence, Sequence[Any]], T: Sequence[float], n: int) -> np.ndarray:
    """计算 ``n`` 个输出点。

    Parameters
    ----------
    knots : KnotSequence or Sequence
        缩放后的节点（``F`` 已乘以 ``TN``）。
    T : Sequence[float]
        缩放后的参数坐标，``T[0] = 0``、``T[-1] = 1``。
    n : int
        输出点数。

    Returns
    -------
    np.ndarray
        长度为 ``n``，首末值直接赋为 0 与 1 以消除舍入误差。
    """

    n = validate_point_count(n)
    S, F = knot_arrays(knots)
    T = np.asarray(T, dtype=float)
    if T.size != S.size:
        raise DegenerateScale(
            f"参数坐标长度 {T.size} 与节点数 {S.size} 不一致。")

    t = np.arange(n, dtype=float) / (n - 1)
    j = find_interval(T, t)

    Sj = S[j]
    Fj = F[j]
    Tj = T[j]
    dt = t - Tj
    with np.errstate(divide="ignore", invalid="ignore"):
        Bj = (F[j + 1] - Fj) / (S[j + 1] - Sj)
    eps = Bj * dt

    well = np.abs(Bj) >= EPS_THRESHOLD
    offset = np.empty_like(t)
    offset[well] = exp_segment_offset(Fj[well], Bj[well], eps[well])
    offset[~well] = series_segment_offset(Fj[~well], eps[~well], dt[~well])

    si = Sj + offset
    si[0] = 0.0
    si[-1] = 1.0
    return si
