r"""节点参数坐标 \(T_j\) 的闭式积分。

对分段线性的间距函数 \(F(s)\)，逐段积分 \(1/F(s)\)：

.. math::

    \Delta T_j = \frac{\Delta S}{\Delta F} \ln\frac{F_{j+1}}{F_j},
    \qquad |\varepsilon| = \left|\frac{\Delta F}{F_j}\right| \ge 10^{-3},

当 \(|\varepsilon| < 10^{-3}\) 时上式为可去的 0/0 奇点，改用渐近展开

.. math::

    \Delta T_j = \frac{\Delta S}{F_j}\,\frac{1 + \varepsilon/6}{1 + 2\varepsilon/3}.
"""
from __future__ import annotations

from typing import Any, Sequence, Tuple, Union

import numpy as np

from ssp_spacing.errors import NonPositiveSpacing
from ssp_spacing.knots.knot import Knot, KnotSequence

#: 闭式公式与渐近展开之间的切换阈值。
EPS_THRESHOLD = 1e-3

ArrayLike = Union[float, np.ndarray]


def knot_arrays(knots: Union[KnotSequence, Sequence[Any]]) -> Tuple[np.ndarray, np.ndarray]:
    """返回节点的 ``(S, F)`` 数组；非 ``KnotSequence`` 输入只做逐点类型转换。"""
    if isinstance(knots, KnotSequence):
        return np.asarray(knots.S, dtype=float), np.asarray(knots.F, dtype=float)
    items = [Knot.coerce(item) for item in knots]
    S = np.array([knot.S for knot in items], dtype=float)
    F = np.array([knot.F for knot in items], dtype=float)
    return S, F


def log_segment_length(dS: ArrayLike, Fj: ArrayLike, Fjp1: ArrayLike) -> ArrayLike:
    """良态分支：``(dS / dF) * ln(F_{j+1} / F_j)``。"""
    return (dS / (Fjp1 - Fj)) * np.log(Fjp1 / Fj)


def asymptotic_segment_length(dS: ArrayLike, Fj: ArrayLike, eps: ArrayLike) -> ArrayLike:
    """近常间距分支：``(dS / F_j) * (1 + eps/6) / (1 + 2 eps/3)``。"""
    return (dS / Fj) * (1.0 + eps / 6.0) / (1.0 + (2.0 * eps) / 3.0)


def compute_tj(knots: Union[KnotSequence, Sequence[Any]]) -> np.ndarray:
    """计算每个节点处未缩放的参数坐标。

    Parameters
    ----------
    knots : KnotSequence or Sequence
        按 ``S`` 升序排列的节点。

    Returns
    -------
    np.ndarray
        长度与节点数相同，``T[0] = 0``，单调不减。

    Raises
    ------
    NonPositiveSpacing
        存在 ``F <= 0`` 的节点。
    """

    S, F = knot_arrays(knots)
    bad = np.flatnonzero(F <= 0.0)
    if bad.size:
        raise NonPositiveSpacing(
            f"第 {int(bad[0])} 个节点的间距 F={F[bad[0]]!r} 必须为正，无法积分 1/F。")

    dS = np.diff(S)
    Fj = F[:-1]
    Fjp1 = F[1:]
    eps = (Fjp1 - Fj) / Fj

    well = np.abs(eps) >= EPS_THRESHOLD
    dT = np.empty_like(dS)
    dT[well] = log_segment_length(dS[well], Fj[well], Fjp1[well])
    dT[~well] = asymptotic_segment_length(dS[~well], Fj[~well], eps[~well])

    # 逐段顺序累加，T[0] = 0
    return np.concatenate(([0.0], np.cumsum(dT)))
