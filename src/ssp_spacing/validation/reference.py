r"""独立的数值参照：用自适应求积复核闭式积分，并度量实际间距与目标间距的偏差。"""
from __future__ import annotations

from typing import Any, Sequence, Union

import numpy as np
from scipy.integrate import quad

from ssp_spacing.knots.knot import KnotSequence
from ssp_spacing.numerics.integration import compute_tj, knot_arrays
from ssp_spacing.numerics.rescale import rescale

KnotsLike = Union[KnotSequence, Sequence[Any]]


def spacing_function(knots: KnotsLike, s: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """分段线性间距函数 ``F(s)``。"""
    S, F = knot_arrays(knots)
    return np.interp(s, S, F)


def reference_parametric_positions(knots: KnotsLike) -> np.ndarray:
    r"""用 ``scipy.integrate.quad`` 逐段计算 \(\int 1/F(s)\,ds\)，与 :func:`compute_tj` 对照。"""
    S, F = knot_arrays(knots)
    T = np.zeros(S.size, dtype=float)
    for j in range(S.size - 1):
        dS = S[j + 1] - S[j]
        if dS == 0.0:
            T[j + 1] = T[j]
            continue
        slope = (F[j + 1] - F[j]) / dS
        value, _ = quad(lambda s, j=j, slope=slope: 1.0 / (F[j] + slope * (s - S[j])),
                        S[j], S[j + 1], epsabs=1e-14, epsrel=1e-12)
        T[j + 1] = T[j] + value
    return T


def spacing_residual(knots: KnotsLike, si: Sequence[float]) -> np.ndarray:
    """返回每个间隔的实际宽度与目标宽度之比。

    目标宽度取缩放后间距函数在间隔中点处的值乘以 ``1/(n-1)``；
    比值接近 1 说明局部间距与 ``F(s)`` 的形状一致。
    """
    if not isinstance(knots, KnotSequence):
        knots = KnotSequence(tuple(knots))
    si = np.asarray(si, dtype=float)
    scaled_knots, _ = rescale(knots, compute_tj(knots))

    gaps = np.diff(si)
    midpoints = 0.5 * (si[:-1] + si[1:])
    target = spacing_function(scaled_knots, midpoints) / (si.size - 1)
    return gaps / target
