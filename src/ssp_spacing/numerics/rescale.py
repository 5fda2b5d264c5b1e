"""把参数总长度归一化为 1 的缩放步骤。"""
from __future__ import annotations

from typing import Any, Sequence, Tuple, Union

import numpy as np

from ssp_spacing.errors import DegenerateScale
from ssp_spacing.knots.knot import KnotSequence


def rescale(knots: Union[KnotSequence, Sequence[Any]], T: Sequence[float]) -> Tuple[KnotSequence, np.ndarray]:
    """按 ``TN = T[-1]`` 缩放：``F_j <- F_j * TN``，``T_j <- T_j / TN``。

    缩放只改变间距函数的绝对量级，不改变其形状；缩放后 ``T[0] = 0``、
    ``T[-1] = 1``。

    Raises
    ------
    DegenerateScale
        ``T`` 与节点数不一致、含非有限值、不单调，或 ``TN <= 0``。
    """

    if not isinstance(knots, KnotSequence):
        knots = KnotSequence(tuple(knots))
    T = np.asarray(T, dtype=float)

    if T.ndim != 1 or T.size != len(knots):
        raise DegenerateScale(
            f"参数坐标长度 {T.size} 与节点数 {len(knots)} 不一致。")
    if not np.all(np.isfinite(T)):
        raise DegenerateScale("参数坐标中出现非有限值。")
    if np.any(np.diff(T) < 0.0):
        raise DegenerateScale("参数坐标必须单调不减。")

    TN = float(T[-1])
    if not TN > 0.0:
        raise DegenerateScale(f"参数总长度 TN={TN!r} 必须为正。")

    return knots.scaled(TN), T / TN
