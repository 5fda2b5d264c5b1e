"""节点序列的规范化：排序、端点固定与间距下限。"""
from __future__ import annotations

from typing import Any, Sequence

from .knot import Knot, KnotSequence

#: 间距 F 的下限，保证积分阶段既不除零也不对非正数取对数。
MIN_SPACING = 0.01


def default_knots() -> KnotSequence:
    """返回默认的两节点均匀间距配置 ``[(0, 1), (1, 1)]``。"""
    return KnotSequence((Knot(0.0, 1.0), Knot(1.0, 1.0)))


def sanitize_knots(candidates: Sequence[Any]) -> KnotSequence:
    """把调用方给出的候选节点规范化为合法的 :class:`KnotSequence`。

    Parameters
    ----------
    candidates : Sequence
        节点列表，元素可以是 ``Knot``、``(S, F)`` 或 ``{"S": ..., "F": ...}``，
        允许无序、允许越界的 ``S``。

    Returns
    -------
    KnotSequence
        少于 2 个节点时返回 :func:`default_knots`；否则按 ``S`` 稳定排序，
        内部位置截断到 ``[0, 1]``，首末位置强制为 0 和 1，
        所有 ``F`` 不低于 :data:`MIN_SPACING`。

    Raises
    ------
    InvalidKnotData
        某个节点分量不是有限数值。
    """

    knots = [Knot.coerce(item) for item in candidates]
    if len(knots) < 2:
        return default_knots()

    ordered = sorted(knots, key=lambda knot: knot.S)
    last = len(ordered) - 1

    normalized = []
    for index, knot in enumerate(ordered):
        if index == 0:
            S = 0.0
        elif index == last:
            S = 1.0
        else:
            S = min(max(knot.S, 0.0), 1.0)
        normalized.append(Knot(S, max(MIN_SPACING, knot.F)))

    return KnotSequence(tuple(normalized))
