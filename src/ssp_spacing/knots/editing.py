"""节点的增删改，全部返回新的序列而不修改输入。"""
from __future__ import annotations

from .knot import Knot, KnotSequence
from .sanitize import sanitize_knots

#: 新节点与已有节点之间的最小位置间隔。
MIN_KNOT_GAP = 0.02


def add_knot(knots: KnotSequence, S: float, F: float, *, min_gap: float = MIN_KNOT_GAP) -> KnotSequence:
    """在位置 ``S`` 插入内部节点。

    ``S`` 不在开区间 ``(0, 1)`` 内，或与已有节点距离小于 ``min_gap`` 时，
    原样返回 ``knots``。
    """
    new_knot = Knot(S, F)
    if not 0.0 < new_knot.S < 1.0:
        return knots
    if any(abs(knot.S - new_knot.S) < min_gap for knot in knots):
        return knots
    return sanitize_knots([*knots, new_knot])


def remove_knot(knots: KnotSequence, index: int) -> KnotSequence:
    """删除第 ``index`` 个内部节点；端点、越界索引或仅剩两个节点时不做改动。"""
    if len(knots) <= 2:
        return knots
    if index <= 0 or index >= len(knots) - 1:
        return knots
    return KnotSequence(tuple(knot for i, knot in enumerate(knots) if i != index))


def update_knot(knots: KnotSequence, index: int, S: float, F: float) -> KnotSequence:
    """替换第 ``index`` 个节点后重新规范化，端点位置仍被固定为 0 和 1。"""
    items = list(knots)
    items[index] = Knot(S, F)
    return sanitize_knots(items)
