r"""节点类型定义：单个节点 \((S, F)\) 与经过校验的节点序列。"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Tuple

import numpy as np

from ssp_spacing.errors import InvalidKnotData, NonPositiveSpacing


def _as_finite_float(value: Any, label: str) -> float:
    if isinstance(value, (str, bytes)):
        raise InvalidKnotData(f"节点分量 {label} 必须为数值，收到字符串 {value!r}。")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidKnotData(f"节点分量 {label} 必须为数值，收到 {value!r}。") from exc
    if not math.isfinite(number):
        raise InvalidKnotData(f"节点分量 {label} 必须为有限值，收到 {number!r}。")
    return number


@dataclass(frozen=True)
class Knot:
    r"""分段线性间距函数的一个控制点。

    Attributes
    ----------
    S : float
        位置，校验后位于 \([0, 1]\)。
    F : float
        该位置处期望的局部间距，越小则点越密。
    """

    S: float
    F: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "S", _as_finite_float(self.S, "S"))
        object.__setattr__(self, "F", _as_finite_float(self.F, "F"))

    @classmethod
    def coerce(cls, obj: Any) -> "Knot":
        """把 ``Knot``、``(S, F)`` 二元组或含 ``"S"``/``"F"`` 键的映射统一转换为 ``Knot``。"""
        if isinstance(obj, Knot):
            return obj
        if isinstance(obj, Mapping):
            try:
                return cls(obj["S"], obj["F"])
            except KeyError as exc:
                raise InvalidKnotData(f"节点映射缺少键 {exc.args[0]!r}。") from exc
        if isinstance(obj, (str, bytes)):
            raise InvalidKnotData(f"无法把字符串 {obj!r} 解释为节点。")
        try:
            S, F = obj
        except (TypeError, ValueError) as exc:
            raise InvalidKnotData(f"节点必须是 (S, F) 二元组，收到 {obj!r}。") from exc
        return cls(S, F)

    def as_pair(self) -> Tuple[float, float]:
        return (self.S, self.F)


@dataclass(frozen=True)
class KnotSequence:
    """不可变的节点序列，构造时检查全部不变量。

    要求至少 2 个节点、``S`` 单调不减、首节点 ``S == 0``、末节点 ``S == 1``，
    且所有 ``F > 0``。不满足时抛出 :class:`InvalidKnotData` 或
    :class:`NonPositiveSpacing`，不做任何修正；修正由
    :func:`ssp_spacing.knots.sanitize_knots` 负责。
    """

    knots: Tuple[Knot, ...]

    def __post_init__(self) -> None:
        knots = tuple(Knot.coerce(item) for item in self.knots)
        object.__setattr__(self, "knots", knots)

        if len(knots) < 2:
            raise InvalidKnotData(f"至少需要 2 个节点，收到 {len(knots)} 个。")
        for index, knot in enumerate(knots):
            if knot.F <= 0.0:
                raise NonPositiveSpacing(
                    f"第 {index} 个节点的间距 F={knot.F!r} 必须为正。")
        for index in range(len(knots) - 1):
            if knots[index + 1].S < knots[index].S:
                raise InvalidKnotData(
                    f"节点位置必须单调不减：S[{index}]={knots[index].S!r} > S[{index + 1}]={knots[index + 1].S!r}。")
        if knots[0].S != 0.0 or knots[-1].S != 1.0:
            raise InvalidKnotData(
                f"首末节点位置必须为 0 与 1，收到 {knots[0].S!r} 与 {knots[-1].S!r}。")

    @classmethod
    def from_pairs(cls, pairs: Iterable[Any]) -> "KnotSequence":
        return cls(tuple(pairs))

    def __len__(self) -> int:
        return len(self.knots)

    def __iter__(self) -> Iterator[Knot]:
        return iter(self.knots)

    def __getitem__(self, index: int) -> Knot:
        return self.knots[index]

    @property
    def S(self) -> np.ndarray:
        values = np.array([knot.S for knot in self.knots], dtype=float)
        values.flags.writeable = False
        return values

    @property
    def F(self) -> np.ndarray:
        values = np.array([knot.F for knot in self.knots], dtype=float)
        values.flags.writeable = False
        return values

    def as_pairs(self) -> list[Tuple[float, float]]:
        return [knot.as_pair() for knot in self.knots]

    def scaled(self, factor: float) -> "KnotSequence":
        """返回所有 ``F`` 乘以 ``factor`` 后的新序列，位置不变。"""
        return KnotSequence(tuple(Knot(knot.S, knot.F * factor) for knot in self.knots))
