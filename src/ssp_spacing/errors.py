"""间距分布计算中使用的异常类型。"""
from __future__ import annotations


class SSPError(ValueError):
    """所有间距分布异常的基类。"""


class InvalidInput(SSPError):
    """调用方输入不合法。"""


class InvalidKnotData(InvalidInput):
    """节点数量不足、取值非数值或节点序列不满足单调/端点约束。"""


class InvalidPointCount(InvalidInput):
    """输出点数 n 小于 2 或不是整数。"""


class NonPositiveSpacing(InvalidInput):
    """间距 F 非正，校验之后出现即视为内部不变量被破坏。"""


class DegenerateScale(SSPError):
    """积分总长度 TN 非正、非有限，或参数坐标不单调。"""


__all__ = [
    "SSPError",
    "InvalidInput",
    "InvalidKnotData",
    "InvalidPointCount",
    "NonPositiveSpacing",
    "DegenerateScale",
]
