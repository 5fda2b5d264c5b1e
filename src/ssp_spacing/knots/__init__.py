"""节点模块：间距函数控制点的类型、规范化与编辑。"""

from .knot import Knot, KnotSequence
from .sanitize import MIN_SPACING, default_knots, sanitize_knots
from .editing import MIN_KNOT_GAP, add_knot, remove_knot, update_knot

__all__ = [
    "Knot",
    "KnotSequence",
    "MIN_SPACING",
    "default_knots",
    "sanitize_knots",
    "MIN_KNOT_GAP",
    "add_knot",
    "remove_knot",
    "update_knot",
]
