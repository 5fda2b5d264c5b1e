"""绘制间距函数与输出点分布的静态图。"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np

from ssp_spacing.knots.knot import KnotSequence
from ssp_spacing.numerics.integration import knot_arrays


@dataclass
class SpacingPlotter:
    """负责间距分布的可视化输出。"""

    figsize: tuple[float, float] = (8, 4)

    def plot(self, knots: Union[KnotSequence, Sequence[Any]], si: Iterable[float], *, title: str, output_path: str | None = None):
        """绘制 ``F(s)`` 折线、节点标记以及输出点的刻度线，并可选保存。"""
        S, F = knot_arrays(knots)
        si_arr = np.asarray(tuple(si), dtype=float)

        fig, ax = plt.subplots(figsize=self.figsize)
        ax.plot(S, F, color="C0", lw=1.6, label="F(s)")
        ax.plot(S, F, "o", color="C0", ms=6, label="knots")

        top = float(F.max()) if F.size else 1.0
        ax.vlines(si_arr, 0.0, 0.08 * top, color="C3", lw=1.0,
                  label=f"s_i (n={si_arr.size})")

        ax.set_xlim(0.0, 1.0)
        ax.set_ylim(0.0, 1.15 * top)
        ax.set_xlabel("s")
        ax.set_ylabel("F")
        ax.set_title(title)
        ax.legend(loc="upper right")
        ax.grid(True, linestyle="--", alpha=0.4)

        if output_path:
            fig.savefig(output_path, dpi=300, bbox_inches="tight")
        return fig


def plot_spacing_distribution(knots: Union[KnotSequence, Sequence[Any]], si: Iterable[float], *, title: str, output_path: str | None = None) -> None:
    """便捷函数，内部调用 :class:`SpacingPlotter` 并关闭图像。"""
    plotter = SpacingPlotter()
    fig = plotter.plot(knots, si, title=title, output_path=output_path)
    plt.close(fig)
