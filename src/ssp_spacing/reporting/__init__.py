"""结果可视化。"""

from .plotting import SpacingPlotter, plot_spacing_distribution

__all__ = ["SpacingPlotter", "plot_spacing_distribution"]
