"""根据命令行给出的节点计算非均匀点分布，并可选输出图像。"""
from __future__ import annotations

import argparse
from pathlib import Path

from ssp_spacing.distribution import DEFAULT_POINTS, SSPState
from ssp_spacing.errors import InvalidInput
from ssp_spacing.reporting import plot_spacing_distribution
from ssp_spacing.validation import check_distribution


def parse_knot(text: str) -> tuple[float, float]:
    try:
        s_text, f_text = text.split(":")
        return float(s_text), float(f_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"knot must look like S:F, got {text!r}") from exc


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Distribute points on [0, 1] from a spacing-vs-position function.")
    parser.add_argument("--knot", dest="knots", type=parse_knot, action="append", default=None,
                        help="Knot as S:F (repeatable). Defaults to uniform spacing 0:1 1:1.")
    parser.add_argument("-n", "--points", type=int, default=DEFAULT_POINTS,
                        help="Number of output points, clamped to [2, 200].")
    parser.add_argument("--precision", type=int, default=6,
                        help="Digits printed after the decimal point.")
    parser.add_argument("--plot", type=Path, default=None,
                        help="Optional PNG path for a plot of F(s) and the points.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    try:
        state = SSPState.create(knots=args.knots, n=args.points)
    except InvalidInput as err:
        raise SystemExit(f"invalid input: {err}") from err

    print("Knots (S, F):")
    for knot in state.knots:
        print(f"  {knot.S:.4f}  {knot.F:.4f}")

    si = state.distribution()
    report = check_distribution(si, state.n)
    print(f"n = {state.n}, min gap = {report.min_gap:.3e}, max gap = {report.max_gap:.3e}")
    for value in si:
        print(f"{value:.{args.precision}f}")

    if args.plot is not None:
        args.plot.parent.mkdir(parents=True, exist_ok=True)
        plot_spacing_distribution(
            state.knots, si, title=f"SSP distribution (n={state.n})", output_path=str(args.plot))
        print(f"图像已保存至 {args.plot}")


if __name__ == "__main__":
    main()
