from typing import List

from ...fuzzy.core import defuzz, norms
from ...fuzzy.core.mfs import MembershipFunction
from ...fuzzy.model.shapes import parse_mf


def _aggregate(mfs: List[MembershipFunction], snorm: str):
    s = norms.snorm(snorm)

    def agg_mu(y: float) -> float:
        acc = 0.0
        for mf in mfs:
            acc = s(acc, mf.mu(y))
        return acc
    return agg_mu


def grid_report(mfs: List[MembershipFunction], n: int, snorm: str = "max") -> dict:
    """centroid / mom / bisector zagregowanej μ(y) na siatce obejmującej wszystkie MF."""
    supports = [mf.support() for mf in mfs]
    ymin = min(a for a, _ in supports)
    ymax = max(b for _, b in supports)
    return defuzz.grid_estimates(_aggregate(mfs, snorm), ymin, ymax, n)


def cmd_defuzz(args) -> int:
    mfs = [parse_mf(text) for text in args.mf]
    methods = list(defuzz.Defuzzification) if args.all else [defuzz.Defuzzification.parse(args.method)]
    for m in methods:
        print(f"{m.value}: {defuzz.defuzzify(m, *mfs):.6g}")
    if args.grid and mfs:
        for k, v in grid_report(mfs, args.grid, args.snorm).items():
            print(f"grid[{args.grid}] {k}: {v:.6g}")
    return 0
