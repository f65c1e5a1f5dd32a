from ...fuzzy.core.mfs import MembershipFunction
from ...fuzzy.model.shapes import build_mf


def describe_mf(name: str, mf: MembershipFunction, at=()) -> None:
    lo, hi = mf.support()
    print(f"{name}: {mf!r}")
    print(f"  support=[{lo:g}, {hi:g}] area={mf.area():.6g} "
          f"weighted_mean={mf.weighted_mean():.6g} max_at={mf.max_membership_at():.6g}")
    for x in at:
        print(f"  μ({x:g}) = {mf.mu(x):.6g}")


def cmd_eval(args) -> int:
    mf = build_mf(args.shape, args.params)
    describe_mf(args.shape, mf, args.at or ())
    return 0
