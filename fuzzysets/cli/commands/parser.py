import argparse
from ..argtypes import (
    parse_kv, parse_op,
    DEFUZZ_CHOICES, LOG_LEVELS,
)
from ...fuzzy.model.shapes import SHAPES
# importy komend:
from .evaluate import cmd_eval
from .defuzz import cmd_defuzz
from .sets import cmd_set
from .run import cmd_run


def build_parser():
    fmt = argparse.ArgumentDefaultsHelpFormatter
    ap = argparse.ArgumentParser(
        prog="fuzzysets",
        description="Fuzzy sets: membership functions, discrete set algebra, defuzzification",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  fuzzysets eval --shape tri --params 0 5 10 --at 2.5 5 7.5\n"
            "  fuzzysets defuzz --method centroid --mf 'tri 0 10 20' --mf 'linear 0 0 10 1'\n"
            "  fuzzysets defuzz --all --grid 401 --mf 'gauss 1 0' --mf 'trap 2 3 5 6'\n"
            "  fuzzysets set --a x=0.2 y=0.7 --b y=0.5 z=1 --op union intersection power:2\n"
            "  fuzzysets run --config demo.yaml\n"
        )
    )
    ap.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    ap.add_argument("-v", "--verbose", action="store_true", help="same as --log-level DEBUG")

    sub = ap.add_subparsers(dest="cmd", required=True)

    # eval
    sp_e = sub.add_parser("eval", help="Evaluate one membership function", formatter_class=fmt)
    sp_e.add_argument("--shape", required=True, type=str.lower,
                      help=f"one of: {', '.join(SHAPES)}")
    sp_e.add_argument("--params", required=True, nargs="+", type=float)
    sp_e.add_argument("--at", nargs="*", type=float, help="points at which to print μ(x)")
    sp_e.set_defaults(func=cmd_eval)

    # defuzz
    sp_d = sub.add_parser("defuzz", help="Defuzzify one or more membership functions", formatter_class=fmt)
    sp_d.add_argument("--mf", action="append", default=[], required=True,
                      help="MF definition, e.g. 'tri 0 5 10' (repeatable)")
    sp_d.add_argument("--method", choices=DEFUZZ_CHOICES, default="centroid")
    sp_d.add_argument("--all", action="store_true", help="print every method")
    sp_d.add_argument("--grid", type=int, default=0,
                      help="also defuzzify the aggregated μ(y) numerically on N grid points")
    sp_d.add_argument("--snorm", default="max", help="aggregation s-norm for --grid")
    sp_d.set_defaults(func=cmd_defuzz)

    # set
    sp_s = sub.add_parser("set", help="Discrete fuzzy set algebra on two sets A and B", formatter_class=fmt)
    sp_s.add_argument("--a", nargs="*", type=parse_kv, help="points of A: name=value ...")
    sp_s.add_argument("--b", nargs="*", type=parse_kv, help="points of B: name=value ...")
    sp_s.add_argument("--op", nargs="+", type=parse_op, default=[],
                      help="operations: union, intersection, complement, product, scale:K, power:N, ...")
    sp_s.add_argument("--auto-clean", action="store_true", help="drop μ≈0 entries from every result")
    sp_s.set_defaults(func=cmd_set)

    # run
    sp_r = sub.add_parser("run", help="Run sections from a JSON/YAML config file", formatter_class=fmt)
    sp_r.add_argument("--config", required=True, help="path to config.json / config.yaml")
    sp_r.set_defaults(func=cmd_run)

    return ap
