import argparse
import logging

from ...config import RunConfig, setup_logging
from ...fuzzy.core import defuzz
from ...fuzzy.core.types import FuzzyError
from ..argtypes import parse_op
from .evaluate import describe_mf
from .sets import apply_op, build_sets

log = logging.getLogger(__name__)


def cmd_run(args) -> int:
    cfg = RunConfig.load(args.config)
    setup_logging(cfg.log_level)
    log.debug("loaded %s: %d MF(s)", args.config, len(cfg.mfs))

    if cfg.mfs:
        print("[run] mfs")
        for name, mf in cfg.mfs.items():
            describe_mf(name, mf)

    if cfg.defuzz is not None:
        print("[run] defuzz")
        names = cfg.defuzz.mfs or list(cfg.mfs)
        value = defuzz.defuzzify(cfg.defuzz.method, *(cfg.mfs[n] for n in names))
        print(f"  {defuzz.Defuzzification.parse(cfg.defuzz.method).value}({', '.join(names)}) = {value:.6g}")

    if cfg.sets is not None:
        print("[run] sets")
        a, b = build_sets(cfg.sets.a.items(), cfg.sets.b.items(), auto_clean=cfg.sets.auto_clean)
        print(f"  A = {a}")
        print(f"  B = {b}")
        for raw in cfg.sets.ops:
            try:
                op, arg = parse_op(raw)
            except argparse.ArgumentTypeError as e:
                raise FuzzyError(f"sets.ops: {e}") from e
            print(f"  {raw}: {apply_op(a, b, op, arg)}")
    return 0
