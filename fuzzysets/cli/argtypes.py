import argparse

from ..fuzzy.core.defuzz import Defuzzification

DEFUZZ_CHOICES = [m.value for m in Defuzzification]
SET_OPS = ["union", "intersection", "complement", "product", "scale", "power",
           "equals", "subset", "cardinality", "core", "support", "height", "clean"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_kv(s: str):
    """'low=0.3' -> ('low', 0.3)."""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"Invalid element: '{s}' (expected 'name=value').")
    k, v = (t.strip() for t in s.split("=", 1))
    if not k:
        raise argparse.ArgumentTypeError(f"Empty name in: '{s}'.")
    try:
        return k, float(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: '{v}' in '{s}'.") from None


def parse_op(s: str):
    """'power:2' -> ('power', 2.0); 'union' -> ('union', None)."""
    name, _, arg = s.partition(":")
    name = name.strip().lower()
    if name not in SET_OPS:
        raise argparse.ArgumentTypeError(f"Unknown operation '{name}' (allowed: {', '.join(SET_OPS)}).")
    if name in ("scale", "power"):
        if not arg:
            raise argparse.ArgumentTypeError(f"'{name}' needs an argument, e.g. {name}:2")
        try:
            return name, float(arg)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Not a number: '{arg}' in '{s}'.") from None
    if arg:
        raise argparse.ArgumentTypeError(f"'{name}' takes no argument.")
    return name, None
