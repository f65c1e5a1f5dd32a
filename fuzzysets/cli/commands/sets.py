from typing import Dict, Iterable, Optional, Tuple

from ...fuzzy.core.point import Point
from ...fuzzy.model.discrete import DiscreteFuzzySet


def build_sets(a_pairs: Iterable[Tuple[str, float]], b_pairs: Iterable[Tuple[str, float]],
               auto_clean: bool = False) -> Tuple[DiscreteFuzzySet, DiscreteFuzzySet]:
    """Zbiory A i B; punkty o tej samej nazwie są tym samym obiektem Point."""
    points: Dict[str, Point] = {}

    def point(name: str) -> Point:
        if name not in points:
            try:
                points[name] = Point(float(name))
            except ValueError:
                points[name] = Point(0.0, name=name)
        return points[name]

    a = DiscreteFuzzySet(auto_clean=auto_clean)
    b = DiscreteFuzzySet(auto_clean=auto_clean)
    for name, v in a_pairs:
        a.add(point(name), v)
    for name, v in b_pairs:
        b.add(point(name), v)
    return a, b


def _crisp(points) -> str:
    return "{" + ", ".join(sorted(str(p) for p in points)) + "}"


def apply_op(a: DiscreteFuzzySet, b: DiscreteFuzzySet, op: str, arg: Optional[float] = None) -> str:
    if op == "union":
        return str(a.union(b))
    if op == "intersection":
        return str(a.intersection(b))
    if op == "complement":
        return str(a.complement())
    if op == "product":
        return str(a.product(b))
    if op == "scale":
        return str(a.product(arg))
    if op == "power":
        return str(a.power(arg))
    if op == "equals":
        return str(a.equals_set(b))
    if op == "subset":
        return str(a.is_subset(b))
    if op == "cardinality":
        return f"{a.cardinality():g}"
    if op == "core":
        return _crisp(a.core())
    if op == "support":
        return _crisp(a.support())
    if op == "height":
        h = a.height()
        return "none" if h is None else str(h)
    if op == "clean":
        c = a.copy()
        removed = c.clean()
        return f"{c} (removed {removed})"
    raise ValueError(f"Unknown set operation: {op}")


def cmd_set(args) -> int:
    a, b = build_sets(args.a or [], args.b or [], auto_clean=args.auto_clean)
    print(f"A = {a}")
    print(f"B = {b}")
    for op, arg in args.op:
        label = op if arg is None else f"{op}:{arg:g}"
        print(f"{label}: {apply_op(a, b, op, arg)}")
    return 0
