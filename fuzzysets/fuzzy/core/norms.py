"""Normy trójkątne: t-normy dla przecięcia, s-normy dla sumy zbiorów."""
from typing import Callable, Dict
from .types import Float, FuzzyError

Norm = Callable[[Float, Float], Float]

TNORMS: Dict[str, Norm] = {
    "min": min,
    "prod": lambda a, b: a * b,
    "lukasiewicz": lambda a, b: max(0.0, a + b - 1.0),
}

SNORMS: Dict[str, Norm] = {
    "max": max,
    "prob": lambda a, b: a + b - a * b,
    "bsum": lambda a, b: min(1.0, a + b),
}


def _lookup(table: Dict[str, Norm], kind: str, norm) -> Norm:
    if callable(norm):
        return norm
    if norm not in table:
        raise FuzzyError(f"Unknown {kind}: {norm!r} (allowed: {', '.join(table)})")
    return table[norm]


def tnorm(norm="min") -> Norm:
    return _lookup(TNORMS, "t-norm", norm)


def snorm(norm="max") -> Norm:
    return _lookup(SNORMS, "s-norm", norm)
