"""
Budowanie funkcji przynależności z nazwy kształtu i listy parametrów.

  linear x_lower y_lower x_upper y_upper  | linear x_lower x_upper
  tri    x_lower x_middle x_upper [y_lower y_middle]
  trap   x_lower x_middle1 x_middle2 x_upper [y_lower y_middle [y_upper]]
  gauss  width center
  s      x_lower y_lower x_upper y_upper  | s x_lower x_upper
  z      x_lower y_lower x_upper y_upper  | z x_lower x_upper

Shape names are case-insensitive; long aliases (triangular, gaussian, ...) accepted.
"""

from __future__ import annotations
import shlex
from typing import Dict, List, Sequence, Tuple
from ..core.mfs import Gaussian, Linear, MembershipFunction, SShaped, Trapezoidal, Triangular, ZShaped
from ..core.types import Float, FuzzyError

_ALIASES: Dict[str, str] = {
    "linear": "linear", "lin": "linear",
    "tri": "tri", "triangle": "tri", "triangular": "tri",
    "trap": "trap", "trapezoid": "trap", "trapezoidal": "trap",
    "gauss": "gauss", "gaussian": "gauss",
    "s": "s", "sshaped": "s", "s-shaped": "s",
    "z": "z", "zshaped": "z", "z-shaped": "z",
}

# dozwolone liczby parametrów
_ARITY: Dict[str, Tuple[int, ...]] = {
    "linear": (2, 4),
    "tri": (3, 5),
    "trap": (4, 6, 7),
    "gauss": (2,),
    "s": (2, 4),
    "z": (2, 4),
}

SHAPES = tuple(_ARITY)


def canonical_shape(shape: str) -> str:
    try:
        return _ALIASES[str(shape).strip().lower()]
    except KeyError:
        raise FuzzyError(f"Unknown MF shape: {shape} (allowed: {', '.join(SHAPES)})") from None


def build_mf(shape: str, params: Sequence[Float]) -> MembershipFunction:
    kind = canonical_shape(shape)
    try:
        p = [float(v) for v in params]
    except (TypeError, ValueError) as e:
        raise FuzzyError(f"{kind}: parameters must be numbers ({e})") from e
    if len(p) not in _ARITY[kind]:
        want = " or ".join(str(n) for n in _ARITY[kind])
        raise FuzzyError(f"{kind}: expected {want} parameters, got {len(p)}")

    if kind == "linear":
        return Linear.between(*p) if len(p) == 2 else Linear(*p)
    if kind == "tri":
        return Triangular(*p)
    if kind == "trap":
        return Trapezoidal(*p)
    if kind == "gauss":
        return Gaussian(*p)
    if kind == "s":
        return SShaped.between(*p) if len(p) == 2 else SShaped(*p)
    return ZShaped.between(*p) if len(p) == 2 else ZShaped(*p)


def parse_mf(text: str) -> MembershipFunction:
    """'tri 0 5 10' -> Triangular(0, 5, 10); '#' zaczyna komentarz."""
    lx = shlex.shlex(text, posix=True)
    lx.whitespace_split = True
    lx.commenters = "#"
    try:
        tokens: List[str] = list(lx)
    except ValueError as e:  # np. niezamknięty cudzysłów
        raise FuzzyError(f"Cannot tokenize MF definition {text!r}: {e}") from e
    if not tokens:
        raise FuzzyError(f"Empty MF definition: {text!r}")
    return build_mf(tokens[0], tokens[1:])
