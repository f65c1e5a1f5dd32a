"""fuzzysets: fuzzy-set primitives, discrete fuzzy set algebra and defuzzification."""

from .fuzzy.core.types import FuzzyError, InvalidShapeError, MembershipOutOfRangeError
from .fuzzy.core.point import Point, WeightedPoint
from .fuzzy.core.mfs import (
    MembershipFunction, Linear, Triangular, Trapezoidal, Gaussian, SShaped, ZShaped,
)
from .fuzzy.core.defuzz import Defuzzification, defuzzify
from .fuzzy.model.discrete import DiscreteFuzzySet
from .fuzzy.model.shapes import build_mf, parse_mf

__version__ = "0.3.0"

__all__ = [
    "FuzzyError", "InvalidShapeError", "MembershipOutOfRangeError",
    "Point", "WeightedPoint",
    "MembershipFunction", "Linear", "Triangular", "Trapezoidal", "Gaussian", "SShaped", "ZShaped",
    "Defuzzification", "defuzzify",
    "DiscreteFuzzySet",
    "build_mf", "parse_mf",
]
