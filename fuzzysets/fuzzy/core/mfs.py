from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple
from .point import Point, WeightedPoint
from .types import (Float, FuzzyError, InvalidShapeError, MembershipOutOfRangeError,
                    check_membership, out_of_range)

log = logging.getLogger(__name__)

_SQRT_2PI = math.sqrt(2.0 * math.pi)


def _clamp01(x: Float) -> Float:
    # tylko szum zmiennoprzecinkowy na brzegach; parametry są już zwalidowane
    if x <= 0.0:
        return 0.0
    elif x >= 1.0:
        return 1.0
    else:
        return x


def _finite(*xs: Float) -> bool:
    # odrzuca NaN i ±inf
    return all(math.isfinite(x) for x in xs)


class MembershipFunction:
    """
    Ciągła funkcja przynależności, traktowana jednocześnie jako zbiór rozmyty.

    Podklasy implementują mu / area / weighted_mean / max_membership_at / support.
    Shift operations return a new, re-validated instance.
    """
    # nazwy pól przesuwanych przez shift_up/down i shift_left/right
    _Y_FIELDS: Tuple[str, ...] = ()
    _X_FIELDS: Tuple[str, ...] = ()

    def mu(self, x: Float) -> Float:
        raise NotImplementedError

    def area(self) -> Float:
        raise NotImplementedError

    def weighted_mean(self) -> Float:
        raise NotImplementedError

    def max_membership_at(self) -> Float:
        raise NotImplementedError

    def support(self) -> tuple[Float, Float]:
        raise NotImplementedError

    def mu_of(self, point: Point) -> Float:
        return self.mu(point.coordinate)

    def weighted_point(self, point: Point) -> Optional[WeightedPoint]:
        value = self.mu_of(point)
        try:
            return WeightedPoint(point, value)
        except MembershipOutOfRangeError:
            log.error("%r produced membership %r at %s", self, value, point)
            return None

    # ---------- przesunięcia ----------

    def shift_up(self, by: Float) -> MembershipFunction:
        return self._shift_y(by)

    def shift_down(self, by: Float) -> MembershipFunction:
        return self._shift_y(-by)

    def shift_right(self, by: Float) -> MembershipFunction:
        return replace(self, **{n: getattr(self, n) + by for n in self._X_FIELDS})

    def shift_left(self, by: Float) -> MembershipFunction:
        return self.shift_right(-by)

    def _shift_y(self, by: Float) -> MembershipFunction:
        if not self._Y_FIELDS:
            raise FuzzyError(f"{type(self).__name__} has no vertical parameters")
        shifted = {n: getattr(self, n) + by for n in self._Y_FIELDS}
        for value in shifted.values():
            check_membership(value)
        return replace(self, **shifted)


@dataclass(frozen=True)
class Linear(MembershipFunction):
    x_lower: Float; y_lower: Float; x_upper: Float; y_upper: Float

    _Y_FIELDS = ("y_lower", "y_upper")
    _X_FIELDS = ("x_lower", "x_upper")

    def __post_init__(self):
        if not _finite(self.x_lower, self.x_upper):
            raise InvalidShapeError("Linear", "Unknown")
        if not self.x_lower < self.x_upper:
            raise InvalidShapeError("Linear", "Point")
        if out_of_range(self.y_lower) or out_of_range(self.y_upper):
            raise MembershipOutOfRangeError(msg=f"Linear: y values must lie in [0,1] "
                                                f"(got {self.y_lower}, {self.y_upper})")

    @classmethod
    def between(cls, x_lower: Float, x_upper: Float, y_upper: Float = 1.0) -> Linear:
        return cls(x_lower, 0.0, x_upper, y_upper)

    def slope(self) -> Float:
        return (self.y_upper - self.y_lower) / (self.x_upper - self.x_lower)

    def intercept(self) -> Float:
        return self.y_upper - self.slope() * self.x_upper

    def mu(self, x: Float) -> Float:
        if x < self.x_lower or x > self.x_upper:
            return 0.0
        t = (x - self.x_lower) / (self.x_upper - self.x_lower)
        return _clamp01(self.y_lower + (self.y_upper - self.y_lower) * t)

    def area(self) -> Float:
        # trapez pod odcinkiem; dla y_lower == 0 to 0.5*dx*dy
        return 0.5 * (self.x_upper - self.x_lower) * (self.y_lower + self.y_upper)

    def weighted_mean(self) -> Float:
        # ∫x(mx+c)dx / ∫(mx+c)dx na [x0, x1]
        x0, x1 = self.x_lower, self.x_upper
        m, c = self.slope(), self.intercept()
        s = x0 + x1
        den = m * s + 2.0 * c
        if den == 0.0:
            return s / 2.0
        return ((2.0 / 3.0) * m * (s * s - x0 * x1) + c * s) / den

    def max_membership_at(self) -> Float:
        if self.y_lower > self.y_upper:
            return self.x_lower
        if self.y_upper > self.y_lower:
            return self.x_upper
        return (self.x_lower + self.x_upper) / 2.0

    def support(self) -> tuple[Float, Float]:
        return (self.x_lower, self.x_upper)


def _area_weighted(pieces) -> Optional[Float]:
    """Średnia ważona polem: pieces = [(area, mean), ...]; None gdy pole = 0."""
    total = sum(a for a, _ in pieces)
    if total <= 0.0:
        return None
    return sum(a * x for a, x in pieces) / total


@dataclass(frozen=True)
class Triangular(MembershipFunction):
    """Two Linear segments meeting at (x_middle, y_middle); y_lower at both ends."""
    x_lower: Float; x_middle: Float; x_upper: Float
    y_lower: Float = 0.0
    y_middle: Float = 1.0
    left: Linear = field(init=False, repr=False, compare=False)
    right: Linear = field(init=False, repr=False, compare=False)

    _Y_FIELDS = ("y_lower", "y_middle")
    _X_FIELDS = ("x_lower", "x_middle", "x_upper")

    def __post_init__(self):
        if not (_finite(self.x_lower, self.x_middle, self.x_upper)
                and self.x_lower < self.x_middle < self.x_upper):
            raise InvalidShapeError("Triangle", "Unknown")
        object.__setattr__(self, "left", Linear(self.x_lower, self.y_lower, self.x_middle, self.y_middle))
        object.__setattr__(self, "right", Linear(self.x_middle, self.y_middle, self.x_upper, self.y_lower))

    def mu(self, x: Float) -> Float:
        if x < self.x_lower or x > self.x_upper:
            return 0.0
        if x < self.x_middle:
            return self.left.mu(x)
        return self.right.mu(x)

    def area(self) -> Float:
        return self.left.area() + self.right.area()

    def weighted_mean(self) -> Float:
        wm = _area_weighted([
            (self.left.area(), self.left.weighted_mean()),
            (self.right.area(), self.right.weighted_mean()),
        ])
        return (self.x_lower + self.x_upper) / 2.0 if wm is None else wm

    def max_membership_at(self) -> Float:
        if self.y_middle > self.y_lower:
            return self.x_middle
        if self.y_middle < self.y_lower:
            return self.x_lower
        return (self.x_lower + self.x_upper) / 2.0

    def support(self) -> tuple[Float, Float]:
        return (self.x_lower, self.x_upper)


@dataclass(frozen=True)
class Trapezoidal(MembershipFunction):
    """
    Lewe ramię (x_lower..x_middle1), plateau na wysokości y_middle, prawe ramię
    (x_middle2..x_upper). y_upper defaults to y_lower.
    """
    x_lower: Float; x_middle1: Float; x_middle2: Float; x_upper: Float
    y_lower: Float = 0.0
    y_middle: Float = 1.0
    y_upper: Optional[Float] = None
    left: Linear = field(init=False, repr=False, compare=False)
    right: Linear = field(init=False, repr=False, compare=False)

    _Y_FIELDS = ("y_lower", "y_middle", "y_upper")
    _X_FIELDS = ("x_lower", "x_middle1", "x_middle2", "x_upper")

    def __post_init__(self):
        if self.y_upper is None:
            object.__setattr__(self, "y_upper", self.y_lower)
        xs = (self.x_lower, self.x_middle1, self.x_middle2, self.x_upper)
        if not _finite(*xs) or not (self.x_lower < self.x_middle1 and self.x_middle2 < self.x_upper):
            raise InvalidShapeError("Trapezoid", "Unknown")
        if not self.x_middle1 < self.x_middle2:
            raise InvalidShapeError("Trapezoid", "Triangle")
        m1 = (self.y_middle - self.y_lower) / (self.x_middle1 - self.x_lower)
        m2 = (self.y_upper - self.y_middle) / (self.x_upper - self.x_middle2)
        if m1 * m2 > 0:
            raise InvalidShapeError("Trapezoid", "Parallelogram")
        object.__setattr__(self, "left", Linear(self.x_lower, self.y_lower, self.x_middle1, self.y_middle))
        object.__setattr__(self, "right", Linear(self.x_middle2, self.y_middle, self.x_upper, self.y_upper))

    def mu(self, x: Float) -> Float:
        if x < self.x_lower or x > self.x_upper:
            return 0.0
        if x <= self.x_middle1:
            return self.left.mu(x)
        if x < self.x_middle2:
            return self.y_middle
        return self.right.mu(x)

    def _plateau_area(self) -> Float:
        return self.y_middle * (self.x_middle2 - self.x_middle1)

    def area(self) -> Float:
        return self.left.area() + self.right.area() + self._plateau_area()

    def weighted_mean(self) -> Float:
        wm = _area_weighted([
            (self.left.area(), self.left.weighted_mean()),
            (self.right.area(), self.right.weighted_mean()),
            (self._plateau_area(), (self.x_middle1 + self.x_middle2) / 2.0),
        ])
        return (self.x_lower + self.x_upper) / 2.0 if wm is None else wm

    def max_membership_at(self) -> Float:
        if self.y_middle >= self.y_lower and self.y_middle >= self.y_upper:
            return (self.x_middle1 + self.x_middle2) / 2.0
        if self.y_lower >= self.y_upper:
            return self.x_lower
        return self.x_upper

    def support(self) -> tuple[Float, Float]:
        return (self.x_lower, self.x_upper)


@dataclass(frozen=True)
class Gaussian(MembershipFunction):
    width: Float; center: Float

    _X_FIELDS = ("center",)

    def __post_init__(self):
        if not (_finite(self.width, self.center) and self.width > 0):
            raise InvalidShapeError("Gaussian", "Unknown")

    def mu(self, x: Float) -> Float:
        d = x - self.center
        return math.exp(-(d * d) / (2.0 * self.width * self.width))

    def area(self) -> Float:
        return _SQRT_2PI * self.width

    def weighted_mean(self) -> Float:
        return self.center

    def max_membership_at(self) -> Float:
        return self.center

    def support(self) -> tuple[Float, Float]:
        s = 4.0 * self.width
        return (self.center - s, self.center + s)


@dataclass(frozen=True)
class SShaped(MembershipFunction):
    """
    y_lower poniżej x_lower, kwadratowy wzrost do y_upper w x_upper, potem płasko.

    Area and weighted mean are taken over the transition [x_lower, x_upper].
    """
    x_lower: Float; y_lower: Float; x_upper: Float; y_upper: Float

    _Y_FIELDS = ("y_lower", "y_upper")
    _X_FIELDS = ("x_lower", "x_upper")
    _SHAPE = "S shape"

    def __post_init__(self):
        if not (_finite(self.x_lower, self.x_upper) and self.x_lower < self.x_upper):
            raise InvalidShapeError(self._SHAPE, "Unknown")
        if out_of_range(self.y_lower) or out_of_range(self.y_upper):
            raise MembershipOutOfRangeError(msg=f"{self._SHAPE}: y values must lie in [0,1] "
                                                f"(got {self.y_lower}, {self.y_upper})")

    @classmethod
    def between(cls, x_lower: Float, x_upper: Float):
        return cls(x_lower, 0.0, x_upper, 1.0)

    def factor(self) -> Float:
        return 2.0 * (self.y_upper - self.y_lower)

    def mu(self, x: Float) -> Float:
        a, b = self.x_lower, self.x_upper
        if x <= a:
            return self.y_lower
        if x >= b:
            return self.y_upper
        if x <= (a + b) / 2.0:
            t = (x - a) / (b - a)
            return _clamp01(self.y_lower + self.factor() * t * t)
        t = (b - x) / (b - a)
        return _clamp01(self.y_upper - self.factor() * t * t)

    def area(self) -> Float:
        return (self.x_upper - self.x_lower) * (self.y_lower + self.y_upper) / 2.0

    def weighted_mean(self) -> Float:
        # (y0(3a+b) + y1(3b+a) - k(b-a)/12) / 4(y0+y1)
        y0, y1 = self.y_lower, self.y_upper
        a, b, k = self.x_lower, self.x_upper, self.factor()
        if y0 + y1 == 0.0:
            return (a + b) / 2.0
        return (y0 * (3.0 * a + b) + y1 * (3.0 * b + a) - k * (b - a) / 12.0) / (4.0 * (y0 + y1))

    def max_membership_at(self) -> Float:
        if self.y_upper > self.y_lower:
            return self.x_upper
        if self.y_upper < self.y_lower:
            return self.x_lower
        return (self.x_lower + self.x_upper) / 2.0

    def support(self) -> tuple[Float, Float]:
        return (self.x_lower, self.x_upper)


@dataclass(frozen=True)
class ZShaped(MembershipFunction):
    """Lustrzane odbicie SShaped: y_upper for x <= x_lower, y_lower for x >= x_upper."""
    x_lower: Float; y_lower: Float; x_upper: Float; y_upper: Float
    mirror: SShaped = field(init=False, repr=False, compare=False)

    _Y_FIELDS = ("y_lower", "y_upper")
    _X_FIELDS = ("x_lower", "x_upper")

    def __post_init__(self):
        try:
            s = SShaped(self.x_lower, self.y_lower, self.x_upper, self.y_upper)
        except InvalidShapeError as e:
            raise InvalidShapeError("Z shape", e.shape_found) from None
        object.__setattr__(self, "mirror", s)

    @classmethod
    def between(cls, x_lower: Float, x_upper: Float):
        return cls(x_lower, 0.0, x_upper, 1.0)

    def _reflect(self, x: Float) -> Float:
        return self.x_lower + self.x_upper - x

    def mu(self, x: Float) -> Float:
        return self.mirror.mu(self._reflect(x))

    def area(self) -> Float:
        return self.mirror.area()

    def weighted_mean(self) -> Float:
        return self._reflect(self.mirror.weighted_mean())

    def max_membership_at(self) -> Float:
        return self._reflect(self.mirror.max_membership_at())

    def support(self) -> tuple[Float, Float]:
        return (self.x_lower, self.x_upper)
