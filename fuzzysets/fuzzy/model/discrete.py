# Dyskretny zbiór rozmyty: Point -> μ ∈ [0,1]

from __future__ import annotations
import logging
import math
from typing import Callable, Dict, Iterator, Optional, Set, Tuple, Union
from ..core import norms
from ..core.mfs import MembershipFunction
from ..core.point import Point, WeightedPoint
from ..core.types import Float, MembershipOutOfRangeError, ONE_TOL, ZERO_TOL, check_membership

log = logging.getLogger(__name__)

PointPredicate = Callable[[Point], bool]


class DiscreteFuzzySet:
    """
    Skończony zbiór rozmyty nad punktami.

    Keys are compared by identity, so two Points with the same coordinate stay
    separate elements. Points never added have membership 0. When auto_clean
    is set, every operation that builds a new set drops near-zero entries
    from the result before returning it.
    """

    def __init__(self, capacity: int = 20, auto_clean: bool = False) -> None:
        # capacity: tylko podpowiedź, dict i tak rośnie sam
        self.capacity = capacity
        self.auto_clean = auto_clean
        self._members: Dict[Point, Float] = {}

    @classmethod
    def from_pairs(cls, pairs, auto_clean: bool = False) -> DiscreteFuzzySet:
        s = cls(auto_clean=auto_clean)
        for point, value in pairs:
            s.add(point, value)
        return s

    # ---------- podstawowe operacje ----------

    def add(self, point: Point, value: Union[Float, MembershipFunction]) -> None:
        """Insert or overwrite; value may be a number or a function evaluated at the point."""
        if isinstance(value, MembershipFunction):
            value = value.mu_of(point)
        self._members[point] = check_membership(value)

    def remove(self, point: Point) -> None:
        self._members.pop(point, None)

    def contains(self, point: Point) -> bool:
        return point in self._members

    def belongs(self, point: Point) -> bool:
        return self._members.get(point, 0.0) > 0.0

    def membership(self, point: Point) -> Float:
        return self._members.get(point, 0.0)

    def clean(self) -> int:
        """Usuń elementy z μ ≈ 0; zwraca liczbę usuniętych."""
        dead = [p for p, m in self._members.items() if m <= ZERO_TOL]
        for p in dead:
            del self._members[p]
        return len(dead)

    def items(self) -> Iterator[Tuple[Point, Float]]:
        return iter(self._members.items())

    def copy(self) -> DiscreteFuzzySet:
        out = self._new(len(self))
        out._members.update(self._members)
        return self._finish(out)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._members)

    def __contains__(self, point: object) -> bool:
        return point in self._members

    # ---------- helpers ----------

    def _new(self, capacity: int) -> DiscreteFuzzySet:
        return DiscreteFuzzySet(capacity=capacity, auto_clean=self.auto_clean)

    def _finish(self, result: DiscreteFuzzySet) -> DiscreteFuzzySet:
        if self.auto_clean:
            result.clean()
        return result

    # ---------- algebra ----------

    def union(self, other: DiscreteFuzzySet, snorm="max") -> DiscreteFuzzySet:
        """Pointwise s-norm (max by default) over the keys of both sets; missing = 0."""
        s = norms.snorm(snorm)
        out = self._new(len(self) + len(other))
        for p in self._members:
            out.add(p, s(self._members[p], other.membership(p)))
        for p in other:
            if p not in out._members:
                out.add(p, s(0.0, other.membership(p)))
        return self._finish(out)

    def intersection(self, other: DiscreteFuzzySet, tnorm="min") -> DiscreteFuzzySet:
        """
        Pointwise t-norm (min by default), restricted to keys present in both sets.

        A point present in only one of the inputs is left out of the result,
        it is not carried over with membership 0.
        """
        t = norms.tnorm(tnorm)
        out = self._new(max(len(self), len(other)))
        for p, m in self._members.items():
            if other.contains(p):
                out.add(p, t(m, other.membership(p)))
        return self._finish(out)

    def complement(self) -> DiscreteFuzzySet:
        out = self._new(len(self))
        for p, m in self._members.items():
            out.add(p, 1.0 - m)
        return self._finish(out)

    def product(self, other: Union[DiscreteFuzzySet, Float]) -> DiscreteFuzzySet:
        """
        Set product: m·n for own points that `other` belongs to.
        Scalar product: k·m for every point, MembershipOutOfRangeError if any leaves [0,1].
        """
        if isinstance(other, DiscreteFuzzySet):
            out = self._new(max(len(self), len(other)))
            for p, m in self._members.items():
                if other.belongs(p):
                    out.add(p, m * other.membership(p))
            return self._finish(out)

        out = self._new(len(self))
        for p, m in self._members.items():
            out.add(p, float(other) * m)
        return self._finish(out)

    def power(self, exponent: Float) -> DiscreteFuzzySet:
        out = self._new(len(self))
        for p, m in self._members.items():
            try:
                value = m ** exponent
            except ZeroDivisionError:
                raise MembershipOutOfRangeError(msg=f"0 ** {exponent} is undefined for {p}") from None
            out.add(p, value)
        return self._finish(out)

    def equals_set(self, other: DiscreteFuzzySet, abs_tol: Float = 0.0) -> bool:
        """A == B gdy A ⊆ B i B ⊆ A (brak klucza = 0)."""
        for p, m in self._members.items():
            if not math.isclose(m, other.membership(p), rel_tol=0.0, abs_tol=abs_tol):
                return False
        for p in other:
            if not math.isclose(other.membership(p), self.membership(p), rel_tol=0.0, abs_tol=abs_tol):
                return False
        return True

    def is_subset(self, other: DiscreteFuzzySet) -> bool:
        return all(m <= other.membership(p) for p, m in self._members.items())

    def cardinality(self) -> Float:
        return sum(self._members.values())

    # ---------- zbiory ostre ----------

    def crisp_all(self) -> Set[Point]:
        return set(self._members)

    def core(self) -> Set[Point]:
        return {p for p, m in self._members.items() if m >= ONE_TOL}

    def support(self) -> Set[Point]:
        return {p for p, m in self._members.items() if m > ZERO_TOL}

    def alpha_cut(self, alpha: Float, strong: bool = False) -> Set[Point]:
        if strong:
            return {p for p, m in self._members.items() if m > alpha}
        return {p for p, m in self._members.items() if m >= alpha}

    def height(self) -> Optional[Point]:
        best: Optional[Point] = None
        best_m = -math.inf
        for p, m in self._members.items():
            if m > best_m:  # przy remisie zostaje wcześniejszy
                best, best_m = p, m
        return best

    def retain_if(self, predicate: PointPredicate) -> DiscreteFuzzySet:
        out = self._new(len(self))
        for p, m in self._members.items():
            if predicate(p):
                out.add(p, m)
        return self._finish(out)

    def crisp_if(self, predicate: PointPredicate) -> Set[Point]:
        return {p for p in self._members if predicate(p)}

    def weighted_points(self) -> Set[WeightedPoint]:
        out: Set[WeightedPoint] = set()
        for p, m in self._members.items():
            try:
                out.add(WeightedPoint(p, m))
            except MembershipOutOfRangeError:
                # nie powinno się zdarzyć: add() pilnuje zakresu
                log.error("Membership value beyond [0,1] present in set for element: %s (%r)", p, m)
        return out

    # ---------- prezentacja ----------

    def __str__(self) -> str:
        return "[ " + ",".join(f"({p},{m})" for p, m in self._members.items()) + " ]"

    def __repr__(self) -> str:
        return f"DiscreteFuzzySet({len(self)} points, auto_clean={self.auto_clean})"
