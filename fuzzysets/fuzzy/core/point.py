from __future__ import annotations
from typing import Optional
from .types import Float, check_membership


class Point:
    """
    Element uniwersum: współrzędna + nazwa wyświetlana.

    Equality is identity: two points with the same coordinate and name are
    different keys in a DiscreteFuzzySet.
    """
    __slots__ = ("_coordinate", "_name")

    def __init__(self, coordinate: Float, name: Optional[str] = None) -> None:
        object.__setattr__(self, "_coordinate", float(coordinate))
        object.__setattr__(self, "_name", name)

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def coordinate(self) -> Float:
        return self._coordinate

    @property
    def name(self) -> str:
        return self._name if self._name is not None else str(self._coordinate)

    @property
    def uses_coordinate_as_name(self) -> bool:
        return self._name is None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        if self._name is None:
            return f"Point({self._coordinate!r})"
        return f"Point({self._coordinate!r}, name={self._name!r})"


class WeightedPoint:
    """Point + stopień przynależności (singleton)."""
    __slots__ = ("_point", "_membership")

    def __init__(self, point: Point, membership: Float) -> None:
        object.__setattr__(self, "_point", point)
        object.__setattr__(self, "_membership", check_membership(membership))

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def point(self) -> Point:
        return self._point

    @property
    def membership(self) -> Float:
        return self._membership

    @property
    def name(self) -> str:
        return self._point.name

    def complement(self) -> WeightedPoint:
        return WeightedPoint(self._point, 1.0 - self._membership)

    def __str__(self) -> str:
        return f"({self._point},{self._membership})"

    def __repr__(self) -> str:
        return f"WeightedPoint({self._point!r}, {self._membership!r})"
