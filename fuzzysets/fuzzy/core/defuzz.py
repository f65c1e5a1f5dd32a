from __future__ import annotations
import logging
import math
from enum import Enum
from itertools import accumulate
from typing import Callable, Dict, List, Sequence, Tuple, Union
from .mfs import MembershipFunction
from .types import Float, FuzzyError

log = logging.getLogger(__name__)


class Defuzzification(Enum):
    MAX_MEMBERSHIP_MEAN = "max_membership_mean"
    WEIGHTED_MAX_MEMBERSHIP_MEAN = "weighted_max_membership_mean"
    WEIGHTED_MEAN = "weighted_mean"
    CENTROID = "centroid"

    @classmethod
    def parse(cls, method: Union[str, Defuzzification]) -> Defuzzification:
        if isinstance(method, cls):
            return method
        key = str(method).strip().lower().replace("-", "_")
        for m in cls:
            if m.value == key or m.name.lower() == key:
                return m
        allowed = " | ".join(m.value for m in cls)
        raise FuzzyError(f"Unknown defuzzification method: {method!r} (allowed: {allowed})")


def _ratio(pairs: List[Tuple[Float, Float]]) -> Float:
    """Σ x·w / Σ w; 0.0 gdy suma wag jest zerowa lub nieskończona."""
    num = 0.0
    den = 0.0
    for x, w in pairs:
        num += x * w
        den += w
    if den == 0.0 or not math.isfinite(den) or not math.isfinite(num):
        log.debug("defuzzify: degenerate weight sum %r, returning 0.0", den)
        return 0.0
    return num / den


def max_membership_mean(mfs: Sequence[MembershipFunction]) -> Float:
    if not mfs:
        return 0.0
    return sum(mf.max_membership_at() for mf in mfs) / len(mfs)

def weighted_max_membership_mean(mfs: Sequence[MembershipFunction]) -> Float:
    pairs = []
    for mf in mfs:
        x = mf.max_membership_at()
        pairs.append((x, mf.mu(x)))
    return _ratio(pairs)

def weighted_mean(mfs: Sequence[MembershipFunction]) -> Float:
    pairs = []
    for mf in mfs:
        x = mf.weighted_mean()
        pairs.append((x, mf.mu(x)))
    return _ratio(pairs)

def centroid(mfs: Sequence[MembershipFunction]) -> Float:
    return _ratio([(mf.weighted_mean(), mf.area()) for mf in mfs])


STRATEGIES = {
    Defuzzification.MAX_MEMBERSHIP_MEAN: max_membership_mean,
    Defuzzification.WEIGHTED_MAX_MEMBERSHIP_MEAN: weighted_max_membership_mean,
    Defuzzification.WEIGHTED_MEAN: weighted_mean,
    Defuzzification.CENTROID: centroid,
}


def defuzzify(method: Union[str, Defuzzification], *mfs: MembershipFunction) -> Float:
    """
    Sprowadź jedną lub więcej funkcji przynależności do jednej ostrej wartości.

    Empty input gives 0.0, as does a zero weight sum (e.g. every function is
    zero at its own representative point).
    """
    fn = STRATEGIES[Defuzzification.parse(method)]
    return float(fn(list(mfs)))


# --- estymacja na siatce, dla dowolnej μ (np. agregatu kilku MF) ---

def sample(mu: Callable[[Float], Float], lo: Float, hi: Float, n: int) -> List[Tuple[Float, Float]]:
    """n równo rozłożonych próbek (x, μ(x)) na [lo, hi]."""
    if n < 2:
        mid = (lo + hi) / 2.0
        return [(mid, mu(mid))]
    dx = (hi - lo) / (n - 1)
    return [(lo + i * dx, mu(lo + i * dx)) for i in range(n)]


def grid_estimates(mu: Callable[[Float], Float], lo: Float, hi: Float, n: int = 201) -> Dict[str, Float]:
    """
    Centroid, mean of maxima and bisector of `mu` sampled on [lo, hi].

    A curve that is zero on every sample gives the interval midpoint for all three.
    """
    samples = sample(mu, lo, hi, int(n))
    total = sum(w for _, w in samples)
    if not total > 0.0:
        mid = (lo + hi) / 2.0
        return {"centroid": mid, "mom": mid, "bisector": mid}

    peak = max(w for _, w in samples)
    tops = [x for x, w in samples if math.isclose(w, peak, rel_tol=1e-9)]
    running = accumulate(w for _, w in samples)
    bisector = next((x for (x, _), acc in zip(samples, running) if acc >= total / 2.0), samples[-1][0])
    return {
        "centroid": sum(x * w for x, w in samples) / total,
        "mom": sum(tops) / len(tops),
        "bisector": bisector,
    }
