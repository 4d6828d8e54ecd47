from __future__ import annotations
import math
from .config import NORMALIZE_TOLERANCE
from .models import WindowDistribution

def normalize(dist: WindowDistribution) -> None:
    """
    Set probability and cumulative_probability on every entry from counts alone.
    Rules:
      * probability = count / total, in insertion order
      * cumulative_probability = running sum of probability, same order
        (the first entry's cp equals its own p)
      * entry order is never touched
    Calling it again without new observations gives bit-identical values.
    """
    total = dist.total()
    if total <= 0:
        raise ValueError("normalize(): distribution has no observations")

    acc = 0.0
    for e in dist:
        e.probability = e.count / total
        acc = acc + e.probability
        e.cumulative_probability = acc

def check_distribution(dist: WindowDistribution, tol: float = NORMALIZE_TOLERANCE) -> bool:
    """True if p sums to 1, cp never decreases and the last cp is 1 (all within tol)."""
    if len(dist) == 0:
        return False
    if not math.isclose(math.fsum(e.probability for e in dist), 1.0, rel_tol=0.0, abs_tol=tol):
        return False
    prev = 0.0
    for e in dist:
        if e.cumulative_probability < prev:
            return False
        prev = e.cumulative_probability
    return math.isclose(prev, 1.0, rel_tol=0.0, abs_tol=tol)
