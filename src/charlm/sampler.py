from __future__ import annotations
import logging
import random
from .models import NGramTable, WindowDistribution
from .config import FALLBACK_CHAR

log = logging.getLogger(__name__)


def sample_next(dist: WindowDistribution, r: float) -> str:
    """
    /* ~~~ Inverse-CDF draw: first entry (insertion order) whose cp is strictly
       greater than r, for r uniform in [0, 1). ~~~ */
    """
    for e in dist:
        if e.cumulative_probability > r:
            return e.character
    # only reachable if the last cp rounded below r
    log.warning("sample_next(): no cp > %r among %d entries; returning fallback", r, len(dist))
    return FALLBACK_CHAR


def generate(table: NGramTable, seed_text: str, target_length: int, rng: random.Random) -> str:
    """
    Extend `seed_text` by at most `target_length` sampled characters.

    Stops early, without error, when the trailing window was never seen in
    training. A seed shorter than the window length comes back unchanged.
    """
    if target_length < 0:
        raise ValueError("generate(): target_length must be >= 0")

    L = table.window_length
    if len(seed_text) < L:
        return seed_text

    out = list(seed_text)
    window = seed_text[-L:]
    for _ in range(target_length):
        dist = table.get(window)
        if dist is None:
            break
        ch = sample_next(dist, rng.random())
        out.append(ch)
        window = window[1:] + ch
    return "".join(out)
