# charlm/trainer.py
from __future__ import annotations

import logging
from itertools import islice
from typing import Dict, Iterable, Iterator

from .errors import CorpusReadError, InsufficientCorpusError
from .models import NGramTable, WindowDistribution
from .normalize import normalize

log = logging.getLogger(__name__)


def _guarded(chars: Iterable[str]) -> Iterator[str]:
    """Re-raise low-level read failures of an arbitrary source as CorpusReadError."""
    try:
        yield from chars
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusReadError(f"corpus stream failed: {exc}") from exc


def train(chars: Iterable[str], window_length: int) -> NGramTable:
    """
    Count which character follows every `window_length`-long window of `chars`,
    then normalize each window's counts into (cumulative) probabilities.

    The first `window_length` characters only seed the window. A stream that
    ends before that raises InsufficientCorpusError. The returned table is
    fresh; nothing is accumulated across calls.
    """
    if window_length < 1:
        raise ValueError("train(): window_length must be a positive integer")

    it = _guarded(chars)
    window = "".join(islice(it, window_length))
    if len(window) < window_length:
        raise InsufficientCorpusError(window_length, len(window))

    windows: Dict[str, WindowDistribution] = {}
    n_chars = len(window)
    for ch in it:
        dist = windows.get(window)
        if dist is None:
            dist = windows[window] = WindowDistribution()
        dist.observe(ch)
        window = window[1:] + ch
        n_chars += 1

    for dist in windows.values():
        normalize(dist)

    log.info("Trained L=%d on %d chars: windows=%d", window_length, n_chars, len(windows))
    return NGramTable(window_length=window_length, windows=windows)
