# charlm/models.py
"""
Data models for the character language model.

Three small containers:

- CharObservation: one character seen after some window, with its count and
  (after normalization) its probability and cumulative probability.
- WindowDistribution: the ordered observations for one window.
- NGramTable: the trained model itself, window length plus the
  window -> distribution mapping.

Nothing here samples or normalizes; see normalize.py and sampler.py.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass(slots=True)
class CharObservation:
    """
    One distinct character observed to follow a window.

    Attributes
    ----------
    character : str
        A single character.
    count : int
        How many times the character followed the window during training.
    probability : float
        count / total count of the window. 0.0 until normalized.
    cumulative_probability : float
        Prefix sum of `probability` in insertion order. 0.0 until normalized.
    """
    character: str
    count: int = 1
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"


@dataclass(slots=True)
class WindowDistribution:
    """
    Observations for one window, kept in first-occurrence order.

    The order is what cumulative probabilities accumulate over, so it also
    decides which character wins a sampling tie. `_pos` maps a character to
    its slot in `entries` so a repeat observation is a dict lookup.
    """
    entries: List[CharObservation] = field(default_factory=list)
    _pos: Dict[str, int] = field(default_factory=dict, repr=False)

    def observe(self, character: str) -> CharObservation:
        """Bump the count of `character`, appending it on first sight."""
        i = self._pos.get(character)
        if i is None:
            obs = CharObservation(character)
            self._pos[character] = len(self.entries)
            self.entries.append(obs)
            return obs
        obs = self.entries[i]
        obs.count += 1
        return obs

    def get(self, character: str) -> Optional[CharObservation]:
        i = self._pos.get(character)
        return None if i is None else self.entries[i]

    def total(self) -> int:
        return sum(e.count for e in self.entries)

    def characters(self) -> List[str]:
        return [e.character for e in self.entries]

    def __contains__(self, character: object) -> bool:
        return character in self._pos

    def __iter__(self) -> Iterator[CharObservation]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return "(" + " ".join(str(e) for e in self.entries) + ")"


@dataclass(frozen=True)
class NGramTable:
    """
    A trained model: every window seen in the corpus and what followed it.

    Built once by trainer.train() and only read afterwards. Sampler and
    generator functions receive it explicitly.

    Attributes
    ----------
    window_length : int
        Length L of every key in `windows`.
    windows : Dict[str, WindowDistribution]
        window -> normalized distribution. No key order is promised.
    """
    window_length: int
    windows: Dict[str, WindowDistribution] = field(default_factory=dict)

    def get(self, window: str) -> Optional[WindowDistribution]:
        return self.windows.get(window)

    def items(self) -> Iterator[Tuple[str, WindowDistribution]]:
        return iter(self.windows.items())

    def __contains__(self, window: object) -> bool:
        return window in self.windows

    def __len__(self) -> int:
        return len(self.windows)

    def dump(self) -> str:
        """Human-readable `window : distribution` lines, for debugging only."""
        return "".join(f"{w} : {d}\n" for w, d in self.windows.items())
