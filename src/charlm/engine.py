# charlm/engine.py
from __future__ import annotations

import os
import random
import logging
from typing import Iterable, Optional, Union

from . import config as CFG
from .loader import load_corpus
from .models import NGramTable
from .sampler import generate as _generate
from .trainer import train as _train

log = logging.getLogger(__name__)


class LanguageModel:
    """
    Thin orchestration layer that glues together:
      - the corpus character source (any iterable of characters, or files via loader),
      - training + normalization (trainer.train),
      - sampling (sampler.generate) with this model's own random generator.

    Public API (used by CLI/Flask/GUI):
      * train(corpus):               build a fresh table from characters
      * train_files(roots):          same, from *.txt files/folders
      * generate(seed_text, length): extend seed_text by up to `length` chars
      * dump():                      window -> distribution listing (debug only)

    With a seed the random generator is reproducible: same window length,
    same seed and same corpus give identical generate() output.
    """

    # ------------- lifecycle -------------

    def __init__(self, window_length: int = CFG.DEFAULT_WINDOW_LENGTH, seed: Optional[int] = None,
                 *, verbose: bool = False) -> None:
        if isinstance(window_length, bool) or not isinstance(window_length, int) or window_length < 1:
            raise ValueError(f"window_length must be a positive integer, got {window_length!r}")
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["CHARLM_VERBOSE"] = "1"

        self.window_length = window_length
        self.seed = seed
        self._rng = random.Random(seed) if seed is not None else random.Random()
        self._table = NGramTable(window_length=window_length)
        self._trained = False

    @property
    def table(self) -> NGramTable:
        return self._table

    @property
    def is_trained(self) -> bool:
        return self._trained

    # /* ~~~ Train from any character source; always starts from an empty table ~~~ */
    def train(self, corpus: Union[str, Iterable[str]]) -> NGramTable:
        table = _train(corpus, self.window_length)
        # commit only after a full pass, a failed read leaves the old table
        self._table = table
        self._trained = True
        return table

    # /* ~~~ Train from text files / folders on disk ~~~ */
    def train_files(self, roots: Iterable[str], *, encoding: str = CFG.ENCODING) -> NGramTable:
        roots = list(roots)
        log.info("Loading corpus from %s", roots)
        stream = load_corpus(roots, encoding=encoding)
        table = self.train(stream)
        log.info("Corpus read: files=%d chars=%d", stream.files_read, stream.chars_read)
        return table

    # ------------- query -------------

    # /* ~~~ An untrained model holds an empty table: every window is unknown ~~~ */
    def generate(self, seed_text: str, target_length: int = CFG.DEFAULT_TEXT_LENGTH) -> str:
        return _generate(self._table, seed_text, target_length, self._rng)

    def dump(self) -> str:
        """window : distribution lines; empty before training."""
        return self._table.dump()

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return (f"LanguageModel(window_length={self.window_length}, seed={self.seed!r}, "
                f"windows={len(self._table)})")
