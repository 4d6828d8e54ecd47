"""Module-level API over one shared LanguageModel (used by the GUI)."""
from __future__ import annotations
import time
from charlm.config import DEFAULT_TEXT_LENGTH, DEFAULT_WINDOW_LENGTH
from charlm.engine import LanguageModel

_model: LanguageModel | None = None

def initialize(paths: list[str],
               window_length: int = DEFAULT_WINDOW_LENGTH,
               seed: int | None = None,
               verbose: bool = False) -> LanguageModel:
    """Train a model on the given files/folders and make it the current one."""
    global _model
    t0 = time.perf_counter()
    if verbose:
        print(f"[train] roots: {paths} (window={window_length}, seed={seed})")
    model = LanguageModel(window_length, seed, verbose=verbose)
    model.train_files(paths)
    _model = model
    if verbose:
        print(f"[ready] {len(model.table):,} windows in {time.perf_counter() - t0:.2f}s")
    return model

def current() -> LanguageModel | None:
    return _model

def generate(seed_text: str, length: int = DEFAULT_TEXT_LENGTH) -> str:
    """Extend seed_text with the current model."""
    if _model is None:
        raise RuntimeError("Model not initialized. Call initialize(...) first.")
    return _model.generate(seed_text, length)
