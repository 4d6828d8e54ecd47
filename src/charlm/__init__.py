"""
Character-level Markov language model.

Trains a fixed-order n-gram model over raw characters and samples new text
from it.

Example Usage:
    from charlm import LanguageModel

    model = LanguageModel(window_length=3, seed=42)
    model.train_files(["/path/to/texts"])
    print(model.generate("The", 200))
"""

# src/charlm/__init__.py
from .engine import LanguageModel  # re-export
from .errors import CharLMError, CorpusReadError, InsufficientCorpusError
from .loader import CorpusStream, load_corpus
from .models import CharObservation, NGramTable, WindowDistribution
from .normalize import normalize
from .sampler import generate, sample_next
from .trainer import train

__version__ = "1.0.0"
__all__ = [
    "LanguageModel",
    "CharLMError", "CorpusReadError", "InsufficientCorpusError",
    "CorpusStream", "load_corpus",
    "CharObservation", "NGramTable", "WindowDistribution",
    "normalize", "generate", "sample_next", "train",
]
