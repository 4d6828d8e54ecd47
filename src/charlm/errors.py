from __future__ import annotations
from typing import Optional


class CharLMError(Exception):
    """Base class for everything the language model raises on purpose."""


class CorpusReadError(CharLMError):
    """The character source failed while training was reading it."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class InsufficientCorpusError(CharLMError):
    """The corpus ended before a full initial window could be formed."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"corpus has {available} character(s); at least {required} are needed to form a window"
        )
        self.required = required
        self.available = available
