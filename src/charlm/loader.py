from __future__ import annotations
import os
from typing import Iterable, Iterator, List
from .config import INCLUDE_EXTS, EXCLUDE_DIRS, ENCODING, READ_CHUNK
from .errors import CorpusReadError

# Progress logging (set CHARLM_VERBOSE=1 to enable)
def _verbose() -> bool:
    return os.environ.get("CHARLM_VERBOSE") == "1"

PROGRESS_EVERY_FILES = 500

def _wanted(fn: str) -> bool:
    return os.path.splitext(fn)[1].lower() in INCLUDE_EXTS

def iter_corpus_files(roots: Iterable[str]) -> Iterable[str]:
    """Yield corpus files: a root that is a file as-is, directories walked in sorted order."""
    for root in roots:
        root = os.path.abspath(root)
        if os.path.isfile(root):
            yield root
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDE_DIRS)
            for fn in sorted(filenames):
                if _wanted(fn):
                    yield os.path.join(dirpath, fn)

class CorpusStream:
    """
    Character source over one or more text files, read lazily in chunks.
    Iterating yields single characters, file after file, and stops when the
    last file is exhausted. Read/decode failures become CorpusReadError.
    """
    def __init__(self, paths: Iterable[str], encoding: str = ENCODING) -> None:
        self.paths: List[str] = list(paths)
        self.encoding = encoding
        self.chars_read = 0
        self.files_read = 0

    def _iter_file(self, path: str) -> Iterator[str]:
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                while True:
                    chunk = f.read(READ_CHUNK)
                    if not chunk:
                        break
                    self.chars_read += len(chunk)
                    yield from chunk
        except (OSError, UnicodeDecodeError) as exc:
            raise CorpusReadError(f"failed reading {path}: {exc}", path=path) from exc

    def __iter__(self) -> Iterator[str]:
        self.chars_read = 0
        self.files_read = 0
        for path in self.paths:
            yield from self._iter_file(path)
            self.files_read += 1
            if _verbose() and self.files_read % PROGRESS_EVERY_FILES == 0:
                print(f"[scanned] files={self.files_read:,} chars={self.chars_read:,}")
        if _verbose():
            print(f"[done] files={self.files_read:,} chars={self.chars_read:,}")

def load_corpus(roots: List[str], encoding: str = ENCODING) -> CorpusStream:
    """
    Resolve roots (files and/or folders of *.txt) into a CorpusStream.
    Nothing is read until the stream is iterated.
    """
    roots = list(roots)
    if not roots:
        raise ValueError("load_corpus(): at least one root is required")
    for r in roots:
        if not os.path.exists(r):
            raise FileNotFoundError(r)

    paths = list(iter_corpus_files(roots))
    if not paths:
        raise ValueError(f"load_corpus(): no {'/'.join(INCLUDE_EXTS)} files under {roots}")
    return CorpusStream(paths, encoding=encoding)
