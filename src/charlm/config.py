from __future__ import annotations

# model defaults
DEFAULT_WINDOW_LENGTH: int = 3
DEFAULT_TEXT_LENGTH: int = 200

# corpus files picked up when a root is a directory
INCLUDE_EXTS = [".txt"]

# folders to skip
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", "node_modules", "__pycache__"}

ENCODING: str = "utf-8"
READ_CHUNK: int = 64 * 1024   # characters per read() from a corpus file

# /* ~~~ returned by the sampler when no cumulative probability exceeds the draw ~~~ */
FALLBACK_CHAR: str = " "

# tolerance for sum(p) == 1.0 and last cp == 1.0
NORMALIZE_TOLERANCE: float = 1e-9

# /* ~~~ cap how many characters one HTTP request may generate ~~~ */
MAX_TEXT_LENGTH: int = 10_000
