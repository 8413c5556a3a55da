"""Small helpers used across the engine."""

from __future__ import annotations

import os

UNIX_SCHEME = "unix://"

_UINT32 = 1 << 32


def wrap_text(text: str, indent: int, line_len: int) -> str:
    """Wrap words to fit line_len, indenting continuation lines by indent columns.

    Every word is followed by a single space, as is the original text flow.
    """
    limit = (line_len - indent) % _UINT32
    pad = " " * max(indent, 1)
    parts: list[str] = []
    length = 0
    for word in text.split():
        if length + len(word) + 1 <= limit:
            length += len(word) + 1
        else:
            parts.append("\n")
            parts.append(pad)
            length = len(word) + 1
        parts.append(word)
        parts.append(" ")
    return "".join(parts)


def hardware_concurrency() -> int:
    """Number of CPUs available, never less than one."""
    return os.cpu_count() or 1


def read_file(filename: str) -> str:
    """Return the contents of a text file, or an empty string if it cannot be opened."""
    try:
        with open(filename, encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        return ""


def is_unix_scheme(url: str) -> bool:
    """Whether the URL uses the unix:// scheme."""
    return url.startswith(UNIX_SCHEME)