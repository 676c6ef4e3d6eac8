"""Derive sidebar metadata (id, title, position) from a doc's filename and content."""

from __future__ import annotations

import re
from typing import Final

INDEX_FILENAME: Final[str] = "README.md"
INDEX_ID: Final[str] = "index"
UNPOSITIONED: Final[int] = 999

_H1_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_NUMERIC_PREFIX = re.compile(r"^(\d+)-", re.ASCII)
_MD_SUFFIX = re.compile(r"\.md$")
_WORD_START = re.compile(r"\b\w", re.ASCII)


def extract_title(content: str, filename: str) -> str:
    """Return the first level-1 heading, falling back to a title built from ``filename``.

    Examples:
        >>> extract_title("# Overview\\n\\nBody", "README.md")
        'Overview'
        >>> extract_title("No heading here", "03-my-topic.md")
        'My Topic'

    """
    match = _H1_PATTERN.search(content)
    if match:
        return match.group(1).strip()

    title = _NUMERIC_PREFIX.sub("", filename)
    title = _MD_SUFFIX.sub("", title)
    title = title.replace("-", " ")
    return _WORD_START.sub(lambda m: m.group(0).upper(), title)


def extract_position(filename: str) -> int:
    """Return the sidebar position encoded in the filename's numeric prefix.

    ``README.md`` sorts first (0); files without a prefix sort last.
    """
    match = _NUMERIC_PREFIX.match(filename)
    if match:
        return int(match.group(1))
    if filename == INDEX_FILENAME:
        return 0
    return UNPOSITIONED


def extract_id(filename: str) -> str:
    """Return the document id, keeping the numeric prefix so ids stay unique."""
    if filename == INDEX_FILENAME:
        return INDEX_ID
    return _MD_SUFFIX.sub("", filename)


__all__ = [
    "INDEX_FILENAME",
    "INDEX_ID",
    "UNPOSITIONED",
    "extract_id",
    "extract_position",
    "extract_title",
]
