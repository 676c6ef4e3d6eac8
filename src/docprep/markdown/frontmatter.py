"""Helpers for detecting, building and parsing YAML frontmatter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final

import frontmatter
import yaml

if TYPE_CHECKING:
    from docprep.data_primitives.document import Document

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER: Final[str] = "---"


def has_frontmatter(content: str) -> bool:
    """Return True when ``content`` already opens with a frontmatter block."""
    return content.startswith(f"{FRONTMATTER_DELIMITER}\n")


def _quote(value: str) -> str:
    escaped = value.replace('"', '\\"')
    return f'"{escaped}"'


def build_frontmatter(document: Document) -> str:
    """Render the Docusaurus header block for ``document``.

    The title is always double-quoted so colons and hashes in headings stay
    valid YAML. The returned block ends with a newline so the body can be
    appended directly.
    """
    lines = [FRONTMATTER_DELIMITER]
    for key, value in document.frontmatter.items():
        rendered = _quote(value) if key == "title" else value
        lines.append(f"{key}: {rendered}")
    lines.extend([FRONTMATTER_DELIMITER, ""])
    return "\n".join(lines)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse YAML frontmatter using python-frontmatter.

    Args:
        content: Markdown content that may include frontmatter.

    Returns:
        Tuple of (metadata dict, body string). If parsing fails or metadata is not a
        mapping, metadata will be an empty dict and the original content is returned.

    """
    try:
        parsed = frontmatter.loads(content)
    except (yaml.YAMLError, ValueError) as exc:
        logger.warning("Failed to parse frontmatter content: %s", exc)
        return {}, content

    raw_metadata = parsed.metadata or {}
    if not isinstance(raw_metadata, dict):
        logger.warning("Frontmatter metadata is not a mapping: %s", type(raw_metadata).__name__)
        return {}, content

    return dict(raw_metadata), parsed.content


__all__ = ["FRONTMATTER_DELIMITER", "build_frontmatter", "has_frontmatter", "parse_frontmatter"]
