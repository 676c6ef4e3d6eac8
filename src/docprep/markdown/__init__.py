"""Markdown transforms applied while preparing docs for MDX."""

from docprep.markdown.escaping import escape_mdx
from docprep.markdown.frontmatter import build_frontmatter, has_frontmatter, parse_frontmatter
from docprep.markdown.metadata import extract_id, extract_position, extract_title

__all__ = [
    "build_frontmatter",
    "escape_mdx",
    "extract_id",
    "extract_position",
    "extract_title",
    "has_frontmatter",
    "parse_frontmatter",
]
