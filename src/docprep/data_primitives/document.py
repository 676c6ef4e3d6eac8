"""Document primitives produced by the preparer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from docprep.markdown.metadata import INDEX_FILENAME


@dataclass(frozen=True, slots=True)
class Document:
    """A single markdown file with the sidebar metadata derived from it."""

    filename: str
    id: str
    title: str
    position: int
    content: str

    @property
    def is_index(self) -> bool:
        """Whether this document becomes the docs landing page."""
        return self.filename == INDEX_FILENAME

    @property
    def frontmatter(self) -> dict[str, str | int]:
        """Header fields in the order they are written."""
        fields: dict[str, str | int] = {
            "id": self.id,
            "title": self.title,
            "sidebar_position": self.position,
        }
        if self.is_index:
            fields["slug"] = "/"
        return fields


@dataclass(slots=True)
class PrepareResult:
    """Summary of a single preparer run."""

    source_dir: Path
    target_dir: Path
    documents: list[Document] = field(default_factory=list)
    copied_verbatim: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.documents) + len(self.copied_verbatim)
