"""Copy architecture markdown into the site's docs folder, ready for MDX.

For every ``*.md`` file in the source directory the preparer derives an id,
title and sidebar position, prepends a frontmatter block and escapes the body
with :func:`~docprep.markdown.escaping.escape_mdx`. The target directory is
owned by the preparer and recreated from scratch on each run.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from docprep.data_primitives.document import Document, PrepareResult
from docprep.exceptions import (
    DocumentReadError,
    DocumentWriteError,
    SourceDirectoryNotFoundError,
    TargetDirectoryError,
)
from docprep.markdown.escaping import escape_mdx
from docprep.markdown.frontmatter import build_frontmatter, has_frontmatter, parse_frontmatter
from docprep.markdown.metadata import extract_id, extract_position, extract_title

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class DocPreparer:
    """Prepare a directory of markdown files for the site generator."""

    def __init__(self, source_dir: Path, target_dir: Path) -> None:
        self.source_dir = Path(source_dir)
        self.target_dir = Path(target_dir)

    def build_document(self, filename: str, content: str) -> Document:
        return Document(
            filename=filename,
            id=extract_id(filename),
            title=extract_title(content, filename),
            position=extract_position(filename),
            content=content,
        )

    def render(self, document: Document) -> str:
        """Return the frontmatter header followed by the escaped body."""
        return build_frontmatter(document) + escape_mdx(document.content)

    def discover(self) -> list[str]:
        """Return the markdown filenames to process, skipping hidden files.

        Raises:
            SourceDirectoryNotFoundError: If the source directory does not exist.

        """
        if not self.source_dir.is_dir():
            raise SourceDirectoryNotFoundError(self.source_dir)

        return sorted(
            entry.name
            for entry in self.source_dir.iterdir()
            if entry.name.endswith(MARKDOWN_SUFFIX) and not entry.name.startswith(".")
        )

    def plan(self) -> list[Document]:
        """Return the documents a run would write, without touching the target."""
        documents = []
        for filename in self.discover():
            content = self._read(self.source_dir / filename)
            if has_frontmatter(content):
                continue
            documents.append(self.build_document(filename, content))
        return documents

    def process_file(self, filename: str) -> Document | None:
        """Prepare a single file.

        Files that already start with frontmatter are copied unchanged and
        ``None`` is returned.

        Raises:
            DocumentReadError: If the source file cannot be read.
            DocumentWriteError: If the output file cannot be written.

        """
        source_path = self.source_dir / filename
        target_path = self.target_dir / filename

        content = self._read(source_path)

        if has_frontmatter(content):
            metadata, _body = parse_frontmatter(content)
            logger.info("  Skipping %s (already has frontmatter, id: %s)", filename, metadata.get("id", "?"))
            self._write(target_path, content)
            return None

        document = self.build_document(filename, content)
        self._write(target_path, self.render(document))
        logger.info("  Processed %s -> id: %s, position: %s", filename, document.id, document.position)
        return document

    def run(self) -> PrepareResult:
        """Recreate the target directory and prepare every markdown file.

        The first failure aborts the run; re-running after fixing the cause
        is the recovery path.
        """
        logger.info("Preparing docs for Docusaurus...")
        logger.info("  Source: %s", self.source_dir)
        logger.info("  Target: %s", self.target_dir)

        if not self.source_dir.is_dir():
            raise SourceDirectoryNotFoundError(self.source_dir)

        self._reset_target()

        filenames = self.discover()
        logger.info("  Found %d markdown files", len(filenames))

        result = PrepareResult(source_dir=self.source_dir, target_dir=self.target_dir)
        for filename in filenames:
            document = self.process_file(filename)
            if document is None:
                result.copied_verbatim.append(filename)
            else:
                result.documents.append(document)

        logger.info("Done!")
        return result

    def _reset_target(self) -> None:
        try:
            if self.target_dir.exists():
                shutil.rmtree(self.target_dir)
            self.target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise TargetDirectoryError(self.target_dir, str(exc)) from exc

    @staticmethod
    def _read(path: Path) -> str:
        try:
            # Line endings are preserved byte for byte.
            return path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(path, str(exc)) from exc

    @staticmethod
    def _write(path: Path, content: str) -> None:
        try:
            path.write_bytes(content.encode("utf-8"))
        except OSError as exc:
            raise DocumentWriteError(path, str(exc)) from exc


def prepare_docs(source_dir: Path, target_dir: Path) -> PrepareResult:
    """Run the preparer once for ``source_dir`` -> ``target_dir``."""
    return DocPreparer(source_dir, target_dir).run()


__all__ = ["DocPreparer", "prepare_docs"]
