"""docprep: prepare architecture markdown for a Docusaurus site."""

from docprep.data_primitives.document import Document, PrepareResult
from docprep.preparer import DocPreparer, prepare_docs

__version__ = "0.1.0"
__all__ = [
    "DocPreparer",
    "Document",
    "PrepareResult",
    "prepare_docs",
]
