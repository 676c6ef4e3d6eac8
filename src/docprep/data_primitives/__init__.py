"""Data primitives shared across docprep."""

from docprep.data_primitives.document import Document, PrepareResult

__all__ = ["Document", "PrepareResult"]
