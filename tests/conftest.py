from __future__ import annotations

from pathlib import Path

import pytest

README_BODY = "# Overview\n\nThe NDX sandbox at a glance.\n"
DESIGN_BODY = "# Design\n\nUses `{x}` and <5 items.\n\nRegions are keyed by {y}.\n"


@pytest.fixture(autouse=True)
def _clean_docprep_env(monkeypatch):
    for var in (
        "DOCPREP_SOURCE_DIR",
        "DOCPREP_TARGET_DIR",
        "DOCPREP_COMMIT_SHA",
        "GITHUB_SHA",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """A docs folder holding a README and one numbered design doc."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "README.md").write_text(README_BODY, encoding="utf-8")
    (docs / "10-design.md").write_text(DESIGN_BODY, encoding="utf-8")
    return docs


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    return tmp_path / "website" / "docs"
