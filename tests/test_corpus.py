"""Unit tests for deriving the document corpus from a docs tree.

Usage
-----
Run ``pytest tests/test_corpus.py -v``. Each test builds its docs tree in
pytest's ``tmp_path``.
"""

from __future__ import annotations

import typing as typ

import pytest

from sitenav.corpus import read_front_matter, scan_document_corpus, strip_number_prefix
from sitenav.issues import SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write(root: Path, relative: str, text: str = "# Title\n") -> None:
    """Write a markdown document below ``root``, creating parents."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_scan_uses_relative_paths_without_suffix(tmp_path: Path) -> None:
    """Document IDs are POSIX relative paths without their extension."""
    _write(tmp_path, "guides/README.md")
    _write(tmp_path, "guides/cli-output-format.md")
    _write(tmp_path, "design/traits.mdx")
    _write(tmp_path, "img/logo.png", "not a doc")
    assert scan_document_corpus(tmp_path) == {
        "guides/README",
        "guides/cli-output-format",
        "design/traits",
    }


def test_scan_skips_partials(tmp_path: Path) -> None:
    """Files and directories starting with an underscore are partials."""
    _write(tmp_path, "_snippets/shared.md")
    _write(tmp_path, "guides/_partial.md")
    _write(tmp_path, "guides/intro.md")
    assert scan_document_corpus(tmp_path) == {"guides/intro"}


def test_number_prefixes_are_dropped(tmp_path: Path) -> None:
    """Ordering prefixes are removed from every segment."""
    _write(tmp_path, "01-guides/02-intro.md")
    assert scan_document_corpus(tmp_path) == {"guides/intro"}


def test_front_matter_id_replaces_file_name(tmp_path: Path) -> None:
    """A front-matter ``id`` overrides the file-name segment only."""
    _write(tmp_path, "odoc/index.md", "---\nid: odoc\ntitle: Packages\n---\n# Body\n")
    assert scan_document_corpus(tmp_path) == {"odoc/odoc"}


def test_missing_docs_directory_raises(tmp_path: Path) -> None:
    """Scanning a missing directory should raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        scan_document_corpus(tmp_path / "missing")


def test_malformed_front_matter_names_the_document(tmp_path: Path) -> None:
    """Unparseable front matter should be reported with the file path."""
    _write(tmp_path, "guides/broken.md", "---\nid: [unclosed\n---\n# Body\n")
    with pytest.raises(SiteConfigError, match="Front matter in") as excinfo:
        scan_document_corpus(tmp_path)
    assert "broken.md" in str(excinfo.value)


def test_undecodable_document_names_the_file(tmp_path: Path) -> None:
    """A document that is not UTF-8 should be reported with the file path."""
    path = tmp_path / "latin.md"
    path.write_bytes(b"# Caf\xe9\n")
    with pytest.raises(SiteConfigError, match="not valid UTF-8") as excinfo:
        scan_document_corpus(tmp_path)
    assert "latin.md" in str(excinfo.value)


def test_read_front_matter_ignores_documents_without_header() -> None:
    """Documents without a leading ``---`` block have no front matter."""
    assert read_front_matter("# Heading\n---\nid: nope\n---\n") == {}
    assert read_front_matter("---\n---\nbody") == {}


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        ("01-intro", "intro"),
        ("1_setup", "setup"),
        ("10. advanced", "advanced"),
        ("2024-release", "2024-release"),
        ("v1-notes", "v1-notes"),
    ],
)
def test_strip_number_prefix(segment: str, expected: str) -> None:
    """Only short numeric ordering prefixes are stripped."""
    assert strip_number_prefix(segment) == expected
