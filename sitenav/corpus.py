"""Derive the document corpus from a docs directory.

A document ID is the document's path relative to the docs root, without its
extension and using ``/`` separators, e.g. ``guides/cli-output-format`` for
``docs/guides/cli-output-format.md``. The rules mirror Docusaurus:

- files and directories whose name starts with ``_`` are partials and are
  skipped;
- number prefixes used for ordering (``01-intro.md``) are dropped from each
  segment;
- an ``id`` in the front matter replaces the file-name segment.

Examples
--------
>>> strip_number_prefix("01-getting-started")
'getting-started'
>>> strip_number_prefix("2024-release")
'2024-release'
"""

from __future__ import annotations

import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import DOC_SUFFIXES
from .issues import SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

_NUMBER_PREFIX = re.compile(r"^(?P<number>\d{1,3})\s*[-_.]+\s*(?P<rest>[^-_.\s].*)$")
_FRONT_MATTER = re.compile(
    r"\A---[ \t]*\r?\n(?P<body>.*?)^---[ \t]*$", re.DOTALL | re.MULTILINE
)


def strip_number_prefix(segment: str) -> str:
    """Remove a short ordering prefix such as ``01-`` from a path segment."""
    match = _NUMBER_PREFIX.match(segment)
    return match.group("rest") if match else segment


def read_front_matter(text: str) -> dict[str, typ.Any]:
    """Return the YAML front matter of a markdown document, if any."""
    match = _FRONT_MATTER.match(text)
    if not match:
        return {}
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loaded = loader.load(match.group("body"))
    return dict(loaded) if isinstance(loaded, dict) else {}


def document_id(docs_dir: Path, path: Path) -> str:
    """Return the document ID for ``path`` inside ``docs_dir``.

    Raises
    ------
    SiteConfigError
        If the document is not UTF-8 or its front matter is not valid YAML.
    """
    relative = path.relative_to(docs_dir)
    segments = [strip_number_prefix(part) for part in relative.parent.parts]
    name = strip_number_prefix(relative.stem)
    try:
        front_matter = read_front_matter(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        msg = f"Document '{path}' is not valid UTF-8: {exc}"
        raise SiteConfigError(msg) from exc
    except YAMLError as exc:
        msg = f"Front matter in '{path}' is not valid YAML: {exc}"
        raise SiteConfigError(msg) from exc
    override = front_matter.get("id")
    if override is not None and str(override).strip():
        name = str(override).strip()
    return "/".join((*segments, name))


def scan_document_corpus(docs_dir: Path) -> frozenset[str]:
    """Collect the IDs of every document under ``docs_dir``.

    Parameters
    ----------
    docs_dir : Path
        Root of the docs tree.

    Returns
    -------
    frozenset[str]
        Document IDs available for sidebar and link lookups.

    Raises
    ------
    FileNotFoundError
        If ``docs_dir`` does not exist or is not a directory.
    SiteConfigError
        If a document cannot be decoded or has malformed front matter.
    """
    if not docs_dir.is_dir():
        msg = f"Docs directory '{docs_dir}' not found."
        raise FileNotFoundError(msg)
    documents: set[str] = set()
    for path in sorted(docs_dir.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in DOC_SUFFIXES:
            continue
        relative = path.relative_to(docs_dir)
        if any(part.startswith("_") for part in relative.parts):
            continue
        documents.add(document_id(docs_dir, path))
    return frozenset(documents)


__all__ = [
    "document_id",
    "read_front_matter",
    "scan_document_corpus",
    "strip_number_prefix",
]
