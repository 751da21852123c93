"""Read the raw inputs of a site root from disk.

A site root holds ``site.yaml`` (the site configuration), ``sidebars.yaml``
(sidebar definitions), and a ``docs/`` tree. Each location can be overridden.
The validation pipeline itself never touches the filesystem; this module is
the collaborator that turns files into the in-memory values it consumes.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ._constants import DOCS_DIRNAME, SIDEBARS_FILENAME, SITE_CONFIG_FILENAME
from .corpus import scan_document_corpus


@dc.dataclass(frozen=True, slots=True)
class SiteSources:
    """Raw configuration, sidebar definitions, and corpus of one site root."""

    root: Path
    config: dict[str, typ.Any]
    sidebars: dict[str, typ.Any]
    documents: frozenset[str]


def load_yaml_mapping(path: Path) -> dict[str, typ.Any]:
    """Load a YAML document whose top level must be a mapping.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    YAMLError
        If the YAML content cannot be parsed.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


def load_site_sources(
    root: Path,
    *,
    config_path: Path | None = None,
    sidebars_path: Path | None = None,
    docs_dir: Path | None = None,
) -> SiteSources:
    """Read every input of the site rooted at ``root``.

    Examples
    --------
    >>> from pathlib import Path
    >>> sources = load_site_sources(Path("doc"))  # doctest: +SKIP
    >>> sorted(sources.sidebars)  # doctest: +SKIP
    ['designSidebar', 'odocSidebar', 'testsSidebar']
    """
    return SiteSources(
        root=root,
        config=load_yaml_mapping(config_path or root / SITE_CONFIG_FILENAME),
        sidebars=load_yaml_mapping(sidebars_path or root / SIDEBARS_FILENAME),
        documents=scan_document_corpus(docs_dir or root / DOCS_DIRNAME),
    )


__all__ = ["SiteSources", "load_site_sources", "load_yaml_mapping"]
