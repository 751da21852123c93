"""Build validated sidebar trees from raw sidebar definitions.

A sidebar definition maps each sidebar ID to an ordered list of items. An
item is either a document reference or a category holding further items, to
any depth. The accepted raw forms follow Docusaurus ``sidebars`` files:

- ``"guides/README"`` is shorthand for ``{"type": "doc", "id": "guides/README"}``.
- ``{"type": "doc", "id": ..., "label": ...}`` references a document.
- ``{"type": "category", "label": ..., "items": [...], "collapsed": ...,
  "collapsible": ...}`` groups further items.
- ``{"Label": [...], "Other": [...]}`` is shorthand for one category per key.

The builder never reorders items. It reports duplicate sibling category
labels, unknown item types, and categories that contain themselves (possible
when YAML aliases are used), and warns about empty categories.

Examples
--------
>>> from sitenav.sidebars import build_sidebars
>>> result = build_sidebars({"guides": ["guides/README", "guides/cli"]})
>>> [node.doc_id for node in result.get("guides").items]
['guides/README', 'guides/cli']
>>> result.errors
()
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from .config.helpers import _join_path, _optional_str
from .issues import (
    CategoryCycle,
    DuplicateSiblingLabel,
    EmptyCategory,
    EmptyCollection,
    InvalidValue,
    Issue,
    MissingField,
    UnknownNodeType,
)

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class DocRef:
    """Sidebar leaf pointing at a document in the corpus."""

    doc_id: str
    label: str | None = None
    kind: typ.Literal["doc"] = "doc"


@dc.dataclass(frozen=True, slots=True)
class Category:
    """Labelled group of sidebar nodes."""

    label: str
    items: tuple[SidebarNode, ...] = ()
    collapsed: bool | None = None
    collapsible: bool | None = None
    kind: typ.Literal["category"] = "category"


SidebarNode = DocRef | Category


@dc.dataclass(frozen=True, slots=True)
class Sidebar:
    """Named, ordered navigation tree."""

    sidebar_id: str
    items: tuple[SidebarNode, ...]

    def iter_doc_refs(self) -> cabc.Iterator[tuple[tuple[str, ...], DocRef]]:
        """Yield each document reference with its category path, in tree order."""
        yield from _walk_doc_refs(self.items, ())

    def first_doc_id(self) -> str | None:
        """Return the document a navbar link to this sidebar should open."""
        for _path, ref in self.iter_doc_refs():
            return ref.doc_id
        return None


def _walk_doc_refs(
    nodes: tuple[SidebarNode, ...], path: tuple[str, ...]
) -> cabc.Iterator[tuple[tuple[str, ...], DocRef]]:
    for node in nodes:
        match node:
            case DocRef():
                yield path, node
            case Category(label=label, items=items):
                yield from _walk_doc_refs(items, (*path, label))


@dc.dataclass(frozen=True, slots=True)
class SidebarBuildResult:
    """Sidebars built from a definition, plus the problems found."""

    sidebars: tuple[Sidebar, ...]
    errors: tuple[Issue, ...] = ()
    warnings: tuple[Issue, ...] = ()

    def get(self, sidebar_id: str) -> Sidebar | None:
        """Return the sidebar named ``sidebar_id`` if it was declared."""
        for sidebar in self.sidebars:
            if sidebar.sidebar_id == sidebar_id:
                return sidebar
        return None


def build_sidebars(definitions: typ.Mapping[str, typ.Any]) -> SidebarBuildResult:
    """Build every sidebar in ``definitions``, collecting all problems.

    Parameters
    ----------
    definitions : Mapping[str, Any]
        Raw mapping from sidebar ID to its item list (or category shorthand
        mapping), as parsed from a sidebars file.

    Returns
    -------
    SidebarBuildResult
        Sidebars in declaration order. ``errors`` is non-empty when any tree
        is malformed, in which case the sidebars must not be walked further;
        ``warnings`` lists valid-but-suspicious input such as empty
        categories.
    """
    sidebars: list[Sidebar] = []
    errors: list[Issue] = []
    warnings: list[Issue] = []
    seen: set[str] = set()
    for raw_id, raw_items in definitions.items():
        sidebar_id = _optional_str(raw_id)
        if sidebar_id is None:
            errors.append(
                InvalidValue(repr(raw_id), "sidebar ID must be a non-empty string")
            )
            continue
        if sidebar_id in seen:
            errors.append(
                InvalidValue(repr(raw_id), f"duplicate sidebar ID '{sidebar_id}'")
            )
            continue
        seen.add(sidebar_id)
        builder = _SidebarBuilder(sidebar_id, errors=errors, warnings=warnings)
        items = builder.build_items(raw_items, path=(), raw_path=sidebar_id)
        if not items and not builder.failed:
            errors.append(EmptyCollection(sidebar_id))
        sidebars.append(Sidebar(sidebar_id=sidebar_id, items=items))
    return SidebarBuildResult(
        sidebars=tuple(sidebars), errors=tuple(errors), warnings=tuple(warnings)
    )


class _SidebarBuilder:
    """Recursive-descent builder for a single sidebar."""

    def __init__(
        self, sidebar_id: str, *, errors: list[Issue], warnings: list[Issue]
    ) -> None:
        self.sidebar_id = sidebar_id
        self.errors = errors
        self.warnings = warnings
        self._error_count = len(errors)
        self._active: set[int] = set()

    @property
    def failed(self) -> bool:
        return len(self.errors) > self._error_count

    def build_items(
        self, raw: object, *, path: tuple[str, ...], raw_path: str
    ) -> tuple[SidebarNode, ...]:
        """Build the ordered children of a sidebar or category."""
        match raw:
            case dict():
                return self._build_shorthand(raw, path=path, raw_path=raw_path)
            case list():
                entries = raw
            case None:
                return ()
            case _:
                self.errors.append(
                    InvalidValue(
                        raw_path, "items must be a list or a mapping of categories"
                    )
                )
                return ()

        nodes: list[SidebarNode] = []
        seen_labels: set[str] = set()
        for index, entry in enumerate(entries):
            entry_path = _join_path(raw_path, index)
            if _is_shorthand(entry):
                built = self._build_shorthand(entry, path=path, raw_path=entry_path)
            else:
                node = self._build_node(entry, path=path, raw_path=entry_path)
                built = () if node is None else (node,)
            for node in built:
                if isinstance(node, Category):
                    if node.label in seen_labels:
                        self.errors.append(
                            DuplicateSiblingLabel(self.sidebar_id, path, node.label)
                        )
                    seen_labels.add(node.label)
                nodes.append(node)
        return tuple(nodes)

    def _build_shorthand(
        self,
        raw: typ.Mapping[typ.Any, typ.Any],
        *,
        path: tuple[str, ...],
        raw_path: str,
    ) -> tuple[SidebarNode, ...]:
        """Expand ``{"Label": [items]}`` into one category per key."""
        nodes: list[SidebarNode] = []
        for raw_label, raw_items in raw.items():
            label = _optional_str(raw_label)
            child_path = _join_path(raw_path, str(raw_label))
            if label is None:
                self.errors.append(MissingField(_join_path(raw_path, "label")))
                continue
            category = self._build_category_body(
                None,
                label=label,
                raw_items=raw_items,
                path=path,
                raw_path=child_path,
                collapsed=None,
                collapsible=None,
            )
            if category is not None:
                nodes.append(category)
        return tuple(nodes)

    def _build_node(
        self, entry: object, *, path: tuple[str, ...], raw_path: str
    ) -> SidebarNode | None:
        """Build a single sidebar item, dispatching on its type tag."""
        match entry:
            case str():
                doc_id = entry.strip()
                if not doc_id:
                    self.errors.append(MissingField(raw_path))
                    return None
                return DocRef(doc_id=doc_id)
            case {"type": "doc"}:
                return self._build_doc(entry, raw_path=raw_path)
            case {"type": "category"}:
                return self._build_category(entry, path=path, raw_path=raw_path)
            case {"type": node_type}:
                self.errors.append(
                    UnknownNodeType(self.sidebar_id, path, str(node_type))
                )
                return None
            case dict():
                self.errors.append(MissingField(_join_path(raw_path, "type")))
                return None
            case _:
                self.errors.append(
                    UnknownNodeType(self.sidebar_id, path, type(entry).__name__)
                )
                return None

    def _build_doc(
        self, entry: typ.Mapping[str, typ.Any], *, raw_path: str
    ) -> DocRef | None:
        doc_id = _optional_str(entry.get("id"))
        if doc_id is None:
            self.errors.append(MissingField(_join_path(raw_path, "id")))
            return None
        return DocRef(doc_id=doc_id, label=_optional_str(entry.get("label")))

    def _build_category(
        self,
        entry: typ.Mapping[str, typ.Any],
        *,
        path: tuple[str, ...],
        raw_path: str,
    ) -> Category | None:
        label = _optional_str(entry.get("label"))
        if label is None:
            self.errors.append(MissingField(_join_path(raw_path, "label")))
            return None
        collapsed = self._optional_flag(entry, "collapsed", raw_path=raw_path)
        collapsible = self._optional_flag(entry, "collapsible", raw_path=raw_path)
        if collapsed and collapsible is False:
            self.errors.append(
                InvalidValue(
                    _join_path(raw_path, "collapsed"),
                    "a non-collapsible category cannot start collapsed",
                )
            )
        return self._build_category_body(
            entry,
            label=label,
            raw_items=entry.get("items"),
            path=path,
            raw_path=_join_path(raw_path, "items"),
            collapsed=collapsed,
            collapsible=collapsible,
        )

    def _build_category_body(
        self,
        owner: typ.Mapping[str, typ.Any] | None,
        *,
        label: str,
        raw_items: object,
        path: tuple[str, ...],
        raw_path: str,
        collapsed: bool | None,
        collapsible: bool | None,
    ) -> Category | None:
        """Recurse into a category's items, refusing to re-enter an ancestor."""
        markers = {
            id(container)
            for container in (owner, raw_items)
            if isinstance(container, (list, dict))
        }
        if markers & self._active:
            self.errors.append(CategoryCycle(self.sidebar_id, path, label))
            return None
        self._active |= markers
        try:
            child_path = (*path, label)
            items = self.build_items(raw_items, path=child_path, raw_path=raw_path)
        finally:
            self._active -= markers
        if not items and not self._has_entries(raw_items):
            warning = EmptyCategory(self.sidebar_id, path, label)
            logger.warning("%s", warning.message)
            self.warnings.append(warning)
        return Category(
            label=label, items=items, collapsed=collapsed, collapsible=collapsible
        )

    @staticmethod
    def _has_entries(raw_items: object) -> bool:
        return isinstance(raw_items, (list, dict)) and bool(raw_items)

    def _optional_flag(
        self, entry: typ.Mapping[str, typ.Any], key: str, *, raw_path: str
    ) -> bool | None:
        value = entry.get(key)
        if value is None or isinstance(value, bool):
            return value
        self.errors.append(
            InvalidValue(_join_path(raw_path, key), "must be true or false")
        )
        return None


def _is_shorthand(entry: object) -> bool:
    """Return True for a ``{"Label": [items]}`` category shorthand mapping."""
    return (
        isinstance(entry, dict)
        and bool(entry)
        and "type" not in entry
        and all(isinstance(value, (list, dict)) for value in entry.values())
    )


__all__ = [
    "Category",
    "DocRef",
    "Sidebar",
    "SidebarBuildResult",
    "SidebarNode",
    "build_sidebars",
]
