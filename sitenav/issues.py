"""Typed findings reported by the sitenav validation stages.

Every stage returns issue values rather than raising, so a single run can
report every problem it finds. Each issue is a frozen dataclass carrying a
``kind`` tag and enough location data (a dotted field path, or a sidebar ID
plus the chain of category labels) to be displayed without further context.

Examples
--------
>>> from sitenav.issues import MissingField, InvalidEnum
>>> MissingField("title").message
'title: required field is missing or empty'
>>> InvalidEnum("themeConfig.navbar.items[0].position", ("left", "right")).message
"themeConfig.navbar.items[0].position: expected one of 'left', 'right'"
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


def _format_tree_path(sidebar_id: str, path: tuple[str, ...]) -> str:
    """Render a sidebar location as ``sidebar > Category > Child``."""
    return " > ".join((sidebar_id, *path))


@dc.dataclass(frozen=True, slots=True)
class MissingField:
    """A required field is absent or empty."""

    path: str
    kind: typ.ClassVar[str] = "missing_field"

    @property
    def message(self) -> str:
        return f"{self.path}: required field is missing or empty"


@dc.dataclass(frozen=True, slots=True)
class InvalidEnum:
    """A field holds a value outside its permitted set."""

    path: str
    allowed: tuple[str, ...]
    value: str | None = None
    kind: typ.ClassVar[str] = "invalid_enum"

    @property
    def message(self) -> str:
        options = ", ".join(repr(option) for option in self.allowed)
        return f"{self.path}: expected one of {options}"


@dc.dataclass(frozen=True, slots=True)
class InvalidValue:
    """A field is present but malformed."""

    path: str
    reason: str
    kind: typ.ClassVar[str] = "invalid_value"

    @property
    def message(self) -> str:
        return f"{self.path}: {self.reason}"


@dc.dataclass(frozen=True, slots=True)
class EmptyCollection:
    """A list that must hold at least one entry is empty."""

    path: str
    kind: typ.ClassVar[str] = "empty_collection"

    @property
    def message(self) -> str:
        return f"{self.path}: must contain at least one entry"


@dc.dataclass(frozen=True, slots=True)
class UnknownNodeType:
    """A sidebar entry declares a ``type`` the builder does not support."""

    sidebar_id: str
    path: tuple[str, ...]
    node_type: str
    kind: typ.ClassVar[str] = "unknown_node_type"

    @property
    def message(self) -> str:
        location = _format_tree_path(self.sidebar_id, self.path)
        return f"{location}: unknown sidebar item type {self.node_type!r}"


@dc.dataclass(frozen=True, slots=True)
class DuplicateSiblingLabel:
    """Two sibling categories share the same label."""

    sidebar_id: str
    path: tuple[str, ...]
    label: str
    kind: typ.ClassVar[str] = "duplicate_sibling_label"

    @property
    def message(self) -> str:
        location = _format_tree_path(self.sidebar_id, self.path)
        return f"{location}: duplicate category label {self.label!r}"


@dc.dataclass(frozen=True, slots=True)
class CategoryCycle:
    """A category contains itself, directly or through a descendant."""

    sidebar_id: str
    path: tuple[str, ...]
    label: str
    kind: typ.ClassVar[str] = "category_cycle"

    @property
    def message(self) -> str:
        location = _format_tree_path(self.sidebar_id, self.path)
        return f"{location}: category {self.label!r} contains itself"


@dc.dataclass(frozen=True, slots=True)
class EmptyCategory:
    """A category declares no children. Reported as a warning."""

    sidebar_id: str
    path: tuple[str, ...]
    label: str
    kind: typ.ClassVar[str] = "empty_category"

    @property
    def message(self) -> str:
        location = _format_tree_path(self.sidebar_id, self.path)
        return f"{location}: category {self.label!r} has no items"


@dc.dataclass(frozen=True, slots=True)
class DanglingSidebarReference:
    """A navbar item links to a sidebar that is not declared."""

    nav_item_label: str
    sidebar_id: str
    kind: typ.ClassVar[str] = "dangling_sidebar_reference"

    @property
    def message(self) -> str:
        return (
            f"navbar item {self.nav_item_label!r}: "
            f"unknown sidebar {self.sidebar_id!r}"
        )


@dc.dataclass(frozen=True, slots=True)
class DanglingDocumentReference:
    """A sidebar references a document missing from the corpus."""

    sidebar_id: str
    path: tuple[str, ...]
    doc_id: str
    kind: typ.ClassVar[str] = "dangling_document_reference"

    @property
    def message(self) -> str:
        location = _format_tree_path(self.sidebar_id, self.path)
        return f"{location}: unknown document {self.doc_id!r}"


@dc.dataclass(frozen=True, slots=True)
class BrokenLink:
    """An internal docs link does not resolve to any document route."""

    path: str
    target: str
    kind: typ.ClassVar[str] = "broken_link"

    @property
    def message(self) -> str:
        return f"{self.path}: link {self.target!r} does not match any document"


Issue = (
    MissingField
    | InvalidEnum
    | InvalidValue
    | EmptyCollection
    | UnknownNodeType
    | DuplicateSiblingLabel
    | CategoryCycle
    | EmptyCategory
    | DanglingSidebarReference
    | DanglingDocumentReference
    | BrokenLink
)


class SiteValidationError(SiteConfigError):
    """Raised by :meth:`ValidationReport.raise_for_errors` on invalid input."""

    def __init__(self, issues: typ.Sequence[Issue]) -> None:
        self.issues = tuple(issues)
        lines = "\n".join(f"- {issue.message}" for issue in self.issues)
        msg = f"Site configuration has {len(self.issues)} problem(s):\n{lines}"
        super().__init__(msg)


def issue_to_dict(issue: Issue) -> dict[str, object]:
    """Return a JSON-friendly mapping describing ``issue``."""
    payload: dict[str, object] = {"kind": issue.kind, "message": issue.message}
    for field in dc.fields(issue):
        value = getattr(issue, field.name)
        payload[field.name] = list(value) if isinstance(value, tuple) else value
    return payload


def dedupe_issues(issues: typ.Iterable[Issue]) -> list[Issue]:
    """Drop repeated issues while preserving first-seen order."""
    seen: set[Issue] = set()
    unique: list[Issue] = []
    for issue in issues:
        if issue in seen:
            continue
        seen.add(issue)
        unique.append(issue)
    return unique


__all__ = [
    "BrokenLink",
    "CategoryCycle",
    "DanglingDocumentReference",
    "DanglingSidebarReference",
    "DuplicateSiblingLabel",
    "EmptyCategory",
    "EmptyCollection",
    "InvalidEnum",
    "InvalidValue",
    "Issue",
    "MissingField",
    "SiteConfigError",
    "SiteValidationError",
    "UnknownNodeType",
    "dedupe_issues",
    "issue_to_dict",
]
