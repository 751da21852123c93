"""Resolve the weak references between navbar, footer, sidebars, and documents.

This is the last validation stage. It needs a validated :class:`SiteConfig`,
the built sidebars, and the document corpus, and it never stops early: every
dangling sidebar reference, dangling document reference, and broken docs link
is reported in one pass, in declaration order.

Internal links are matched against the routes Docusaurus would give each
document: ``/<docs route base>/<doc id>/``, plus the directory route for a
document named ``index``, ``README``, or after its parent directory.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from urllib.parse import urlsplit

from ._constants import INDEX_DOC_NAMES
from .config.models import DirectLink, SidebarLink, SiteConfig
from .issues import (
    BrokenLink,
    DanglingDocumentReference,
    DanglingSidebarReference,
    InvalidValue,
    Issue,
)

if typ.TYPE_CHECKING:
    from .sidebars import Sidebar


def check_references(
    config: SiteConfig,
    sidebars: cabc.Iterable[Sidebar],
    documents: cabc.Iterable[str],
) -> tuple[list[Issue], list[Issue]]:
    """Verify that every reference in the site resolves.

    Parameters
    ----------
    config : SiteConfig
        Validated site configuration whose navbar and footer are checked.
    sidebars : Iterable[Sidebar]
        Validated sidebar trees.
    documents : Iterable[str]
        Document IDs available in the docs tree.

    Returns
    -------
    tuple[list[Issue], list[Issue]]
        Errors and warnings. Broken docs links are errors, warnings, or
        dropped according to ``config.on_broken_links``.

    Examples
    --------
    >>> from sitenav.config import load_site_config
    >>> from sitenav.sidebars import build_sidebars
    >>> config, _ = load_site_config({
    ...     "title": "t", "url": "https://example.org", "baseUrl": "/",
    ...     "themeConfig": {"navbar": {"items": [
    ...         {"type": "docSidebar", "sidebarId": "api", "label": "API"},
    ...     ]}},
    ... })
    >>> built = build_sidebars({"guides": ["guides/README"]})
    >>> errors, _ = check_references(config, built.sidebars, {"guides/README"})
    >>> [error.sidebar_id for error in errors]
    ['api']
    """
    sidebar_list = list(sidebars)
    corpus = frozenset(documents)
    errors: list[Issue] = []
    errors.extend(
        _check_sidebar_links(config, {s.sidebar_id: s for s in sidebar_list})
    )
    for sidebar in sidebar_list:
        errors.extend(
            DanglingDocumentReference(sidebar.sidebar_id, path, ref.doc_id)
            for path, ref in sidebar.iter_doc_refs()
            if ref.doc_id not in corpus
        )

    warnings: list[Issue] = []
    match config.on_broken_links:
        case "throw":
            errors.extend(_check_docs_links(config, corpus))
        case "warn" | "log":
            warnings.extend(_check_docs_links(config, corpus))
        case _:
            pass
    return errors, warnings


def _check_sidebar_links(
    config: SiteConfig, declared: cabc.Mapping[str, Sidebar]
) -> cabc.Iterator[Issue]:
    """Report unknown sidebars once each, and links to sidebars with no docs."""
    reported: set[str] = set()
    for index, item in enumerate(config.theme.navbar.items):
        if not isinstance(item, SidebarLink) or item.sidebar_id in reported:
            continue
        sidebar = declared.get(item.sidebar_id)
        if sidebar is None:
            reported.add(item.sidebar_id)
            yield DanglingSidebarReference(item.label, item.sidebar_id)
        elif sidebar.first_doc_id() is None:
            reported.add(item.sidebar_id)
            yield InvalidValue(
                f"themeConfig.navbar.items[{index}].sidebarId",
                f"sidebar '{item.sidebar_id}' contains no documents",
            )


def _check_docs_links(config: SiteConfig, corpus: frozenset[str]) -> list[Issue]:
    """Return a BrokenLink for each internal docs link with no document."""
    base = config.docs_route_base.strip("/")
    if not base:
        return []
    routes = document_routes(corpus, base)
    prefix = f"/{base}/"
    broken: list[Issue] = []
    for field_path, target in _internal_links(config):
        route = _normalize_route(target)
        if route.startswith(prefix) and route not in routes:
            broken.append(BrokenLink(field_path, target))
    return broken


def _internal_links(config: SiteConfig) -> cabc.Iterator[tuple[str, str]]:
    """Yield ``(field path, target)`` for every site-relative link."""
    for index, item in enumerate(config.theme.navbar.items):
        if isinstance(item, DirectLink):
            yield f"themeConfig.navbar.items[{index}].to", item.to
    footer = config.theme.footer
    for group_index, group in enumerate(footer.groups):
        for link_index, link in enumerate(group.items):
            if link.to is None:
                continue
            if footer.flat:
                yield f"themeConfig.footer.links[{link_index}].to", link.to
            else:
                yield (
                    f"themeConfig.footer.links[{group_index}].items[{link_index}].to",
                    link.to,
                )


def document_routes(documents: cabc.Iterable[str], route_base: str) -> frozenset[str]:
    """Return every route under ``/<route_base>/`` that serves a document.

    >>> sorted(document_routes({"odoc/odoc", "guides/README"}, "docs"))
    ['/docs/guides/', '/docs/guides/README/', '/docs/odoc/', '/docs/odoc/odoc/']
    """
    routes: set[str] = set()
    for doc_id in documents:
        segments = [segment for segment in doc_id.split("/") if segment]
        if not segments:
            continue
        routes.add(_join_route(route_base, segments))
        name = segments[-1]
        parent = segments[-2] if len(segments) > 1 else None
        if name.lower() in INDEX_DOC_NAMES or name == parent:
            routes.add(_join_route(route_base, segments[:-1]))
    return frozenset(routes)


def _join_route(route_base: str, segments: cabc.Sequence[str]) -> str:
    parts = [part for part in (route_base, *segments) if part]
    return "/" + "/".join(parts) + "/" if parts else "/"


def _normalize_route(target: str) -> str:
    """Drop query and fragment and force leading and trailing slashes."""
    path = urlsplit(target).path or "/"
    if not path.startswith("/"):
        path = f"/{path}"
    if not path.endswith("/"):
        path = f"{path}/"
    return path


__all__ = ["check_references", "document_routes"]
