"""Theme-specific configuration builders (navbar, footer, prism, search).

Each builder appends problems to the shared ``issues`` list instead of
raising, so one pass over ``themeConfig`` reports every malformed entry.
"""

from __future__ import annotations

import typing as typ

from .._constants import (
    DEFAULT_PRISM_DARK_THEME,
    DEFAULT_PRISM_THEME,
    FOOTER_STYLES,
    NAV_ITEM_TYPES,
    NAV_POSITIONS,
)
from ..issues import EmptyCollection, InvalidEnum, InvalidValue, Issue, MissingField
from .helpers import (
    _as_list,
    _as_mapping,
    _choice,
    _join_path,
    _optional_str,
    _require_str,
)
from .models import (
    DirectLink,
    ExternalLink,
    FooterConfig,
    FooterGroup,
    FooterLink,
    LogoConfig,
    NavbarConfig,
    NavItem,
    PrismConfig,
    SearchConfig,
    SidebarLink,
    ThemeConfig,
)


def _build_theme_config(
    payload: typ.Mapping[str, typ.Any], *, path: str, issues: list[Issue]
) -> ThemeConfig:
    """Build the ThemeConfig from the ``themeConfig`` mapping."""
    navbar_path = _join_path(path, "navbar")
    navbar = _build_navbar(
        _as_mapping(payload.get("navbar"), path=navbar_path, issues=issues),
        path=navbar_path,
        issues=issues,
    )
    footer_path = _join_path(path, "footer")
    footer = _build_footer(
        _as_mapping(payload.get("footer"), path=footer_path, issues=issues),
        path=footer_path,
        issues=issues,
    )
    prism_path = _join_path(path, "prism")
    prism = _build_prism(
        _as_mapping(payload.get("prism"), path=prism_path, issues=issues),
        path=prism_path,
        issues=issues,
    )
    search = None
    if payload.get("algolia") is not None:
        algolia_path = _join_path(path, "algolia")
        before = len(issues)
        algolia = _as_mapping(payload.get("algolia"), path=algolia_path, issues=issues)
        if len(issues) == before:
            search = _build_search(algolia, path=algolia_path, issues=issues)
    return ThemeConfig(
        navbar=navbar,
        footer=footer,
        prism=prism,
        search=search,
        image=_optional_str(payload.get("image")),
    )


def _build_navbar(
    payload: typ.Mapping[str, typ.Any], *, path: str, issues: list[Issue]
) -> NavbarConfig:
    """Build the navbar, keeping items in their declared order."""
    items: list[NavItem] = []
    items_path = _join_path(path, "items")
    raw_items = _as_list(payload.get("items"), path=items_path, issues=issues)
    for index, entry in enumerate(raw_items):
        item = _build_nav_item(entry, path=_join_path(items_path, index), issues=issues)
        if item is not None:
            items.append(item)

    logo = None
    logo_raw = payload.get("logo")
    logo_path = _join_path(path, "logo")
    before = len(issues)
    logo_payload = _as_mapping(logo_raw, path=logo_path, issues=issues)
    if logo_raw is not None and len(issues) == before:
        src = _require_str(logo_payload, "src", parent=logo_path, issues=issues)
        logo = LogoConfig(src=src, alt=str(logo_payload.get("alt") or ""))

    return NavbarConfig(
        items=tuple(items),
        title=_optional_str(payload.get("title")),
        logo=logo,
        hide_on_scroll=bool(payload.get("hideOnScroll", False)),
    )


def _build_nav_item(entry: object, *, path: str, issues: list[Issue]) -> NavItem | None:
    """Build one navbar item, selecting its variant from the raw keys."""
    match entry:
        case dict():
            pass
        case _:
            issues.append(InvalidValue(path, "navbar item must be a mapping"))
            return None
    before = len(issues)
    label = _require_str(entry, "label", parent=path, issues=issues)
    position = _choice(
        entry, "position", NAV_POSITIONS, default="left", parent=path, issues=issues
    )
    item: NavItem | None
    match entry:
        case {"type": "docSidebar"}:
            sidebar_id = _require_str(entry, "sidebarId", parent=path, issues=issues)
            item = SidebarLink(label=label, sidebar_id=sidebar_id, position=position)
        case {"type": item_type} if item_type not in (None, "default"):
            issues.append(
                InvalidEnum(_join_path(path, "type"), NAV_ITEM_TYPES, str(item_type))
            )
            item = None
        case {"to": to} if _optional_str(to):
            item = DirectLink(label=label, to=str(to).strip(), position=position)
        case {"href": href} if _optional_str(href):
            item = ExternalLink(label=label, href=str(href).strip(), position=position)
        case _:
            issues.append(MissingField(_join_path(path, "to")))
            item = None
    return item if len(issues) == before else None


def _build_footer(
    payload: typ.Mapping[str, typ.Any], *, path: str, issues: list[Issue]
) -> FooterConfig:
    """Build footer link groups.

    Docusaurus accepts either a list of titled groups or a flat list of
    links; a flat list becomes a single untitled group.
    """
    style = _choice(
        payload, "style", FOOTER_STYLES, default="dark", parent=path, issues=issues
    )
    links_path = _join_path(path, "links")
    raw_links = _as_list(payload.get("links"), path=links_path, issues=issues)
    groups: list[FooterGroup] = []
    flat = False
    if raw_links and all(_is_footer_group(entry) for entry in raw_links):
        for index, entry in enumerate(raw_links):
            items_path = _join_path(_join_path(links_path, index), "items")
            before = len(issues)
            raw_items = _as_list(entry.get("items"), path=items_path, issues=issues)
            if not raw_items and len(issues) == before:
                issues.append(EmptyCollection(items_path))
            groups.append(
                FooterGroup(
                    items=_build_footer_links(raw_items, path=items_path, issues=issues),
                    title=_optional_str(entry.get("title")),
                )
            )
    elif raw_links:
        flat = True
        groups.append(
            FooterGroup(
                items=_build_footer_links(raw_links, path=links_path, issues=issues)
            )
        )
    return FooterConfig(
        style=style,
        groups=tuple(groups),
        copyright=_optional_str(payload.get("copyright")),
        flat=flat,
    )


def _is_footer_group(entry: object) -> bool:
    return isinstance(entry, dict) and "items" in entry


def _build_footer_links(
    entries: list[typ.Any], *, path: str, issues: list[Issue]
) -> tuple[FooterLink, ...]:
    """Build the footer links of one group, dropping malformed entries."""
    links = (
        _build_footer_link(entry, path=_join_path(path, index), issues=issues)
        for index, entry in enumerate(entries)
    )
    return tuple(link for link in links if link is not None)


def _build_footer_link(
    entry: object, *, path: str, issues: list[Issue]
) -> FooterLink | None:
    """Build a footer link that targets either a route or a URL."""
    match entry:
        case {"label": label, **rest} if _optional_str(label):
            pass
        case dict():
            issues.append(MissingField(_join_path(path, "label")))
            return None
        case _:
            issues.append(InvalidValue(path, "footer link must be a mapping"))
            return None
    to = _optional_str(rest.get("to"))
    href = _optional_str(rest.get("href"))
    if to and href:
        issues.append(InvalidValue(path, "set only one of 'to' and 'href'"))
        return None
    if not (to or href):
        issues.append(MissingField(_join_path(path, "to")))
        return None
    return FooterLink(label=str(label).strip(), to=to, href=href)


def _build_prism(
    payload: typ.Mapping[str, typ.Any], *, path: str, issues: list[Issue]
) -> PrismConfig:
    """Build the light/dark highlight theme pair."""
    languages = _as_list(
        payload.get("additionalLanguages"),
        path=_join_path(path, "additionalLanguages"),
        issues=issues,
    )
    return PrismConfig(
        theme=_optional_str(payload.get("theme")) or DEFAULT_PRISM_THEME,
        dark_theme=_optional_str(payload.get("darkTheme")) or DEFAULT_PRISM_DARK_THEME,
        additional_languages=tuple(str(language) for language in languages),
    )


def _build_search(
    payload: typ.Mapping[str, typ.Any], *, path: str, issues: list[Issue]
) -> SearchConfig | None:
    """Build the Algolia search descriptor."""
    before = len(issues)
    app_id = _require_str(payload, "appId", parent=path, issues=issues)
    api_key = _require_str(payload, "apiKey", parent=path, issues=issues)
    index_name = _require_str(payload, "indexName", parent=path, issues=issues)
    if len(issues) != before:
        return None
    return SearchConfig(app_id=app_id, api_key=api_key, index_name=index_name)


__all__ = ["_build_theme_config"]
