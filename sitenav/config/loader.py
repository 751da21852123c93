"""Load a raw site configuration mapping into typed dataclasses."""

from __future__ import annotations

import typing as typ

from .._constants import BROKEN_LINK_POLICIES, DEFAULT_DOCS_ROUTE_BASE, DEFAULT_LOCALE
from ..issues import EmptyCollection, InvalidEnum, InvalidValue, Issue, MissingField
from .helpers import (
    _as_list,
    _as_mapping,
    _choice,
    _join_path,
    _optional_str,
    _require_str,
)
from .models import I18nConfig, SiteConfig
from .theme import _build_theme_config


def load_site_config(
    payload: typ.Mapping[str, typ.Any],
) -> tuple[SiteConfig | None, list[Issue]]:
    """Validate the raw site configuration and build a :class:`SiteConfig`.

    Parameters
    ----------
    payload : Mapping[str, Any]
        Already-parsed configuration using the Docusaurus key names
        (``title``, ``url``, ``baseUrl``, ``i18n``, ``themeConfig`` ...).

    Returns
    -------
    tuple[SiteConfig | None, list[Issue]]
        The validated configuration and an empty list, or ``None`` and every
        problem found. Problems are never raised; all fields are checked so
        the caller sees the full list at once.

    Examples
    --------
    >>> from sitenav.config import load_site_config
    >>> config, issues = load_site_config(
    ...     {"title": "vcs", "url": "https://example.org", "baseUrl": "/vcs/"}
    ... )
    >>> config.i18n.default_locale, issues
    ('en', [])
    >>> _, issues = load_site_config({"url": "https://example.org", "baseUrl": "/"})
    >>> [issue.path for issue in issues]
    ['title']
    """
    issues: list[Issue] = []
    title = _require_str(payload, "title", parent="", issues=issues)
    url = _require_str(payload, "url", parent="", issues=issues)
    base_url = _require_str(payload, "baseUrl", parent="", issues=issues)
    if base_url and not (base_url.startswith("/") and base_url.endswith("/")):
        issues.append(InvalidValue("baseUrl", "must start and end with '/'"))

    trailing_slash = payload.get("trailingSlash")
    if trailing_slash is not None and not isinstance(trailing_slash, bool):
        issues.append(InvalidValue("trailingSlash", "must be true, false, or unset"))
        trailing_slash = None

    on_broken_links = _choice(
        payload,
        "onBrokenLinks",
        BROKEN_LINK_POLICIES,
        default="throw",
        parent="",
        issues=issues,
    )
    on_broken_markdown_links = _choice(
        payload,
        "onBrokenMarkdownLinks",
        BROKEN_LINK_POLICIES,
        default="warn",
        parent="",
        issues=issues,
    )
    i18n = _build_i18n(payload.get("i18n"), issues=issues)
    theme = _build_theme_config(
        _as_mapping(payload.get("themeConfig"), path="themeConfig", issues=issues),
        path="themeConfig",
        issues=issues,
    )

    if issues:
        return None, issues
    return (
        SiteConfig(
            title=title,
            url=url,
            base_url=base_url,
            theme=theme,
            tagline=_optional_str(payload.get("tagline")),
            favicon=_optional_str(payload.get("favicon")),
            organization_name=_optional_str(payload.get("organizationName")),
            project_name=_optional_str(payload.get("projectName")),
            trailing_slash=trailing_slash,
            on_broken_links=on_broken_links,
            on_broken_markdown_links=on_broken_markdown_links,
            i18n=i18n,
            docs_route_base=_docs_route_base(payload.get("presets")),
        ),
        issues,
    )


def _build_i18n(value: object | None, *, issues: list[Issue]) -> I18nConfig:
    """Build locale settings, defaulting to a single English locale."""
    before = len(issues)
    payload = _as_mapping(value, path="i18n", issues=issues)
    if value is None or len(issues) != before:
        return I18nConfig()
    raw_locales = _as_list(payload.get("locales"), path="i18n.locales", issues=issues)
    candidates = (_optional_str(entry) for entry in raw_locales)
    locales = tuple(locale for locale in candidates if locale)
    if not locales and len(issues) == before:
        issues.append(EmptyCollection("i18n.locales"))
    default_locale = _require_str(
        payload, "defaultLocale", parent="i18n", issues=issues
    )
    if default_locale and locales and default_locale not in locales:
        issues.append(InvalidEnum("i18n.defaultLocale", locales, default_locale))
    return I18nConfig(
        default_locale=default_locale or DEFAULT_LOCALE,
        locales=locales or (DEFAULT_LOCALE,),
    )


def _docs_route_base(presets: object | None) -> str:
    """Return the docs ``routeBasePath`` declared by a preset, if any."""
    for entry in _as_list(presets):
        match entry:
            case [_name, {"docs": {"routeBasePath": route}}]:
                return str(route).strip("/")
            case _:
                continue
    return DEFAULT_DOCS_ROUTE_BASE


__all__ = ["load_site_config"]
