"""Typed dataclasses describing a validated documentation-site configuration.

Every class here is frozen and slotted and stores sequences as tuples, so a
validated model cannot be mutated while a build consumes it. Variant types
(navbar items, sidebar nodes) carry a literal ``kind`` tag; consumers
dispatch on it with ``match`` rather than through a class hierarchy.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class I18nConfig:
    """Locale settings; ``default_locale`` is always one of ``locales``."""

    default_locale: str = "en"
    locales: tuple[str, ...] = ("en",)


@dc.dataclass(frozen=True, slots=True)
class SidebarLink:
    """Navbar entry opening the first document of a declared sidebar."""

    label: str
    sidebar_id: str
    position: str = "left"
    kind: typ.Literal["sidebar"] = "sidebar"


@dc.dataclass(frozen=True, slots=True)
class DirectLink:
    """Navbar entry pointing at a site-relative route."""

    label: str
    to: str
    position: str = "left"
    kind: typ.Literal["direct"] = "direct"


@dc.dataclass(frozen=True, slots=True)
class ExternalLink:
    """Navbar entry pointing at an absolute URL."""

    label: str
    href: str
    position: str = "left"
    kind: typ.Literal["external"] = "external"


NavItem = SidebarLink | DirectLink | ExternalLink


@dc.dataclass(frozen=True, slots=True)
class LogoConfig:
    """Navbar logo image."""

    src: str
    alt: str = ""


@dc.dataclass(frozen=True, slots=True)
class NavbarConfig:
    """Navbar title, logo, and the ordered list of items."""

    items: tuple[NavItem, ...] = ()
    title: str | None = None
    logo: LogoConfig | None = None
    hide_on_scroll: bool = False


@dc.dataclass(frozen=True, slots=True)
class FooterLink:
    """Footer hyperlink; exactly one of ``to`` and ``href`` is set."""

    label: str
    to: str | None = None
    href: str | None = None

    @property
    def external(self) -> bool:
        return self.href is not None


@dc.dataclass(frozen=True, slots=True)
class FooterGroup:
    """Column of footer links, optionally titled."""

    items: tuple[FooterLink, ...] = ()
    title: str | None = None


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Footer style, link groups, and copyright line.

    ``flat`` marks a footer declared as a plain list of links rather than
    titled groups; such a footer has exactly one untitled group.
    """

    style: str = "dark"
    groups: tuple[FooterGroup, ...] = ()
    copyright: str | None = None
    flat: bool = False


@dc.dataclass(frozen=True, slots=True)
class PrismConfig:
    """Syntax-highlighting theme pair for light and dark modes."""

    theme: str = "github"
    dark_theme: str = "dracula"
    additional_languages: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class SearchConfig:
    """Hosted search provider credentials."""

    app_id: str
    api_key: str
    index_name: str
    provider: str = "algolia"


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Presentation options consumed by the renderer."""

    navbar: NavbarConfig = dc.field(default_factory=NavbarConfig)
    footer: FooterConfig = dc.field(default_factory=FooterConfig)
    prism: PrismConfig = dc.field(default_factory=PrismConfig)
    search: SearchConfig | None = None
    image: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Global site metadata together with its single theme configuration."""

    title: str
    url: str
    base_url: str
    theme: ThemeConfig
    tagline: str | None = None
    favicon: str | None = None
    organization_name: str | None = None
    project_name: str | None = None
    trailing_slash: bool | None = None
    on_broken_links: str = "throw"
    on_broken_markdown_links: str = "warn"
    i18n: I18nConfig = dc.field(default_factory=I18nConfig)
    docs_route_base: str = "docs"


__all__ = [
    "DirectLink",
    "ExternalLink",
    "FooterConfig",
    "FooterGroup",
    "FooterLink",
    "I18nConfig",
    "LogoConfig",
    "NavItem",
    "NavbarConfig",
    "PrismConfig",
    "SearchConfig",
    "SidebarLink",
    "SiteConfig",
    "ThemeConfig",
]
