"""Validate raw documentation-site configuration into typed dataclasses.

This subpackage checks the already-parsed site configuration (title, URL,
base path, locales, broken-link policy, and the ``themeConfig`` block with
its navbar, footer, prism, and search settings) and produces frozen
dataclasses (:class:`SiteConfig`, :class:`ThemeConfig`, etc.) that the
sidebar builder, cross-reference validator, and renderer consume. The
primary entry point is :func:`load_site_config`, which returns the
configuration together with every problem it found.

Examples
--------
>>> from sitenav.config import load_site_config
>>> config, issues = load_site_config({
...     "title": "vcs",
...     "url": "https://example.org",
...     "baseUrl": "/vcs/",
...     "themeConfig": {"navbar": {"items": [
...         {"type": "docSidebar", "sidebarId": "guides", "label": "Guides"},
...     ]}},
... })
>>> config.theme.navbar.items[0].sidebar_id
'guides'
"""

from .loader import load_site_config
from .models import (
    DirectLink,
    ExternalLink,
    FooterConfig,
    FooterGroup,
    FooterLink,
    I18nConfig,
    LogoConfig,
    NavbarConfig,
    NavItem,
    PrismConfig,
    SearchConfig,
    SidebarLink,
    SiteConfig,
    ThemeConfig,
)

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
    "load_site_config",
]
