"""Common literal values used across sitenav.

These constants keep enumerations and default file names centralized so the
loader, builder, validator, and CLI can import the same values without
drifting. Intended for internal use within the sitenav package.

Examples
--------
>>> from sitenav import _constants
>>> "right" in _constants.NAV_POSITIONS
True
>>> _constants.SITE_CONFIG_FILENAME
'site.yaml'
"""

NAV_POSITIONS: tuple[str, ...] = ("left", "right")
BROKEN_LINK_POLICIES: tuple[str, ...] = ("ignore", "log", "warn", "throw")
FOOTER_STYLES: tuple[str, ...] = ("dark", "light")
NAV_ITEM_TYPES: tuple[str, ...] = ("default", "docSidebar")

DEFAULT_LOCALE = "en"
DEFAULT_DOCS_ROUTE_BASE = "docs"
DEFAULT_PRISM_THEME = "github"
DEFAULT_PRISM_DARK_THEME = "dracula"

SITE_CONFIG_FILENAME = "site.yaml"
SIDEBARS_FILENAME = "sidebars.yaml"
DOCS_DIRNAME = "docs"
DOC_SUFFIXES: tuple[str, ...] = (".md", ".mdx")
INDEX_DOC_NAMES: tuple[str, ...] = ("index", "readme")
