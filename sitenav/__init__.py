"""Validate documentation-site configuration before a static build.

This package checks a site's global configuration, navbar, footer, and
sidebar trees against the documents present in its docs tree, and returns
either an immutable validated model or every problem found.

Exports
-------
- ``validate_site``: Run the full validation pipeline on in-memory inputs.
- ``ValidationReport`` / ``ValidatedSite``: Pipeline results.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from sitenav import validate_site
>>> report = validate_site(
...     {"title": "t", "url": "https://example.org", "baseUrl": "/"},
...     {"guides": ["guides/README"]},
...     {"guides/README"},
... )
>>> report.ok
True
"""

from __future__ import annotations

from .cli import app, main
from .issues import SiteConfigError, SiteValidationError
from .pipeline import ValidatedSite, ValidationReport, validate_site

__all__ = [
    "SiteConfigError",
    "SiteValidationError",
    "ValidatedSite",
    "ValidationReport",
    "app",
    "main",
    "validate_site",
]
