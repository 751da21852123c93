"""Run the full validation pipeline over one site configuration.

The pipeline loads the site configuration and builds the sidebars (always
both, so every structural problem is reported together), stops if either
stage found errors, and otherwise resolves cross references against the
document corpus. It returns a :class:`ValidationReport` holding either the
validated, immutable :class:`ValidatedSite` or the complete list of errors.

Examples
--------
>>> from sitenav.pipeline import validate_site
>>> report = validate_site(
...     {
...         "title": "vcs",
...         "url": "https://example.org",
...         "baseUrl": "/",
...         "themeConfig": {"navbar": {"items": [
...             {"type": "docSidebar", "sidebarId": "guides", "label": "Guides"},
...         ]}},
...     },
...     {"guides": ["guides/README", "guides/cli-output-format"]},
...     {"guides/README", "guides/cli-output-format"},
... )
>>> report.ok
True
>>> len(report.site.get_sidebar("guides").items)
2
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from .config.loader import load_site_config
from .issues import Issue, SiteValidationError, dedupe_issues, issue_to_dict
from .sidebars import Sidebar, build_sidebars
from .xref import check_references

if typ.TYPE_CHECKING:
    from .config.models import SiteConfig

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class ValidatedSite:
    """A site configuration whose references are all known to resolve."""

    config: SiteConfig
    sidebars: tuple[Sidebar, ...]
    documents: frozenset[str]

    def get_sidebar(self, sidebar_id: str) -> Sidebar:
        """Return the sidebar named ``sidebar_id``."""
        for sidebar in self.sidebars:
            if sidebar.sidebar_id == sidebar_id:
                return sidebar
        available = ", ".join(sidebar.sidebar_id for sidebar in self.sidebars)
        msg = f"Unknown sidebar '{sidebar_id}'. Known sidebars: {available}"
        raise KeyError(msg)


@dc.dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of :func:`validate_site`."""

    site: ValidatedSite | None
    errors: tuple[Issue, ...] = ()
    warnings: tuple[Issue, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> ValidatedSite:
        """Return the validated site or raise :class:`SiteValidationError`."""
        if self.site is None or self.errors:
            raise SiteValidationError(self.errors)
        return self.site

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly summary of the report."""
        return {
            "ok": self.ok,
            "errors": [issue_to_dict(issue) for issue in self.errors],
            "warnings": [issue_to_dict(issue) for issue in self.warnings],
        }


def validate_site(
    config: typ.Mapping[str, typ.Any],
    sidebars: typ.Mapping[str, typ.Any],
    documents: cabc.Iterable[str],
) -> ValidationReport:
    """Validate a site configuration, its sidebars, and their references.

    Parameters
    ----------
    config : Mapping[str, Any]
        Raw site configuration.
    sidebars : Mapping[str, Any]
        Raw sidebar definitions keyed by sidebar ID.
    documents : Iterable[str]
        Document IDs present in the docs tree.

    Returns
    -------
    ValidationReport
        ``site`` is set only when no errors were found. ``errors`` and
        ``warnings`` are deduplicated and keep the order in which they were
        found.
    """
    site_config, config_errors = load_site_config(config)
    built = build_sidebars(sidebars)
    warnings: list[Issue] = list(built.warnings)
    structural = [*config_errors, *built.errors]
    if structural or site_config is None:
        logger.debug("structural validation failed with %d issue(s)", len(structural))
        return ValidationReport(
            site=None,
            errors=tuple(dedupe_issues(structural)),
            warnings=tuple(dedupe_issues(warnings)),
        )

    corpus = frozenset(documents)
    reference_errors, reference_warnings = check_references(
        site_config, built.sidebars, corpus
    )
    warnings.extend(reference_warnings)
    errors = tuple(dedupe_issues(reference_errors))
    logger.debug(
        "validated %d sidebar(s) against %d document(s): %d error(s), %d warning(s)",
        len(built.sidebars),
        len(corpus),
        len(errors),
        len(warnings),
    )
    site = None if errors else ValidatedSite(site_config, built.sidebars, corpus)
    return ValidationReport(
        site=site, errors=errors, warnings=tuple(dedupe_issues(warnings))
    )


__all__ = ["ValidatedSite", "ValidationReport", "validate_site"]
