"""Cyclopts CLI entrypoint for validating documentation-site configuration.

The ``sitenav`` console script reads one or more site roots (each holding a
``site.yaml``, a ``sidebars.yaml``, and a ``docs/`` tree), validates them
independently, and prints every problem found. Typical usage is running
``sitenav check`` in CI before the site is built, so a broken sidebar or
navbar reference fails fast with a complete list of field paths.

Examples
--------
Validate the site rooted in the current directory:

>>> from sitenav.cli import main
>>> main()  # doctest: +SKIP

Validate two configuration generations side by side as JSON:

>>> from sitenav.cli import app
>>> app(["check", "doc", "doc-next", "--format", "json"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .pipeline import ValidationReport, validate_site
from .sidebars import Category, DocRef, SidebarNode
from .sources import load_site_sources

app = App(name="sitenav", config=cyclopts.config.Env("SITENAV_", command=False))  # type: ignore[unknown-argument]

OutputFormat = typ.Literal["text", "json"]


def _configure_logging(*, verbose: bool) -> None:
    """Send library logs to stderr; only errors unless ``verbose``."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _validate_root(
    root: Path,
    *,
    config: Path | None = None,
    sidebars: Path | None = None,
    docs: Path | None = None,
) -> ValidationReport:
    """Read the inputs of ``root`` and run the validation pipeline on them."""
    sources = load_site_sources(
        root, config_path=config, sidebars_path=sidebars, docs_dir=docs
    )
    return validate_site(sources.config, sources.sidebars, sources.documents)


def _print_report(root: Path, report: ValidationReport) -> None:
    """Print a human-readable report for ``root``."""
    for warning in report.warnings:
        print(f"{root}: warning: {warning.message}")
    for error in report.errors:
        print(f"{root}: error: {error.message}", file=sys.stderr)
    if report.site is not None:
        print(
            f"{root}: ok ({len(report.site.sidebars)} sidebars, "
            f"{len(report.site.documents)} documents)"
        )
    else:
        print(f"{root}: {len(report.errors)} error(s)", file=sys.stderr)


@app.command(help="Validate site configuration, sidebars, and references.")
def check(
    roots: typ.Annotated[
        list[Path] | None, Parameter(help="Site roots to validate (default: .)")
    ] = None,
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Override the site config file")
    ] = None,
    sidebars: typ.Annotated[
        Path | None, Parameter(help="Override the sidebars file")
    ] = None,
    docs: typ.Annotated[
        Path | None, Parameter(help="Override the docs directory")
    ] = None,
    output_format: typ.Annotated[
        OutputFormat, Parameter(name="--format", help="Report format")
    ] = "text",
    strict: typ.Annotated[
        bool, Parameter(help="Treat warnings as failures")
    ] = False,
    verbose: typ.Annotated[bool, Parameter(help="Log debug output")] = False,
) -> None:
    """Validate each site root independently and report every problem.

    Parameters
    ----------
    roots : list[Path] or None, optional
        Site roots to validate; defaults to the current directory.
    config, sidebars, docs : Path or None, optional
        Override the input locations of a single root.
    output_format : {"text", "json"}, optional
        Print human-readable lines or one JSON document keyed by root.
    strict : bool, optional
        Fail when any root has warnings.
    verbose : bool, optional
        Emit debug logging from the validation stages.

    Raises
    ------
    ValueError
        If overrides are combined with more than one root.
    SystemExit
        With status 1 when any root fails validation.
    """
    _configure_logging(verbose=verbose)
    targets = roots or [Path()]
    if len(targets) > 1 and (config or sidebars or docs):
        msg = "Cannot override config/sidebars/docs when checking multiple roots."
        raise ValueError(msg)

    reports = {
        root: _validate_root(root, config=config, sidebars=sidebars, docs=docs)
        for root in targets
    }
    if output_format == "json":
        payload = {str(root): report.to_dict() for root, report in reports.items()}
        print(json.dumps(payload, indent=2))
    else:
        for root, report in reports.items():
            _print_report(root, report)

    failed = any(
        not report.ok or (strict and report.warnings) for report in reports.values()
    )
    if failed:
        raise SystemExit(1)


@app.command(help="Print the validated sidebar trees of a site root.")
def tree(
    root: typ.Annotated[Path, Parameter(help="Site root")] = Path(),
    *,
    sidebar: typ.Annotated[
        str | None, Parameter(help="Only print this sidebar")
    ] = None,
) -> None:
    """Print each sidebar as an indented outline.

    Raises
    ------
    SystemExit
        With status 1 when the site does not validate or ``sidebar`` is not
        declared.
    """
    _configure_logging(verbose=False)
    report = _validate_root(root)
    if report.site is None:
        _print_report(root, report)
        raise SystemExit(1)
    try:
        selected = (
            [report.site.get_sidebar(sidebar)] if sidebar else list(report.site.sidebars)
        )
    except KeyError as exc:
        print(f"{root}: error: {exc.args[0]}", file=sys.stderr)
        raise SystemExit(1) from exc
    for entry in selected:
        print(entry.sidebar_id)
        for line in _outline(entry.items, depth=1):
            print(line)


def _outline(nodes: tuple[SidebarNode, ...], *, depth: int) -> list[str]:
    """Render sidebar nodes as indented outline lines."""
    indent = "  " * depth
    lines: list[str] = []
    for node in nodes:
        match node:
            case DocRef(doc_id=doc_id, label=label):
                suffix = f" ({label})" if label else ""
                lines.append(f"{indent}- {doc_id}{suffix}")
            case Category(label=label, items=items):
                lines.append(f"{indent}+ {label}")
                lines.extend(_outline(items, depth=depth + 1))
    return lines


def main() -> None:
    """Invoke the Cyclopts application that powers the ``sitenav`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
