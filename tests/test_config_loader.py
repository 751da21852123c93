"""Unit tests for the site configuration loader.

These tests cover :func:`sitenav.config.load_site_config`: required fields,
locale rules, enumerated fields, navbar variant selection, footer groups,
and the guarantee that every problem is reported in a single pass with a
dotted field path.

Usage
-----
Run ``pytest tests/test_config_loader.py -v``. No fixtures are required.
"""

from __future__ import annotations

import copy
import typing as typ

import pytest

from sitenav.config import (
    DirectLink,
    ExternalLink,
    FooterLink,
    SidebarLink,
    load_site_config,
)
from sitenav.issues import EmptyCollection, InvalidEnum, InvalidValue, MissingField


def _raw_config(**overrides: typ.Any) -> dict[str, typ.Any]:
    """Return a valid raw configuration modelled on a small project site."""
    raw: dict[str, typ.Any] = {
        "title": "ocaml-vcs",
        "tagline": "A versatile OCaml library for Git interaction",
        "favicon": "img/favicon.ico",
        "url": "https://mbarbin.github.io",
        "baseUrl": "/vcs/",
        "organizationName": "mbarbin",
        "projectName": "vcs",
        "trailingSlash": True,
        "onBrokenLinks": "throw",
        "onBrokenMarkdownLinks": "warn",
        "i18n": {"defaultLocale": "en", "locales": ["en"]},
        "themeConfig": {
            "image": "img/ocaml-vcs.png",
            "navbar": {
                "hideOnScroll": True,
                "title": "ocaml-vcs",
                "logo": {"alt": "Site Logo", "src": "img/ocaml-vcs.png"},
                "items": [
                    {
                        "type": "docSidebar",
                        "sidebarId": "designSidebar",
                        "position": "left",
                        "label": "Design",
                    },
                    {"to": "/blog/", "label": "Blog", "position": "left"},
                    {
                        "href": "https://github.com/mbarbin/vcs",
                        "label": "GitHub",
                        "position": "right",
                    },
                ],
            },
            "footer": {
                "style": "dark",
                "links": [
                    {
                        "title": "Docs",
                        "items": [{"label": "Design", "to": "/docs/design/traits/"}],
                    },
                    {
                        "title": "More",
                        "items": [
                            {"label": "Blog", "to": "/blog"},
                            {"label": "GitHub", "href": "https://github.com/mbarbin/vcs"},
                        ],
                    },
                ],
                "copyright": "Copyright 2024 Mathieu Barbin.",
            },
            "prism": {
                "theme": "github",
                "darkTheme": "dracula",
                "additionalLanguages": ["bash", "diff", "json", "ocaml"],
            },
        },
    }
    raw.update(overrides)
    return raw


def test_valid_config_builds_site() -> None:
    """A complete configuration should load without issues."""
    config, issues = load_site_config(_raw_config())
    assert issues == [], f"Expected no issues, got {issues!r}"
    assert config is not None
    assert config.title == "ocaml-vcs"
    assert config.base_url == "/vcs/"
    assert config.trailing_slash is True
    assert config.i18n.locales == ("en",)
    assert config.theme.prism.dark_theme == "dracula"
    assert config.theme.prism.additional_languages == ("bash", "diff", "json", "ocaml")
    assert config.theme.navbar.logo is not None
    assert config.theme.navbar.logo.src == "img/ocaml-vcs.png"


def test_navbar_variants_preserve_order() -> None:
    """Navbar items should map to their variants in declared order."""
    config, _ = load_site_config(_raw_config())
    assert config is not None
    items = config.theme.navbar.items
    assert items == (
        SidebarLink(label="Design", sidebar_id="designSidebar", position="left"),
        DirectLink(label="Blog", to="/blog/", position="left"),
        ExternalLink(label="GitHub", href="https://github.com/mbarbin/vcs", position="right"),
    ), f"Unexpected navbar items: {items!r}"
    assert [item.kind for item in items] == ["sidebar", "direct", "external"]


def test_footer_groups_keep_links() -> None:
    """Footer groups should keep titles and internal/external links."""
    config, _ = load_site_config(_raw_config())
    assert config is not None
    groups = config.theme.footer.groups
    assert [group.title for group in groups] == ["Docs", "More"]
    assert not config.theme.footer.flat
    assert groups[1].items[1] == FooterLink(
        label="GitHub", href="https://github.com/mbarbin/vcs"
    )
    assert groups[1].items[1].external


def test_flat_footer_links_become_single_group() -> None:
    """A flat footer link list should become one untitled group."""
    raw = _raw_config()
    raw["themeConfig"]["footer"] = {"links": [{"label": "Blog", "to": "/blog"}]}
    config, issues = load_site_config(raw)
    assert issues == []
    assert config is not None
    assert len(config.theme.footer.groups) == 1
    assert config.theme.footer.groups[0].title is None
    assert config.theme.footer.flat


def test_missing_required_fields_are_all_reported() -> None:
    """Every missing required field should be reported, not just the first."""
    raw = _raw_config()
    for key in ("title", "url", "baseUrl"):
        del raw[key]
    config, issues = load_site_config(raw)
    assert config is None
    assert issues == [
        MissingField("title"),
        MissingField("url"),
        MissingField("baseUrl"),
    ], f"Unexpected issues: {issues!r}"


def test_defaults_apply_without_optional_sections() -> None:
    """Only title, url, and baseUrl are required."""
    config, issues = load_site_config(
        {"title": "t", "url": "https://example.org", "baseUrl": "/"}
    )
    assert issues == []
    assert config is not None
    assert config.i18n.default_locale == "en"
    assert config.on_broken_links == "throw"
    assert config.on_broken_markdown_links == "warn"
    assert config.theme.navbar.items == ()
    assert config.theme.search is None
    assert config.docs_route_base == "docs"


def test_default_locale_must_be_declared() -> None:
    """The default locale must be one of the declared locales."""
    raw = _raw_config(i18n={"defaultLocale": "fr", "locales": ["en", "de"]})
    config, issues = load_site_config(raw)
    assert config is None
    assert issues == [InvalidEnum("i18n.defaultLocale", ("en", "de"), "fr")]


def test_empty_locale_list_is_reported() -> None:
    """An empty locale list should be reported as an empty collection."""
    raw = _raw_config(i18n={"defaultLocale": "en", "locales": []})
    _, issues = load_site_config(raw)
    assert issues == [EmptyCollection("i18n.locales")]


def test_invalid_position_reports_field_path() -> None:
    """A navbar position outside left/right should name the exact item."""
    raw = _raw_config()
    raw["themeConfig"]["navbar"]["items"][2]["position"] = "center"
    _, issues = load_site_config(raw)
    assert issues == [
        InvalidEnum("themeConfig.navbar.items[2].position", ("left", "right"), "center")
    ], f"Unexpected issues: {issues!r}"


def test_navbar_item_requires_label() -> None:
    """Navbar items with an empty label should be reported."""
    raw = _raw_config()
    raw["themeConfig"]["navbar"]["items"][0]["label"] = "  "
    _, issues = load_site_config(raw)
    assert issues == [MissingField("themeConfig.navbar.items[0].label")]


def test_doc_sidebar_item_requires_sidebar_id() -> None:
    """A docSidebar navbar item without sidebarId should be reported."""
    raw = _raw_config()
    del raw["themeConfig"]["navbar"]["items"][0]["sidebarId"]
    _, issues = load_site_config(raw)
    assert issues == [MissingField("themeConfig.navbar.items[0].sidebarId")]


def test_unknown_navbar_type_is_invalid_enum() -> None:
    """Navbar item types other than default/docSidebar should be rejected."""
    raw = _raw_config()
    raw["themeConfig"]["navbar"]["items"].append(
        {"type": "dropdown", "label": "More", "position": "right"}
    )
    _, issues = load_site_config(raw)
    assert len(issues) == 1
    issue = issues[0]
    assert isinstance(issue, InvalidEnum)
    assert issue.path == "themeConfig.navbar.items[3].type"
    assert issue.value == "dropdown"


def test_navbar_item_without_target_is_missing_to() -> None:
    """A plain navbar item needs a ``to`` or ``href`` target."""
    raw = _raw_config()
    raw["themeConfig"]["navbar"]["items"].append({"label": "Nowhere"})
    _, issues = load_site_config(raw)
    assert issues == [MissingField("themeConfig.navbar.items[3].to")]


def test_invalid_enums_and_values_are_collected() -> None:
    """Broken-link policy, footer style, baseUrl, and trailingSlash are checked together."""
    raw = _raw_config(onBrokenLinks="explode", baseUrl="vcs", trailingSlash="yes")
    raw["themeConfig"]["footer"]["style"] = "neon"
    _, issues = load_site_config(raw)
    paths = [issue.path for issue in issues]
    assert paths == [
        "baseUrl",
        "trailingSlash",
        "onBrokenLinks",
        "themeConfig.footer.style",
    ], f"Unexpected issue paths: {paths!r}"
    assert isinstance(issues[0], InvalidValue)
    assert isinstance(issues[2], InvalidEnum)


def test_footer_link_with_both_targets_is_invalid() -> None:
    """Footer links must use exactly one of ``to`` and ``href``."""
    raw = _raw_config()
    raw["themeConfig"]["footer"]["links"][0]["items"][0]["href"] = "https://x.invalid"
    _, issues = load_site_config(raw)
    assert issues == [
        InvalidValue(
            "themeConfig.footer.links[0].items[0]", "set only one of 'to' and 'href'"
        )
    ]


def test_algolia_block_requires_credentials() -> None:
    """A search block must carry appId, apiKey, and indexName."""
    raw = _raw_config()
    raw["themeConfig"]["algolia"] = {"appId": "APP", "indexName": "vcs"}
    _, issues = load_site_config(raw)
    assert issues == [MissingField("themeConfig.algolia.apiKey")]

    raw["themeConfig"]["algolia"]["apiKey"] = "key"
    config, issues = load_site_config(raw)
    assert issues == []
    assert config is not None
    assert config.theme.search is not None
    assert config.theme.search.index_name == "vcs"


def test_route_base_read_from_preset() -> None:
    """The docs route base comes from the classic preset options."""
    raw = _raw_config(
        presets=[["classic", {"docs": {"routeBasePath": "/reference/"}}]]
    )
    config, _ = load_site_config(raw)
    assert config is not None
    assert config.docs_route_base == "reference"


def test_loading_twice_is_idempotent() -> None:
    """Loading the same input twice should give equal models."""
    raw = _raw_config()
    first, _ = load_site_config(raw)
    second, _ = load_site_config(copy.deepcopy(raw))
    assert first == second


def _set_nested(raw: dict[str, typ.Any], keys: tuple[str | int, ...], value: object) -> None:
    """Replace the value found by following ``keys`` into ``raw``."""
    target: typ.Any = raw
    for key in keys[:-1]:
        target = target[key]
    target[keys[-1]] = value


@pytest.mark.parametrize(
    ("keys", "value", "expected"),
    [
        (("themeConfig",), "oops", InvalidValue("themeConfig", "must be a mapping")),
        (
            ("themeConfig", "navbar"),
            ["x"],
            InvalidValue("themeConfig.navbar", "must be a mapping"),
        ),
        (
            ("themeConfig", "navbar", "items"),
            "oops",
            InvalidValue("themeConfig.navbar.items", "must be a list"),
        ),
        (
            ("themeConfig", "navbar", "logo"),
            "img/logo.png",
            InvalidValue("themeConfig.navbar.logo", "must be a mapping"),
        ),
        (
            ("themeConfig", "footer"),
            ["x"],
            InvalidValue("themeConfig.footer", "must be a mapping"),
        ),
        (
            ("themeConfig", "footer", "links"),
            "oops",
            InvalidValue("themeConfig.footer.links", "must be a list"),
        ),
        (
            ("themeConfig", "footer", "links", 0, "items"),
            "oops",
            InvalidValue("themeConfig.footer.links[0].items", "must be a list"),
        ),
        (
            ("themeConfig", "prism"),
            "github",
            InvalidValue("themeConfig.prism", "must be a mapping"),
        ),
        (
            ("themeConfig", "prism", "additionalLanguages"),
            "ocaml",
            InvalidValue("themeConfig.prism.additionalLanguages", "must be a list"),
        ),
        (
            ("themeConfig", "algolia"),
            "vcs",
            InvalidValue("themeConfig.algolia", "must be a mapping"),
        ),
        (("i18n",), "en", InvalidValue("i18n", "must be a mapping")),
        (("i18n", "locales"), "en", InvalidValue("i18n.locales", "must be a list")),
    ],
)
def test_mistyped_sections_are_reported(
    keys: tuple[str | int, ...], value: object, expected: InvalidValue
) -> None:
    """A section of the wrong type is one precise issue, never an empty default."""
    raw = _raw_config()
    _set_nested(raw, keys, value)
    config, issues = load_site_config(raw)
    assert config is None
    assert issues == [expected], f"Unexpected issues: {issues!r}"
