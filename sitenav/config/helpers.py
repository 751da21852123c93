"""Utility helpers shared by the sitenav configuration loader."""

from __future__ import annotations

import typing as typ

from ..issues import InvalidEnum, InvalidValue, Issue, MissingField


def _join_path(parent: str, key: str | int) -> str:
    """Extend a dotted field path with a mapping key or list index."""
    if isinstance(key, int):
        return f"{parent}[{key}]"
    return f"{parent}.{key}" if parent else key


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_mapping(
    value: object | None,
    *,
    path: str | None = None,
    issues: list[Issue] | None = None,
) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise an empty one.

    When ``issues`` is given, a value that is present but not a mapping is
    recorded against ``path``.
    """
    match value:
        case dict():
            return value
        case None:
            return {}
        case _:
            if issues is not None:
                issues.append(InvalidValue(path or "", "must be a mapping"))
            return {}


def _as_list(
    value: object | None,
    *,
    path: str | None = None,
    issues: list[Issue] | None = None,
) -> list[typ.Any]:
    """Return ``value`` when it is a list, otherwise an empty list."""
    match value:
        case list() | tuple():
            return list(value)
        case None:
            return []
        case _:
            if issues is not None:
                issues.append(InvalidValue(path or "", "must be a list"))
            return []


def _require_str(
    payload: typ.Mapping[str, typ.Any],
    key: str,
    *,
    parent: str,
    issues: list[Issue],
) -> str:
    """Return a required non-empty string field, recording it when missing."""
    value = _optional_str(payload.get(key))
    if value is None:
        issues.append(MissingField(_join_path(parent, key)))
        return ""
    return value


def _choice(
    payload: typ.Mapping[str, typ.Any],
    key: str,
    allowed: tuple[str, ...],
    *,
    default: str,
    parent: str,
    issues: list[Issue],
) -> str:
    """Return an enumerated field, recording an issue for unknown values."""
    raw = payload.get(key)
    if raw is None:
        return default
    value = str(raw).strip()
    if value not in allowed:
        issues.append(InvalidEnum(_join_path(parent, key), allowed, value))
        return default
    return value


__all__ = [
    "_as_list",
    "_as_mapping",
    "_choice",
    "_join_path",
    "_optional_str",
    "_require_str",
]
