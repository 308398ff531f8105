"""Utility helpers shared by the glow_ui configuration loader."""

from __future__ import annotations

import typing as typ

from ..components.models import SEGMENT_KIND
from .models import GalleryConfigError

_EnumT = typ.TypeVar("_EnumT")


def _normalize_classes(value: str | list[object] | None) -> str | None:
    """Normalize class definitions into a single space-separated string."""
    if isinstance(value, str):
        segments = [segment for segment in value.split() if segment]
    elif isinstance(value, list):
        segments = [text for text in (str(item).strip() for item in value) if text]
    else:
        return None
    return " ".join(segments) or None


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_choice(
    parser: typ.Callable[[object], _EnumT],
    value: object | None,
    *,
    where: str,
) -> _EnumT | None:
    """Parse an enum value, re-raising failures as :class:`GalleryConfigError`."""
    if value is None:
        return None
    try:
        return parser(value)
    except ValueError as exc:
        msg = f"{where}: {exc}"
        raise GalleryConfigError(msg) from exc


def _segment_payload(entry: object) -> object:
    """Tag a segment mapping from YAML so the engine recognises it.

    Mappings become tagged segment payloads with their ``class`` list
    normalized. Anything else is passed through unchanged so the engine's
    invalid-child diagnostic reports it at render time.
    """
    if not isinstance(entry, dict):
        return entry
    payload = dict(entry)
    payload.setdefault("kind", SEGMENT_KIND)
    if "class" in payload:
        payload["class"] = _normalize_classes(payload["class"])
    for key in ("label", "accessible_name", "leading_glyph", "trailing_glyph"):
        if key in payload:
            payload[key] = _optional_str(payload[key])
    if payload.get("value") is not None:
        payload["value"] = str(payload["value"])
    return payload


__all__ = [
    "_normalize_classes",
    "_optional_str",
    "_parse_choice",
    "_segment_payload",
]
