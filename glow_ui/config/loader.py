"""Load gallery configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ..components.models import (
    GroupConfiguration,
    GroupRole,
    Orientation,
    Size,
    WidthPolicy,
)
from .helpers import (
    _normalize_classes,
    _optional_str,
    _parse_choice,
    _segment_payload,
)
from .models import GalleryConfig, GalleryConfigError, GroupPageConfig


def load_gallery_config(path: Path) -> GalleryConfig:
    """Load the YAML configuration describing segment groups to render.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/groups.yaml``).

    Returns
    -------
    GalleryConfig
        Parsed configuration with one :class:`GroupPageConfig` per group,
        defaults already applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    GalleryConfigError
        If no groups are defined, a group's ``segments`` is not a list, or a
        size, width, role, or orientation value is unknown.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_gallery_config(Path("config/groups.yaml"))  # doctest: +SKIP
    >>> config.get_group("view-options").group.role  # doctest: +SKIP
    <GroupRole.RADIOGROUP: 'radiogroup'>
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}

    group_defaults = _GroupDefaults(
        output_dir=Path(defaults.get("output_dir", "public")),
        filename_prefix=defaults.get("filename_prefix", "group-"),
        stylesheet=_optional_str(defaults.get("stylesheet")),
        size=_parse_choice(Size.parse, defaults.get("size"), where="defaults.size"),
        width=_parse_choice(
            WidthPolicy.parse, defaults.get("width"), where="defaults.width"
        )
        or WidthPolicy.HUG,
    )

    groups_raw = raw.get("groups") or {}
    if not groups_raw:
        msg = "No groups defined in gallery configuration."
        raise GalleryConfigError(msg)

    groups: dict[str, GroupPageConfig] = {}
    for key, payload in groups_raw.items():
        match payload:
            case dict():
                groups[key] = _build_group_config(
                    key=str(key), payload=payload, defaults=group_defaults
                )
            case _:
                continue

    return GalleryConfig(
        groups=groups,
        default_group=defaults.get("default_group"),
        output_dir=group_defaults.output_dir,
    )


@dc.dataclass(slots=True)
class _GroupDefaults:
    """Internal container for group default configuration values."""

    output_dir: Path
    filename_prefix: str
    stylesheet: str | None
    size: Size | None
    width: WidthPolicy


def _build_segments(key: str, payload: typ.Mapping[str, typ.Any]) -> list[object]:
    """Return the child entries of a group, tagging and validating segments."""
    segments_raw = payload.get("segments") or []
    if not isinstance(segments_raw, list):
        msg = f"Group '{key}' must define 'segments' as a list."
        raise GalleryConfigError(msg)
    children: list[object] = []
    for index, entry in enumerate(segments_raw):
        child = _segment_payload(entry)
        if isinstance(child, dict) and child.get("size") is not None:
            where = f"groups.{key}.segments[{index}].size"
            child["size"] = _parse_choice(Size.parse, child["size"], where=where)
        children.append(child)
    return children


def _build_group_config(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    defaults: _GroupDefaults,
) -> GroupPageConfig:
    """Build a GroupPageConfig for a single group entry using defaults."""
    where = f"groups.{key}"
    label = _optional_str(payload.get("label"))
    size = _parse_choice(Size.parse, payload.get("size"), where=f"{where}.size")
    width = _parse_choice(
        WidthPolicy.parse, payload.get("width"), where=f"{where}.width"
    )
    role = _parse_choice(GroupRole.parse, payload.get("role"), where=f"{where}.role")
    orientation = _parse_choice(
        Orientation.parse, payload.get("orientation"), where=f"{where}.orientation"
    )

    group = GroupConfiguration(
        accessible_label=label,
        children=_build_segments(key, payload),
        size=size or defaults.size,
        width=width or defaults.width,
        role=role or GroupRole.GROUP,
        orientation=orientation or Orientation.HORIZONTAL,
        class_name=_normalize_classes(payload.get("class")),
    )
    return GroupPageConfig(
        key=key,
        title=payload.get("title") or label or key.replace("-", " ").title(),
        group=group,
        output_dir=Path(payload.get("output_dir", defaults.output_dir)),
        filename_prefix=payload.get("filename_prefix", defaults.filename_prefix),
        stylesheet=_optional_str(payload.get("stylesheet")) or defaults.stylesheet,
        selected=_optional_str(payload.get("selected")),
    )


__all__ = ["load_gallery_config"]
