"""Typed dataclasses describing glow_ui gallery configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from ..components.models import GroupConfiguration  # noqa: TC001 - runtime field type


class GalleryConfigError(ValueError):
    """Raised when the gallery configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class GroupPageConfig:
    """A fully resolved segment group entry sourced from YAML config."""

    key: str
    title: str
    group: GroupConfiguration
    output_dir: Path
    filename_prefix: str
    stylesheet: str | None = None
    selected: str | None = None

    @property
    def output_path(self) -> Path:
        """Return the HTML file the group page is written to."""
        return self.output_dir / f"{self.filename_prefix}{self.key}.html"


@dc.dataclass(slots=True)
class GalleryConfig:
    """Collection of group page configs alongside shared defaults."""

    groups: dict[str, GroupPageConfig]
    default_group: str | None = None
    output_dir: Path = Path("public")

    def get_group(self, group_id: str | None) -> GroupPageConfig:
        """Return the requested group or fall back to the configured default."""
        if group_id is None:
            return self._get_default_group()
        try:
            return self.groups[group_id]
        except KeyError as exc:
            available = ", ".join(sorted(self.groups))
            msg = f"Unknown group '{group_id}'. Known groups: {available}"
            raise KeyError(msg) from exc

    def _get_default_group(self) -> GroupPageConfig:
        """Return the configured default group or the first defined group."""
        if self.default_group and self.default_group in self.groups:
            return self.groups[self.default_group]
        if not self.groups:  # pragma: no cover - loader rejects empty configs
            msg = "No groups configured in gallery file."
            raise GalleryConfigError(msg)
        return self.groups[next(iter(self.groups))]


__all__ = ["GalleryConfig", "GalleryConfigError", "GroupPageConfig"]
