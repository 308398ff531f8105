"""Load and validate gallery configuration YAML for glow_ui page builds.

This subpackage parses the project's ``groups.yaml`` file, merges global
defaults with per-group overrides, tags segment entries for the engine, and
produces typed dataclasses (:class:`GalleryConfig`, :class:`GroupPageConfig`)
that the page builder consumes. The primary entry point is
:func:`load_gallery_config`.

Examples
--------
>>> from pathlib import Path
>>> from glow_ui.config import load_gallery_config
>>> gallery = load_gallery_config(Path("config/groups.yaml"))  # doctest: +SKIP
>>> gallery.get_group("view-options").output_path  # doctest: +SKIP
PosixPath('public/group-view-options.html')
"""

from .loader import load_gallery_config
from .models import GalleryConfig, GalleryConfigError, GroupPageConfig

__all__ = [
    "GalleryConfig",
    "GalleryConfigError",
    "GroupPageConfig",
    "load_gallery_config",
]
