"""Segmented-control components rendered to HTML with utility classes.

This package exposes the segment group composition engine together with the
``glow`` CLI used to render and audit configured groups.

Exports
-------
- ``SegmentGroup`` / ``render_group``: compose a segmented control.
- ``SegmentDescriptor`` / ``GroupConfiguration``: engine inputs.
- ``merge_classes`` / ``cn``: utility-class merging.
- ``app`` / ``main``: Cyclopts application entry points.

Examples
--------
>>> from glow_ui import GroupConfiguration, SegmentDescriptor, render_group
>>> node = render_group(
...     GroupConfiguration("Views", children=[SegmentDescriptor(label="List")])
... )
>>> node.segments[0].position.value
'only'
"""

from __future__ import annotations

from .cli import app, main
from .components import (
    GlyphSlots,
    GroupConfiguration,
    GroupRole,
    Position,
    Segment,
    SegmentDescriptor,
    SegmentGroup,
    Size,
    WidthPolicy,
    exclusive_selection,
    render_group,
)
from .styles import cn, merge_classes

__all__ = [
    "GlyphSlots",
    "GroupConfiguration",
    "GroupRole",
    "Position",
    "Segment",
    "SegmentDescriptor",
    "SegmentGroup",
    "Size",
    "WidthPolicy",
    "app",
    "cn",
    "exclusive_selection",
    "main",
    "merge_classes",
    "render_group",
]
