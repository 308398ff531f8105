"""Segmented-control components: segment leaf, segment group, and models."""

from .group import GroupNode, SegmentGroup, position_for, render_group, resolve_size
from .models import (
    DEFAULT_SIZE,
    ActivationEvent,
    ActivationTrigger,
    GlyphSlots,
    GroupConfiguration,
    GroupRole,
    Orientation,
    Position,
    SegmentDescriptor,
    Size,
    WidthPolicy,
)
from .segment import Segment, SegmentNode
from .selection import exclusive_selection

__all__ = [
    "DEFAULT_SIZE",
    "ActivationEvent",
    "ActivationTrigger",
    "GlyphSlots",
    "GroupConfiguration",
    "GroupNode",
    "GroupRole",
    "Orientation",
    "Position",
    "Segment",
    "SegmentDescriptor",
    "SegmentGroup",
    "SegmentNode",
    "Size",
    "WidthPolicy",
    "exclusive_selection",
    "position_for",
    "render_group",
    "resolve_size",
]
