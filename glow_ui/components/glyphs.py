"""Decorative glyph placeholders rendered inside segments.

Glyph identifiers are opaque to the engine; they are emitted as
``aria-hidden`` spans carrying a ``data-glyph`` attribute that the host
stylesheet or icon sprite resolves. The span size follows the segment size.
"""

from __future__ import annotations

import dataclasses as dc

from ..styles import ClassVariants
from .models import Size

GLYPH_VARIANTS = ClassVariants(
    base="inline-flex shrink-0",
    variants={
        "size": {
            "xs": "size-3",
            Size.SMALL: "size-4",
            Size.MEDIUM: "size-5",
            Size.LARGE: "size-6",
            "xl": "size-8",
        },
    },
    defaults={"size": Size.MEDIUM},
)


@dc.dataclass(frozen=True, slots=True)
class GlyphNode:
    """A resolved glyph slot ready for the segment template."""

    name: str
    classes: str
    slot: str


def resolve_glyph(name: str | None, size: Size, slot: str) -> GlyphNode | None:
    """Return the glyph node for ``name`` or None when the slot is empty."""
    if not name:
        return None
    return GlyphNode(name=name, classes=GLYPH_VARIANTS(size=size), slot=slot)


__all__ = ["GLYPH_VARIANTS", "GlyphNode", "resolve_glyph"]
