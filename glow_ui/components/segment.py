"""Segment leaf: one focusable, clickable unit of a segmented control.

A segment does no layout reasoning of its own. The container hands it a
resolved size and position; :meth:`Segment.render` turns those plus the
descriptor into a :class:`SegmentNode` carrying the final class string,
ARIA attributes, and activation wiring.

Examples
--------
>>> from glow_ui.components import Position, SegmentDescriptor, Size
>>> node = Segment.render(SegmentDescriptor(label="List"), Size.SMALL, Position.FIRST)
>>> "rounded-l-sm" in node.class_list
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ..diagnostics import MISSING_ACCESSIBLE_NAME_MESSAGE
from ..styles import (
    ClassVariants,
    CompoundVariant,
    merge_classes,
    strip_property_groups,
)
from .glyphs import GlyphNode, resolve_glyph
from .models import (
    ActivationEvent,
    ActivationTrigger,
    Position,
    SegmentDescriptor,
    Size,
)
from .rendering import render_fragment

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

# Rounding comes only from the position variant.
SEGMENT_VARIANTS = ClassVariants(
    base=" ".join(
        [
            "inline-flex items-center justify-center gap-2",
            "cursor-pointer",
            "font-medium",
            "border border-border",
            "bg-background",
            "text-text-tertiary",
            "transition-colors duration-150",
            "focus-visible:ring-2 focus-visible:ring-primary",
            "focus-visible:ring-offset-2 focus-visible:outline-none",
            "disabled:pointer-events-none disabled:cursor-not-allowed",
            "disabled:border-border-disabled disabled:bg-background",
            "disabled:text-text-secondary disabled:opacity-52",
        ]
    ),
    variants={
        "size": {
            Size.SMALL: "h-8 px-3 py-2 text-sm",
            Size.MEDIUM: "h-10 px-3.5 py-2.5 text-base",
            Size.LARGE: "h-12 px-4 py-3 text-base",
        },
        "position": {
            Position.FIRST: "rounded-l-sm",
            Position.MIDDLE: "",
            Position.LAST: "rounded-r-sm",
            Position.ONLY: "rounded-sm",
        },
        "selected": {
            True: "bg-fill-tertiary text-text-subtle",
            False: "",
        },
    },
    defaults={"size": Size.MEDIUM, "position": Position.MIDDLE, "selected": False},
    compounds=(
        CompoundVariant(
            when={"selected": False},
            classes="hover:border-border-hover hover:text-text-subtle",
        ),
    ),
)

ICON_ONLY_CLASSES = "aspect-square px-0"
ACTIVATION_KEYS = frozenset({"Enter", " ", "Space", "Spacebar"})


@dc.dataclass(slots=True)
class SegmentNode:
    """A rendered segment: resolved attributes plus activation handling."""

    descriptor: SegmentDescriptor
    size: Size
    position: Position
    classes: str
    leading_glyph: GlyphNode | None = None
    trailing_glyph: GlyphNode | None = None

    @property
    def class_list(self) -> list[str]:
        """Return the resolved classes as a list."""
        return self.classes.split()

    @property
    def label(self) -> str | None:
        return self.descriptor.label

    @property
    def selected(self) -> bool:
        return self.descriptor.selected

    @property
    def disabled(self) -> bool:
        return self.descriptor.disabled

    @property
    def is_icon_only(self) -> bool:
        return self.descriptor.is_icon_only

    @property
    def attributes(self) -> dict[str, str | None]:
        """Return the HTML attributes emitted on the ``<button>`` element.

        ``None`` values are omitted by the template.
        """
        return {
            "type": "button",
            "class": self.classes,
            "aria-label": self.descriptor.accessible_name,
            "aria-pressed": "true" if self.selected else "false",
            "aria-disabled": "true" if self.disabled else None,
            "disabled": "disabled" if self.disabled else None,
            "data-position": self.position.value,
            "data-size": self.size.value,
        }

    def click(self) -> bool:
        """Simulate a pointer click; return True when the callback fired."""
        return self.dispatch(ActivationTrigger.POINTER)

    def press_key(self, key: str) -> bool:
        """Simulate a key press while focused.

        Only ``Enter`` and ``Space`` activate a segment; other keys are
        ignored and return False.
        """
        if key not in ACTIVATION_KEYS:
            return False
        return self.dispatch(ActivationTrigger.KEYBOARD, key=key)

    def dispatch(
        self,
        trigger: ActivationTrigger | str = ActivationTrigger.PROGRAMMATIC,
        *,
        key: str | None = None,
    ) -> bool:
        """Activate the segment through ``trigger``.

        Every activation path funnels through here, so a disabled segment
        never invokes its callback however it is triggered.
        """
        callback = self.descriptor.activate
        if self.disabled or callback is None:
            return False
        event = ActivationEvent(
            trigger=ActivationTrigger.parse(trigger), segment=self, key=key
        )
        callback(event)
        return True

    def to_html(self) -> str:
        """Render the segment as a ``<button>`` element."""
        return render_fragment("segment.jinja", segment=self)


class Segment:
    """Presentation function for a single segment."""

    @staticmethod
    def classes_for(
        descriptor: SegmentDescriptor,
        size: Size,
        position: Position,
        extra_classes: cabc.Sequence[str | None | bool] = (),
    ) -> str:
        """Compute the merged class string for a segment.

        Engine classes come first, then container modifiers, then the
        caller's ``class_name``. Every rounding utility in ``class_name``
        (sides, corners, arbitrary values, important or variant-prefixed) is
        dropped so the position geometry cannot be overridden.
        """
        variant_classes = SEGMENT_VARIANTS(
            size=size, position=position, selected=descriptor.selected
        )
        override = strip_property_groups(descriptor.class_name, "rounded")
        return merge_classes(
            variant_classes,
            [descriptor.is_icon_only and ICON_ONLY_CLASSES, *extra_classes],
            override,
        )

    @classmethod
    def render(
        cls,
        descriptor: SegmentDescriptor,
        size: Size,
        position: Position,
        *,
        extra_classes: cabc.Sequence[str | None | bool] = (),
    ) -> SegmentNode:
        """Render ``descriptor`` with an already resolved size and position."""
        if descriptor.is_icon_only and not descriptor.accessible_name:
            logger.warning(MISSING_ACCESSIBLE_NAME_MESSAGE)
        return SegmentNode(
            descriptor=descriptor,
            size=size,
            position=position,
            classes=cls.classes_for(descriptor, size, position, extra_classes),
            leading_glyph=resolve_glyph(descriptor.glyphs.leading, size, "leading"),
            trailing_glyph=resolve_glyph(
                descriptor.glyphs.trailing, size, "trailing"
            ),
        )


__all__ = [
    "ACTIVATION_KEYS",
    "ICON_ONLY_CLASSES",
    "SEGMENT_VARIANTS",
    "Segment",
    "SegmentNode",
]
