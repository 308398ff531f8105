"""Segment group container: the segmented-control composition engine.

:class:`SegmentGroup` owns an ordered, possibly nested collection of child
entries and turns it into a :class:`GroupNode` in one stateless pass:

1. flatten and filter the children, counting entries that are not segments
   and reporting them through the diagnostic sink in a single message;
2. assign each remaining segment a position (``first``/``middle``/``last``
   or ``only``) from its index alone;
3. resolve each segment's size (own override, then group size, then the
   engine default);
4. add the border-overlap modifier to every segment after the first;
5. apply the width policy (``fill`` stretches the container and gives each
   segment an equal flex share);
6. render each segment through :class:`~glow_ui.components.segment.Segment`.

Nothing is cached between renders, so reordering or resizing the child list
always yields freshly derived positions.

Examples
--------
>>> from glow_ui.components import GroupConfiguration, SegmentDescriptor
>>> config = GroupConfiguration(
...     accessible_label="View options",
...     children=[SegmentDescriptor(label="List"), SegmentDescriptor(label="Grid")],
... )
>>> [node.position.value for node in render_group(config).segments]
['first', 'last']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ..diagnostics import (
    MISSING_GROUP_LABEL_MESSAGE,
    DiagnosticSink,
    invalid_children_message,
    log_sink,
)
from ..styles import ClassVariants, merge_classes
from .models import (
    DEFAULT_SIZE,
    GroupConfiguration,
    Position,
    SegmentDescriptor,
    Size,
    WidthPolicy,
    as_descriptor,
    is_segment,
)
from .rendering import render_fragment
from .segment import Segment, SegmentNode

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

GROUP_VARIANTS = ClassVariants(
    base="isolate inline-flex",
    variants={"width": {WidthPolicy.HUG: "", WidthPolicy.FILL: "w-full"}},
    defaults={"width": WidthPolicy.HUG},
)

ADJACENCY_CLASS = "-ml-px"
FILL_SHARE_CLASS = "flex-1"


def position_for(index: int, total: int) -> Position:
    """Return the position of the entry at ``index`` in a list of ``total``."""
    if total == 1:
        return Position.ONLY
    if index == 0:
        return Position.FIRST
    if index == total - 1:
        return Position.LAST
    return Position.MIDDLE


def resolve_size(override: Size | None, group_size: Size | None) -> Size:
    """Resolve a segment size: own override, then group size, then default."""
    if override is not None:
        return override
    if group_size is not None:
        return group_size
    return DEFAULT_SIZE


def _is_omitted(entry: object) -> bool:
    """Return True for conditional-rendering no-ops that are skipped silently."""
    return entry is None or entry is False


def _flatten(children: cabc.Iterable[object]) -> cabc.Iterator[object]:
    for entry in children:
        if isinstance(entry, list | tuple):
            yield from _flatten(entry)
        else:
            yield entry


def partition_children(
    children: cabc.Iterable[object],
) -> tuple[list[SegmentDescriptor], int]:
    """Split ``children`` into ordered segment descriptors and an invalid count.

    Nested lists and tuples are flattened in order. ``None`` and ``False``
    are dropped without being counted; every other non-segment entry
    increments the invalid count.
    """
    valid: list[SegmentDescriptor] = []
    invalid = 0
    for entry in _flatten(children):
        if _is_omitted(entry):
            continue
        if is_segment(entry):
            valid.append(as_descriptor(entry))
        else:
            invalid += 1
    return valid, invalid


@dc.dataclass(slots=True)
class GroupNode:
    """A rendered segment group: container attributes plus segment nodes."""

    config: GroupConfiguration
    classes: str
    segments: list[SegmentNode]
    invalid_count: int = 0

    @property
    def class_list(self) -> list[str]:
        """Return the resolved container classes as a list."""
        return self.classes.split()

    @property
    def attributes(self) -> dict[str, str | None]:
        """Return the HTML attributes emitted on the container ``<div>``."""
        return {
            "role": self.config.role.value,
            "aria-label": self.config.accessible_label,
            "aria-orientation": self.config.orientation.value,
            "class": self.classes,
        }

    def to_html(self) -> str:
        """Render the container and its segments as HTML."""
        return render_fragment("segment_group.jinja", group=self)


class SegmentGroup:
    """Compose a segmented control from a :class:`GroupConfiguration`."""

    def __init__(
        self, config: GroupConfiguration, *, sink: DiagnosticSink | None = None
    ) -> None:
        """Initialize the group.

        Parameters
        ----------
        config : GroupConfiguration
            Container settings and the caller's child entries. The group only
            reads it; nothing is retained once :meth:`render` returns.
        sink : callable, optional
            Receives the batched invalid-children diagnostic. Defaults to
            :func:`glow_ui.diagnostics.log_sink`.
        """
        self.config = config
        self.sink = sink or log_sink

    def render(self) -> GroupNode:
        """Run the composition pass and return the rendered group."""
        config = self.config
        if not config.accessible_label:
            logger.warning(MISSING_GROUP_LABEL_MESSAGE)

        descriptors, invalid = partition_children(config.children)
        if invalid > 0:
            self.sink(invalid_children_message(invalid))

        fill = config.width is WidthPolicy.FILL
        total = len(descriptors)
        segments = [
            Segment.render(
                descriptor,
                resolve_size(descriptor.size, config.size),
                position_for(index, total),
                extra_classes=[
                    index > 0 and ADJACENCY_CLASS,
                    fill and FILL_SHARE_CLASS,
                ],
            )
            for index, descriptor in enumerate(descriptors)
        ]
        return GroupNode(
            config=config,
            classes=merge_classes(
                GROUP_VARIANTS(width=config.width), (), config.class_name
            ),
            segments=segments,
            invalid_count=invalid,
        )


def render_group(
    config: GroupConfiguration, *, sink: DiagnosticSink | None = None
) -> GroupNode:
    """Render ``config`` in one call; see :class:`SegmentGroup`."""
    return SegmentGroup(config, sink=sink).render()


__all__ = [
    "ADJACENCY_CLASS",
    "FILL_SHARE_CLASS",
    "GROUP_VARIANTS",
    "GroupNode",
    "SegmentGroup",
    "partition_children",
    "position_for",
    "render_group",
    "resolve_size",
]
