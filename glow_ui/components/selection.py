"""Opt-in single-selection helper for segment groups.

The engine renders whatever ``selected`` flags it is given, including
several selected segments at once. Callers that want radio-style behaviour
pass their children through :func:`exclusive_selection` before rendering.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .models import as_descriptor, is_segment

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def exclusive_selection(
    children: cabc.Iterable[object], selected_value: str | None
) -> list[object]:
    """Return ``children`` with only segments valued ``selected_value`` selected.

    Segment entries are converted to descriptors with ``selected`` set to
    whether their ``value`` equals ``selected_value``; passing ``None``
    clears every selection. Nested lists are preserved and non-segment
    entries are returned untouched so the group still reports them.
    """
    result: list[object] = []
    for entry in children:
        if isinstance(entry, list | tuple):
            result.append(exclusive_selection(entry, selected_value))
        elif is_segment(entry):
            descriptor = as_descriptor(entry)
            is_selected = (
                selected_value is not None and descriptor.value == selected_value
            )
            result.append(dc.replace(descriptor, selected=is_selected))
        else:
            result.append(entry)
    return result


__all__ = ["exclusive_selection"]
