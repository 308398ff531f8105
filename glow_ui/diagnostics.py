"""Diagnostic reporting for non-fatal structural and accessibility problems.

The engine never raises for malformed children; it reports through a
*diagnostic sink*, a single-argument callable receiving a message string.
The default sink forwards to the ``glow_ui`` logger at WARNING level so
problems surface wherever the host application routes its logs.
"""

from __future__ import annotations

import logging
import typing as typ

logger = logging.getLogger("glow_ui")

DiagnosticSink = typ.Callable[[str], None]

INVALID_CHILDREN_MESSAGE = "{count} invalid child(ren) ignored"
MISSING_GROUP_LABEL_MESSAGE = "Segment groups require an accessible label"
MISSING_ACCESSIBLE_NAME_MESSAGE = "Icon-only segments require an accessible name"


def log_sink(message: str) -> None:
    """Default sink: log ``message`` as a warning on the ``glow_ui`` logger."""
    logger.warning(message)


def invalid_children_message(count: int) -> str:
    """Return the batched diagnostic for ``count`` ignored children."""
    return INVALID_CHILDREN_MESSAGE.format(count=count)


class CollectingSink(logging.Handler):
    """Record diagnostics in memory instead of logging them.

    Instances work both as a diagnostic sink (call them with a message) and
    as a logging handler, so accessibility warnings logged by components
    while the handler is attached are captured alongside structural ones.
    """

    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


__all__ = [
    "INVALID_CHILDREN_MESSAGE",
    "MISSING_ACCESSIBLE_NAME_MESSAGE",
    "MISSING_GROUP_LABEL_MESSAGE",
    "CollectingSink",
    "DiagnosticSink",
    "invalid_children_message",
    "log_sink",
    "logger",
]
