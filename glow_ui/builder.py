"""glow_ui group page rendering pipeline.

This module turns one configured segment group into a standalone HTML page.
It applies the optional exclusive selection, runs the composition engine,
and writes the rendered fragment inside the ``group_page.jinja`` layout.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from glow_ui.config import load_gallery_config
>>> gallery = load_gallery_config(Path("config/groups.yaml"))  # doctest: +SKIP
>>> GroupPageBuilder(gallery.get_group(None)).run()  # doctest: +SKIP
PosixPath('public/group-view-options.html')

Side effects include reading template files and writing UTF-8 HTML to disk.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from .components import GroupNode, exclusive_selection, render_group
from .components.rendering import TEMPLATES_DIR, template_environment

if typ.TYPE_CHECKING:
    from .config import GroupPageConfig
    from .diagnostics import DiagnosticSink


class GroupPageBuilder:
    """Render a configured segment group into a standalone HTML page."""

    def __init__(
        self,
        page: GroupPageConfig,
        *,
        output_dir: Path | None = None,
        templates_dir: Path | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        """Initialize the builder and resolve the page template.

        Parameters
        ----------
        page : GroupPageConfig
            Parsed group entry from ``config/groups.yaml``.
        output_dir : Path, optional
            Override for ``page.output_dir``.
        templates_dir : Path, optional
            Directory containing the page layout template. Defaults to the
            packaged ``glow_ui/templates`` directory.
        sink : callable, optional
            Diagnostic sink forwarded to the segment group.
        """
        self.page = page
        self.output_dir = output_dir or page.output_dir
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.sink = sink
        self.env = template_environment(self.templates_dir)
        self.template = self.env.get_template("group_page.jinja")

    @property
    def output_path(self) -> Path:
        """Return the file this builder writes."""
        return self.output_dir / self.page.output_path.name

    def build(self) -> GroupNode:
        """Run the composition engine for the configured group."""
        group = self.page.group
        if self.page.selected is not None:
            group = dc.replace(
                group, children=exclusive_selection(group.children, self.page.selected)
            )
        return render_group(group, sink=self.sink)

    def run(self) -> Path:
        """Render and write the group page, returning the output path."""
        output_path = self.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        context = {
            "key": self.page.key,
            "page_title": self.page.title,
            "stylesheet": self.page.stylesheet,
            "group": self.build(),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = ["GroupPageBuilder"]
