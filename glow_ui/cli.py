"""Cyclopts CLI entrypoint for rendering and checking glow_ui segment groups.

The ``glow`` console script defined here renders configured segment groups to
standalone HTML pages and audits them for structural and accessibility
problems. Typical usage runs ``glow check`` in CI and ``glow render`` when
publishing component previews.

Examples
--------
Render every configured group:

>>> from glow_ui.cli import main
>>> main()  # doctest: +SKIP

Render a single group into a custom directory:

>>> from glow_ui.cli import app
>>> app(["render", "--group", "view-options", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import GroupPageBuilder
from .config import load_gallery_config
from .diagnostics import CollectingSink, logger

DEFAULT_CONFIG = Path("config/groups.yaml")

app = App(name="glow", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render configured segment groups to standalone HTML pages.")
def render(
    *,
    group: typ.Annotated[
        str | None, Parameter(help="Group identifier", env_var="INPUT_GROUP")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to gallery config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Render segment group pages for the requested gallery configuration.

    Parameters
    ----------
    group : str or None, optional
        Specific group key to render; when ``None`` (default) all groups are
        rendered.
    config : Path, optional
        Path to the ``groups.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override output directory for single-group rendering.

    Raises
    ------
    ValueError
        If ``output_dir`` is supplied when more than one group is rendered.
    """
    gallery = load_gallery_config(config)

    if group:
        target_groups = [gallery.get_group(group)]
    else:
        target_groups = list(gallery.groups.values())

    if len(target_groups) > 1 and output_dir:
        msg = "Cannot override output_dir when rendering multiple groups."
        raise ValueError(msg)

    for page in target_groups:
        written = GroupPageBuilder(page, output_dir=output_dir).run()
        print(f"wrote {_format_path(written)}")


@app.command(help="Report structural and accessibility problems in segment groups.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to gallery config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Render every configured group in memory and print its diagnostics.

    Raises
    ------
    SystemExit
        With status 1 when any group reported a diagnostic.
    """
    gallery = load_gallery_config(config)
    problems = 0
    for key, page in gallery.groups.items():
        collector = CollectingSink()
        logger.addHandler(collector)
        try:
            GroupPageBuilder(page, sink=collector).build()
        finally:
            logger.removeHandler(collector)
        for message in collector.messages:
            print(f"{key}: {message}")
        problems += len(collector.messages)

    print(f"checked {len(gallery.groups)} group(s), {problems} problem(s)")
    if problems:
        raise SystemExit(1)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``glow`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
