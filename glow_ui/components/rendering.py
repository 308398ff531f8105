"""Shared Jinja environment used to turn resolved nodes into HTML."""

from __future__ import annotations

import functools
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


@functools.cache
def template_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    """Return a cached Jinja environment rooted at ``templates_dir``.

    Fragments and the page builder share it: autoescape is on, and blocks
    are trimmed with leading whitespace stripped so fragments stay compact.
    """
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_fragment(template_name: str, **context: object) -> str:
    """Render ``template_name`` from the package templates with ``context``."""
    template = template_environment().get_template(template_name)
    return template.render(**context).strip()


__all__ = ["TEMPLATES_DIR", "render_fragment", "template_environment"]
